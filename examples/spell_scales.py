#!/usr/bin/env python3
"""
Example: Spell scales and their diatonic chords.

Shows that every degree is spelled by its letter: F# harmonic minor has
E# as its leading tone, and its third triad is augmented.

Usage:
    python examples/spell_scales.py
"""

from chuk_mcp_theory.constants import AccidentalStyle
from chuk_mcp_theory.core import Interval, NoteName, Pitch, Scale, diatonic_triads
from chuk_mcp_theory.rendering import render_note
from chuk_mcp_theory.scales import ScaleLibrary


def main() -> None:
    """Print a few scales, their triads and some transpositions."""
    unicode = AccidentalStyle.UNICODE

    for name in ["C_major", "D_major", "F#_harmonic_minor", "Eb_dorian", "A_hungarian_minor"]:
        scale = Scale.parse(name)
        notes = " ".join(render_note(n, unicode) for n in scale.notes())
        print(f"{scale}: {notes}")
        for triad in diatonic_triads(scale):
            chord = " ".join(render_note(n, unicode) for n in triad.notes())
            print(f"  {triad.roman:<6} {triad.symbol:<8} {chord}")
        print()

    # Catalog scales come from YAML
    library = ScaleLibrary()
    altered = library.get_scale("G", "altered")
    print(f"{altered}: {' '.join(render_note(n, unicode) for n in altered.notes())}\n")

    # Interval transposition keeps the letter
    c_sharp = NoteName.parse("C#")
    print(f"C# + M3 = {c_sharp.transpose(Interval.M3)}")
    print(f"F4 + P5 = {Pitch.parse('F4').transpose(Interval.P5)}")

    # Semitone transposition chooses the letter by policy
    for start, semitones in [("B4", 1), ("C4", -1), ("Db4", 2)]:
        print(f"{start} {semitones:+d} = {Pitch.parse(start).transpose_by_semitones(semitones)}")


if __name__ == "__main__":
    main()
