#!/usr/bin/env python3
"""
Example: Export spelled scales and chords to MIDI.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/generate_midi.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_theory.compiler.midi import scale_to_midi, triads_to_midi
from chuk_mcp_theory.core import Scale, diatonic_triads


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: Scale run up and back down
    print("Generating f_sharp_harmonic_minor.mid...")
    mid = scale_to_midi(Scale.parse("F#_harmonic_minor"), octave=4, descending=True)
    mid.save(str(output_dir / "f_sharp_harmonic_minor.mid"))
    print(f"  Created: {output_dir / 'f_sharp_harmonic_minor.mid'}")

    # Example 2: i-VI-III-VII in D minor as block chords
    print("\nGenerating d_minor_progression.mid...")
    triads = diatonic_triads(Scale.parse("D_minor"))
    progression = [triads[0], triads[5], triads[2], triads[6]]
    mid = triads_to_midi(progression, octave=3, tempo_bpm=96)
    mid.save(str(output_dir / "d_minor_progression.mid"))
    print(f"  Created: {output_dir / 'd_minor_progression.mid'}")
    print(f"  Chords: {' '.join(t.symbol for t in progression)}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
