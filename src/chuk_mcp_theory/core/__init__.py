"""
Core theory primitives - the spelling layer.

These are the invariants that everything else composes on:
- Letter / Accidental: The seven letters and their semitone modifiers
- NoteName: A spelled pitch class (C# and Db are different notes)
- Interval: Generic size (letters) plus specific size (semitones)
- Pitch: NoteName + octave, with MIDI numbering
- spell / spell_pitch: The spelling engine behind every transposition
- ScaleDegree / ScaleType / Scale: Step patterns applied to a spelled root
- Triad / SeventhChord: Stacked thirds with measured qualities
- Chord / ChordExtension: Extended, altered and inverted chords spelled by interval
"""

from chuk_mcp_theory.core.chord import (
    Chord,
    ChordExtension,
    SeventhChord,
    SeventhQuality,
    Triad,
    TriadQuality,
    diatonic_sevenths,
    diatonic_triads,
    roman_numeral,
    seventh_at_degree,
    triad_at_degree,
)
from chuk_mcp_theory.core.interval import Interval, IntervalQuality
from chuk_mcp_theory.core.note import Accidental, Letter, NoteName
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.core.scale import BUILTIN_SCALE_TYPES, Scale, ScaleDegree, ScaleType
from chuk_mcp_theory.core.spelling import (
    preferred_generic_steps,
    spell,
    spell_by_semitones,
    spell_pitch,
)

__all__ = [
    # Note
    "Letter",
    "Accidental",
    "NoteName",
    # Interval
    "Interval",
    "IntervalQuality",
    # Pitch
    "Pitch",
    # Spelling
    "spell",
    "spell_pitch",
    "spell_by_semitones",
    "preferred_generic_steps",
    # Scale
    "ScaleDegree",
    "ScaleType",
    "Scale",
    "BUILTIN_SCALE_TYPES",
    # Chord
    "TriadQuality",
    "SeventhQuality",
    "Triad",
    "SeventhChord",
    "Chord",
    "ChordExtension",
    "roman_numeral",
    "triad_at_degree",
    "seventh_at_degree",
    "diatonic_triads",
    "diatonic_sevenths",
]
