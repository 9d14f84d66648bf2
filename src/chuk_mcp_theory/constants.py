"""
Constants and enums for the theory engine.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# MIDI numbering: midi = 12 * (octave + MIDI_OCTAVE_OFFSET) + pitch class.
# One offset for the whole system: C4 = 60, A4 = 69.
MIDI_OCTAVE_OFFSET = 1

MIDI_MIN = 0
MIDI_MAX = 127

# Concert pitch reference
A4_MIDI = 69
A4_FREQUENCY = 440.0

SEMITONES_PER_OCTAVE = 12
LETTERS_PER_OCTAVE = 7

# Semitones above the lower note for the major/perfect form of each simple
# generic interval, indexed by letter steps (0 = unison .. 6 = seventh).
DIATONIC_BASELINE: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Letter steps that take perfect/augmented/diminished qualities
PERFECT_CLASS_STEPS: frozenset[int] = frozenset({0, 3, 4})


class AccidentalStyle(str, Enum):
    """How accidentals are rendered as text."""

    ASCII = "ascii"  # b, #, bb, ##
    UNICODE = "unicode"  # ♭, ♯, 𝄫, 𝄪


TransportMode = Literal["stdio", "http"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note name: '{value}'. Expected a letter A-G with optional accidental."
    INVALID_PITCH = "Invalid pitch: '{value}'. Expected a note name followed by an octave, e.g. 'C#4'."
    INVALID_INTERVAL = "Invalid interval: '{value}'. Expected shorthand like 'M3', 'P5' or 'AA4'."
    INVALID_SCALE = "Unknown scale type: '{value}'."
    INVALID_KEY = "Invalid key: '{value}'. Expected format like 'C_major' or 'F#_harmonic_minor'."
    INVALID_DEGREE = "Degree must be 1-7, got {degree}."
