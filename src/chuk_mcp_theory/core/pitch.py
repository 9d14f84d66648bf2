"""
Pitch primitive - a spelled note in a specific octave.

Octave numbers follow scientific pitch notation: they change between B and C,
and C4 = MIDI 60. Octave belongs to the letter, not the sound, so B#4 sounds
the same as C5 and Cb4 sounds the same as B3.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_theory.constants import (
    A4_FREQUENCY,
    A4_MIDI,
    LETTERS_PER_OCTAVE,
    MIDI_OCTAVE_OFFSET,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_mcp_theory.errors import ParseError

from .interval import Interval
from .note import Accidental, Letter, NoteName

_PITCH_PATTERN = re.compile(r"^([A-Ga-g])([^\d-]*)(-?\d+)$")


@dataclass(frozen=True)
class Pitch:
    """
    A note name plus an octave.

    Immutable and hashable. Transposition returns a new Pitch.

    Examples:
        Pitch(NoteName.parse("C"), 4) = C4 (MIDI 60)
        Pitch.parse("Eb4").midi_number = 63
    """

    name: NoteName
    octave: int

    @classmethod
    def from_parts(cls, letter: Letter, accidental: Accidental, octave: int) -> Pitch:
        return cls(NoteName(letter, accidental), octave)

    @property
    def letter(self) -> Letter:
        return self.name.letter

    @property
    def accidental(self) -> Accidental:
        return self.name.accidental

    @property
    def pitch_class(self) -> int:
        return self.name.pitch_class

    @property
    def midi_number(self) -> int:
        """MIDI note number (C4 = 60). May fall outside 0-127 for extreme octaves."""
        return (
            SEMITONES_PER_OCTAVE * (self.octave + MIDI_OCTAVE_OFFSET)
            + self.letter.natural_pitch_class
            + self.accidental.offset
        )

    @property
    def diatonic_number(self) -> int:
        """Absolute letter position: 7 per octave, C0 = 0."""
        return self.octave * LETTERS_PER_OCTAVE + self.letter.value

    @property
    def frequency(self) -> float:
        """Frequency in Hz, equal temperament, A4 = 440."""
        return A4_FREQUENCY * 2 ** ((self.midi_number - A4_MIDI) / SEMITONES_PER_OCTAVE)

    def is_enharmonic_with(self, other: Pitch) -> bool:
        """True when both pitches sound the same."""
        return self.midi_number == other.midi_number

    def transpose(self, interval: Interval) -> Pitch:
        """
        Transpose up by an interval.

        F4 + P5 = C5, B4 + M2 = C#5, C#4 + M3 = E#4.

        Raises:
            UnrepresentableAccidental: If the result needs a triple accidental
        """
        from .spelling import spell_pitch

        return spell_pitch(self, interval.steps, interval.semitones)

    def transpose_down(self, interval: Interval) -> Pitch:
        """Transpose down by an interval (C5 - P5 = F4)."""
        from .spelling import spell_pitch

        return spell_pitch(self, -interval.steps, -interval.semitones)

    def transpose_by_semitones(self, semitones: int) -> Pitch:
        """
        Transpose by a semitone count, choosing the letter by the chromatic
        spelling policy (fewest accidentals, then the start note's lean or
        the melodic direction). B4 + 1 = C5, C4 + 1 = C#4, C4 - 1 = B3.
        """
        from .spelling import preferred_generic_steps, spell_pitch

        steps = preferred_generic_steps(self.name, semitones)
        return spell_pitch(self, steps, semitones)

    def interval_to(self, other: Pitch) -> Interval:
        """
        Get the interval between two pitches, compound intervals included.

        The interval is measured from the lower pitch to the higher one.

        Raises:
            InvalidInterval: If the spellings are too far apart to name
        """
        steps = other.diatonic_number - self.diatonic_number
        semitones = other.midi_number - self.midi_number
        if steps < 0 or (steps == 0 and semitones < 0):
            steps, semitones = -steps, -semitones
        return Interval(steps + 1, semitones)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch({self.name!r}, {self.octave})"

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch like 'C4', 'F#-1', 'Bbb5' or 'A♭3'. The octave is required.
        """
        match = _PITCH_PATTERN.match(text.strip())
        if match is None:
            raise ParseError(ErrorMessages.INVALID_PITCH.format(value=text))
        letter, accidental, octave = match.groups()
        try:
            name = NoteName(Letter.parse(letter), Accidental.parse(accidental))
        except ParseError as e:
            raise ParseError(ErrorMessages.INVALID_PITCH.format(value=text)) from e
        return cls(name, int(octave))

    @classmethod
    def from_midi(cls, midi_number: int, prefer_flats: bool = False) -> Pitch:
        """
        Build a pitch from a MIDI note number.

        Naturals where possible; otherwise a sharp (or flat, if preferred) of
        the neighbouring letter. MIDI alone carries no spelling, so use
        transpose or a Scale when context matters.
        """
        octave, pitch_class = divmod(midi_number, SEMITONES_PER_OCTAVE)
        octave -= MIDI_OCTAVE_OFFSET
        for letter in Letter:
            if letter.natural_pitch_class == pitch_class:
                return cls(NoteName(letter), octave)
        if prefer_flats:
            letter = next(le for le in Letter if le.natural_pitch_class == pitch_class + 1)
            return cls(NoteName(letter, Accidental.FLAT), octave)
        letter = next(le for le in Letter if le.natural_pitch_class == pitch_class - 1)
        return cls(NoteName(letter, Accidental.SHARP), octave)
