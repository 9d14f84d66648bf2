"""
Note primitives - Letter, Accidental, NoteName.

A NoteName is a spelled pitch class: one of seven letters plus an accidental.
Two spellings of the same pitch class (C# and Db) are enharmonic but not equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import LETTERS_PER_OCTAVE, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_theory.errors import ParseError, UnrepresentableAccidental

from .interval import Interval

# Lookup tables (module level to avoid IntEnum member issues)
_NATURAL_PITCH_CLASS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

_ACCIDENTAL_TOKENS: dict[str, int] = {
    "": 0,
    "n": 0,
    "♮": 0,
    "b": -1,
    "♭": -1,
    "#": 1,
    "♯": 1,
    "bb": -2,
    "♭♭": -2,
    "𝄫": -2,
    "##": 2,
    "♯♯": 2,
    "x": 2,
    "𝄪": 2,
}

_ASCII_ACCIDENTALS: dict[int, str] = {-2: "bb", -1: "b", 0: "", 1: "#", 2: "##"}


class Letter(IntEnum):
    """
    The seven natural note names.

    Values are diatonic positions counted from C, so octave numbers change
    between B and C. Stepping is cyclic modulo 7 in either direction.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def natural_pitch_class(self) -> int:
        """Pitch class of the unaltered letter (C=0 .. B=11)."""
        return _NATURAL_PITCH_CLASS[self.value]

    def step(self, n: int) -> Letter:
        """Move n letters up (or down, if negative), wrapping G-A-B-C."""
        return Letter((self.value + n) % LETTERS_PER_OCTAVE)

    def steps_to(self, other: Letter) -> int:
        """Ascending letter distance to another letter (0-6)."""
        return (other.value - self.value) % LETTERS_PER_OCTAVE

    @classmethod
    def all(cls) -> list[Letter]:
        """All letters in order, starting from C."""
        return list(cls)

    @classmethod
    def parse(cls, name: str) -> Letter:
        """Parse a single letter, case-insensitive."""
        key = name.strip().upper()
        if len(key) != 1 or key not in cls.__members__:
            raise ParseError(f"Invalid letter: '{name}'")
        return cls[key]


class Accidental(IntEnum):
    """Pitch-class modifiers, valued by their semitone offset."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def offset(self) -> int:
        """Semitone offset (-2 to +2)."""
        return int(self.value)

    @property
    def is_sharp(self) -> bool:
        return self.value > 0

    @property
    def is_flat(self) -> bool:
        return self.value < 0

    @property
    def ascii(self) -> str:
        """ASCII form; natural renders as an empty string."""
        return _ASCII_ACCIDENTALS[self.value]

    @classmethod
    def from_offset(cls, offset: int, letter: Letter) -> Accidental:
        """
        Get the accidental for a semitone offset.

        Raises:
            UnrepresentableAccidental: If the offset is outside -2..+2
        """
        if not -2 <= offset <= 2:
            raise UnrepresentableAccidental(letter, offset)
        return cls(offset)

    @classmethod
    def parse(cls, token: str) -> Accidental:
        """Parse 'b', '#', 'bb', '##', 'x', 'n', Unicode glyphs, or '' (natural)."""
        if token not in _ACCIDENTAL_TOKENS:
            raise ParseError(f"Invalid accidental: '{token}'")
        return cls(_ACCIDENTAL_TOKENS[token])


@dataclass(frozen=True)
class NoteName:
    """
    A spelled pitch class: letter plus accidental.

    Immutable and hashable. Equality compares spelling; use
    is_enharmonic_with to compare sound.

    Examples:
        NoteName(Letter.C, Accidental.SHARP) = C#
        NoteName.parse("Bbb") = B double flat
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    @property
    def pitch_class(self) -> int:
        """Sounding pitch class (0-11)."""
        return (self.letter.natural_pitch_class + self.accidental.offset) % SEMITONES_PER_OCTAVE

    def is_enharmonic_with(self, other: NoteName) -> bool:
        """True when both spellings name the same pitch class."""
        return self.pitch_class == other.pitch_class

    def transpose(self, interval: Interval) -> NoteName:
        """Spell the note a given interval above this one."""
        from .spelling import spell

        return spell(self, interval.steps, interval.semitones)

    def transpose_down(self, interval: Interval) -> NoteName:
        """Spell the note a given interval below this one."""
        from .spelling import spell

        return spell(self, -interval.steps, -interval.semitones)

    def transpose_by_semitones(self, semitones: int) -> NoteName:
        """Transpose by semitones using the chromatic spelling policy."""
        from .spelling import spell_by_semitones

        return spell_by_semitones(self, semitones)

    def interval_to(self, other: NoteName) -> Interval:
        """
        Get the ascending interval from this note to another, within an octave.

        The generic size comes from the letters, so C to E# is an augmented
        third while C to F is a perfect fourth.

        Raises:
            InvalidInterval: If the spellings are too far apart to name
        """
        steps = self.letter.steps_to(other.letter)
        return Interval.between(steps, other.pitch_class - self.pitch_class)

    def __str__(self) -> str:
        return f"{self.letter.name}{self.accidental.ascii}"

    def __repr__(self) -> str:
        if self.accidental == Accidental.NATURAL:
            return f"NoteName({self.letter.name})"
        return f"NoteName({self.letter.name}, {self.accidental.name})"

    @classmethod
    def parse(cls, name: str) -> NoteName:
        """
        Parse a note name like 'C', 'c#', 'Eb', 'F##', 'Bbb' or 'G♯'.

        The first character is the letter, the rest is the accidental.
        """
        text = name.strip()
        if not text:
            raise ParseError(ErrorMessages.INVALID_NOTE.format(value=name))
        try:
            letter = Letter.parse(text[0])
            accidental = Accidental.parse(text[1:])
        except ParseError as e:
            raise ParseError(ErrorMessages.INVALID_NOTE.format(value=name)) from e
        return cls(letter, accidental)

    @classmethod
    def natural(cls, letter: Letter) -> NoteName:
        """The unaltered note for a letter."""
        return cls(letter, Accidental.NATURAL)
