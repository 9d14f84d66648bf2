"""
Interval primitives - IntervalQuality and Interval.

An interval is a generic size (how many letters it spans, counted inclusively)
plus a specific size (how many semitones). Quality is derived from how far the
semitone count sits from the diatonic baseline for that generic size.

C-E is a major third (3, 4); C-Fb is a diminished fourth (4, 4).
Same semitones, different intervals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_theory.constants import (
    DIATONIC_BASELINE,
    LETTERS_PER_OCTAVE,
    PERFECT_CLASS_STEPS,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_mcp_theory.errors import InvalidInterval


class IntervalQuality(str, Enum):
    """Interval qualities, valued by their shorthand symbol."""

    DOUBLY_DIMINISHED = "dd"
    DIMINISHED = "d"
    MINOR = "m"
    PERFECT = "P"
    MAJOR = "M"
    AUGMENTED = "A"
    DOUBLY_AUGMENTED = "AA"

    @property
    def long_name(self) -> str:
        return self.name.lower().replace("_", " ")


# Deviation from the baseline -> quality
_PERFECT_QUALITIES: dict[int, IntervalQuality] = {
    -2: IntervalQuality.DOUBLY_DIMINISHED,
    -1: IntervalQuality.DIMINISHED,
    0: IntervalQuality.PERFECT,
    1: IntervalQuality.AUGMENTED,
    2: IntervalQuality.DOUBLY_AUGMENTED,
}
_IMPERFECT_QUALITIES: dict[int, IntervalQuality] = {
    -3: IntervalQuality.DOUBLY_DIMINISHED,
    -2: IntervalQuality.DIMINISHED,
    -1: IntervalQuality.MINOR,
    0: IntervalQuality.MAJOR,
    1: IntervalQuality.AUGMENTED,
    2: IntervalQuality.DOUBLY_AUGMENTED,
}

_ORDINALS: tuple[str, ...] = (
    "unison",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "octave",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
)

_SHORTHAND = re.compile(r"^(P|M|m|A+|d+)(\d+)$")


def baseline_semitones(generic_size: int) -> int:
    """Semitones of the major or perfect interval with this generic size."""
    steps = generic_size - 1
    octaves, simple = divmod(steps, LETTERS_PER_OCTAVE)
    return DIATONIC_BASELINE[simple] + SEMITONES_PER_OCTAVE * octaves


def is_perfect_class(generic_size: int) -> bool:
    """Unisons, fourths, fifths and their compounds take perfect qualities."""
    return (generic_size - 1) % LETTERS_PER_OCTAVE in PERFECT_CLASS_STEPS


@total_ordering
@dataclass(frozen=True)
class Interval:
    """
    An ascending interval: generic size plus semitones.

    Validated at construction - a pairing outside doubly-diminished ..
    doubly-augmented raises InvalidInterval, so everything downstream can
    assume a well-formed interval.

    Immutable and hashable.

    Examples:
        Interval(3, 4) = major third
        Interval(5, 7) = perfect fifth
        Interval(4, 6) = augmented fourth
        Interval(3, 5) = augmented third (C-E#)
    """

    generic_size: int
    semitones: int

    # Named intervals (class constants)
    PERFECT_UNISON: ClassVar[Interval]
    AUGMENTED_UNISON: ClassVar[Interval]
    DIMINISHED_SECOND: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    AUGMENTED_SECOND: ClassVar[Interval]
    DIMINISHED_THIRD: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    AUGMENTED_THIRD: ClassVar[Interval]
    DIMINISHED_FOURTH: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    DIMINISHED_SIXTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    AUGMENTED_SIXTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    AUGMENTED_SEVENTH: ClassVar[Interval]
    DIMINISHED_OCTAVE: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    AUGMENTED_OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    AUGMENTED_NINTH: ClassVar[Interval]
    MINOR_TENTH: ClassVar[Interval]
    MAJOR_TENTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    AUGMENTED_ELEVENTH: ClassVar[Interval]
    PERFECT_TWELFTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        if self.generic_size < 1:
            raise InvalidInterval(
                f"Generic size must be >= 1, got {self.generic_size}",
                self.generic_size,
                self.semitones,
            )
        table = _PERFECT_QUALITIES if is_perfect_class(self.generic_size) else _IMPERFECT_QUALITIES
        if self.deviation not in table:
            raise InvalidInterval(
                f"{self.semitones} semitones cannot form a {self._ordinal()} "
                "(beyond doubly augmented/diminished)",
                self.generic_size,
                self.semitones,
            )

    @classmethod
    def from_semitones_and_generic(cls, semitones: int, generic_size: int) -> Interval:
        """Create an interval, validating the semitone/generic pairing."""
        return cls(generic_size, semitones)

    @classmethod
    def from_quality(cls, quality: IntervalQuality, generic_size: int) -> Interval:
        """
        Create an interval from its quality and generic size.

        Raises:
            InvalidInterval: For perfect seconds, major fifths and the like
        """
        table = _PERFECT_QUALITIES if is_perfect_class(generic_size) else _IMPERFECT_QUALITIES
        for deviation, q in table.items():
            if q == quality:
                return cls(generic_size, baseline_semitones(generic_size) + deviation)
        raise InvalidInterval(
            f"A {generic_size}-step interval cannot be {quality.long_name}",
            generic_size,
        )

    @classmethod
    def between(cls, steps: int, semitones: int) -> Interval:
        """
        Create the interval spanning `steps` letters whose semitone count is
        congruent to `semitones` modulo 12, picking the nearest to the baseline.
        """
        generic_size = steps + 1
        baseline = baseline_semitones(generic_size)
        half = SEMITONES_PER_OCTAVE // 2
        deviation = (semitones - baseline + half) % SEMITONES_PER_OCTAVE - half
        return cls(generic_size, baseline + deviation)

    @classmethod
    def parse(cls, shorthand: str) -> Interval:
        """
        Parse shorthand like 'P1', 'm3', 'M9', 'A4', 'dd5', 'AA4'.

        Raises:
            InvalidInterval: If the text is malformed or names an impossible interval
        """
        match = _SHORTHAND.match(shorthand.strip())
        if match is None:
            raise InvalidInterval(ErrorMessages.INVALID_INTERVAL.format(value=shorthand))
        symbol, number = match.groups()
        generic_size = int(number)
        if generic_size == 0:
            raise InvalidInterval(ErrorMessages.INVALID_INTERVAL.format(value=shorthand))
        try:
            quality = IntervalQuality(symbol)
        except ValueError:
            raise InvalidInterval(ErrorMessages.INVALID_INTERVAL.format(value=shorthand)) from None
        return cls.from_quality(quality, generic_size)

    @property
    def steps(self) -> int:
        """Letter steps spanned (generic size minus one)."""
        return self.generic_size - 1

    @property
    def deviation(self) -> int:
        """Semitones above (+) or below (-) the major/perfect baseline."""
        return self.semitones - baseline_semitones(self.generic_size)

    @property
    def is_perfect_class(self) -> bool:
        return is_perfect_class(self.generic_size)

    @property
    def quality(self) -> IntervalQuality:
        table = _PERFECT_QUALITIES if self.is_perfect_class else _IMPERFECT_QUALITIES
        return table[self.deviation]

    @property
    def is_compound(self) -> bool:
        """Larger than an octave."""
        return self.generic_size > LETTERS_PER_OCTAVE + 1

    def simple(self) -> Interval:
        """Reduce a compound interval to within an octave (M9 -> M2)."""
        generic_size, semitones = self.generic_size, self.semitones
        while generic_size > LETTERS_PER_OCTAVE + 1:
            generic_size -= LETTERS_PER_OCTAVE
            semitones -= SEMITONES_PER_OCTAVE
        return Interval(generic_size, semitones)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6, P5 -> P4, A4 -> d5, P1 <-> P8
        """
        simple = self.simple()
        return Interval(
            LETTERS_PER_OCTAVE + 2 - simple.generic_size,
            SEMITONES_PER_OCTAVE - simple.semitones,
        )

    @property
    def name(self) -> str:
        """Full name, e.g. 'major third', 'doubly augmented fourth'."""
        return f"{self.quality.long_name} {self._ordinal()}"

    def _ordinal(self) -> str:
        if self.generic_size <= len(_ORDINALS):
            return _ORDINALS[self.generic_size - 1]
        return f"{self.generic_size}th"

    def __add__(self, other: Interval) -> Interval:
        """Stack two intervals (M3 + m3 = P5)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.generic_size + other.generic_size - 1, self.semitones + other.semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.semitones, self.generic_size) < (other.semitones, other.generic_size)

    def __str__(self) -> str:
        return f"{self.quality.value}{self.generic_size}"

    def __repr__(self) -> str:
        return f"Interval({self.generic_size}, {self.semitones})"


# Initialize class constants after class is defined
Interval.PERFECT_UNISON = Interval(1, 0)
Interval.AUGMENTED_UNISON = Interval(1, 1)
Interval.DIMINISHED_SECOND = Interval(2, 0)
Interval.MINOR_SECOND = Interval(2, 1)
Interval.MAJOR_SECOND = Interval(2, 2)
Interval.AUGMENTED_SECOND = Interval(2, 3)
Interval.DIMINISHED_THIRD = Interval(3, 2)
Interval.MINOR_THIRD = Interval(3, 3)
Interval.MAJOR_THIRD = Interval(3, 4)
Interval.AUGMENTED_THIRD = Interval(3, 5)
Interval.DIMINISHED_FOURTH = Interval(4, 4)
Interval.PERFECT_FOURTH = Interval(4, 5)
Interval.AUGMENTED_FOURTH = Interval(4, 6)
Interval.DIMINISHED_FIFTH = Interval(5, 6)
Interval.PERFECT_FIFTH = Interval(5, 7)
Interval.AUGMENTED_FIFTH = Interval(5, 8)
Interval.DIMINISHED_SIXTH = Interval(6, 7)
Interval.MINOR_SIXTH = Interval(6, 8)
Interval.MAJOR_SIXTH = Interval(6, 9)
Interval.AUGMENTED_SIXTH = Interval(6, 10)
Interval.DIMINISHED_SEVENTH = Interval(7, 9)
Interval.MINOR_SEVENTH = Interval(7, 10)
Interval.MAJOR_SEVENTH = Interval(7, 11)
Interval.AUGMENTED_SEVENTH = Interval(7, 12)
Interval.DIMINISHED_OCTAVE = Interval(8, 11)
Interval.OCTAVE = Interval(8, 12)
Interval.AUGMENTED_OCTAVE = Interval(8, 13)
Interval.MINOR_NINTH = Interval(9, 13)
Interval.MAJOR_NINTH = Interval(9, 14)
Interval.AUGMENTED_NINTH = Interval(9, 15)
Interval.MINOR_TENTH = Interval(10, 15)
Interval.MAJOR_TENTH = Interval(10, 16)
Interval.PERFECT_ELEVENTH = Interval(11, 17)
Interval.AUGMENTED_ELEVENTH = Interval(11, 18)
Interval.PERFECT_TWELFTH = Interval(12, 19)
Interval.MINOR_THIRTEENTH = Interval(13, 20)
Interval.MAJOR_THIRTEENTH = Interval(13, 21)

# Short aliases
Interval.P1 = Interval.PERFECT_UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
