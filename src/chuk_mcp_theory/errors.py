"""
Error types for the theory engine.

Every failure is a theoretically invalid request, reported to the caller.
All errors derive from ValueError so existing `except ValueError` callers
keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_mcp_theory.core.note import Letter


class TheoryError(ValueError):
    """Base class for all theory errors."""


class InvalidInterval(TheoryError):
    """Generic size and semitone count do not form a representable interval."""

    def __init__(self, message: str, generic_size: int | None = None, semitones: int | None = None):
        super().__init__(message)
        self.generic_size = generic_size
        self.semitones = semitones


class UnrepresentableAccidental(TheoryError):
    """
    Spelling would need more than a double sharp or double flat.

    Carries the target letter and the offset that would have been needed.
    """

    def __init__(self, letter: Letter, needed: int):
        super().__init__(
            f"Cannot spell {letter.name} with an offset of {needed:+d} semitones "
            "(accidentals are limited to double flat .. double sharp)"
        )
        self.letter = letter
        self.needed = needed


class ParseError(TheoryError):
    """A note, pitch or scale string could not be parsed."""


class InvalidScale(TheoryError):
    """A scale pattern is malformed or a scale name is unknown."""


class InvalidChord(TheoryError):
    """Notes do not stack into a triad, or a transform doesn't apply to its quality."""
