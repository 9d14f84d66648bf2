"""
Scale primitives - ScaleDegree, ScaleType, Scale.

A scale type is a pattern of seven semitone steps. A scale is a pattern
applied to a spelled root. Each step moves exactly one letter, so every
heptatonic scale uses each letter once:

    D major = D E F# G A B C#    (never Gb for the third degree)
    F# harmonic minor = F# G# A B C# D E#
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from chuk_mcp_theory.constants import LETTERS_PER_OCTAVE, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_theory.errors import InvalidScale, ParseError

from .interval import Interval
from .note import Accidental, NoteName
from .pitch import Pitch
from .spelling import spell, spell_pitch


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones: -1 = flat, +1 = sharp, 0 = natural.

    Examples:
        ScaleDegree(1) = tonic
        ScaleDegree(5) = dominant
        ScaleDegree(7, -1) = flat 7 (minor seventh)
        ScaleDegree(4, +1) = raised 4 (lydian)
    """

    degree: int  # 1-7
    alteration: int = 0  # -1 = flat, +1 = sharp

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=self.degree))

    def __str__(self) -> str:
        if self.alteration == 0:
            return str(self.degree)
        elif self.alteration > 0:
            return "#" * self.alteration + str(self.degree)
        else:
            return "b" * -self.alteration + str(self.degree)

    def __repr__(self) -> str:
        if self.alteration == 0:
            return f"ScaleDegree({self.degree})"
        return f"ScaleDegree({self.degree}, {self.alteration})"


@dataclass(frozen=True)
class ScaleType:
    """
    A heptatonic scale defined by its step pattern.

    The steps are semitones from one degree to the next (not cumulative),
    seven of them, summing to an octave.
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    steps: tuple[int, ...]
    name: str = ""

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    IONIAN: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    AEOLIAN: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    HUNGARIAN_MINOR: ClassVar[ScaleType]
    NEAPOLITAN_MAJOR: ClassVar[ScaleType]
    PHRYGIAN_DOMINANT: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        if len(self.steps) != LETTERS_PER_OCTAVE:
            raise InvalidScale(f"Scale patterns need 7 steps, got {len(self.steps)}")
        if any(step < 1 for step in self.steps):
            raise InvalidScale(f"Scale steps must be positive, got {self.steps}")
        total = sum(self.steps)
        if total != SEMITONES_PER_OCTAVE:
            raise InvalidScale(f"Scale steps must sum to 12 semitones, got {total}")

    def degree_to_semitones(self, degree: ScaleDegree) -> int:
        """
        Get semitones from root to a scale degree.

        Args:
            degree: The scale degree (1-7 with optional alteration)

        Returns:
            Semitones from the root
        """
        return sum(self.steps[: degree.degree - 1]) + degree.alteration

    def intervals(self) -> list[Interval]:
        """
        Intervals from the root to each degree (P1, M2, M3 ... for major).

        Raises:
            InvalidInterval: If a cumulative distance can't be named
        """
        return [
            Interval(i + 1, sum(self.steps[:i])) for i in range(LETTERS_PER_OCTAVE)
        ]

    def mode(self, degree: int) -> ScaleType:
        """
        Rotate the pattern to start on another degree.

        ScaleType.MAJOR.mode(2) has the dorian pattern.
        """
        if not 1 <= degree <= LETTERS_PER_OCTAVE:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
        i = degree - 1
        rotated = self.steps[i:] + self.steps[:i]
        for known in BUILTIN_SCALE_TYPES.values():
            if known.steps == rotated:
                return known
        return ScaleType(rotated, f"{self.name or 'scale'} mode {degree}")

    @classmethod
    def parse(cls, name: str) -> ScaleType:
        """Look up a built-in scale type by name ('major', 'harmonic_minor', 'Dorian')."""
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        if key not in BUILTIN_SCALE_TYPES:
            raise InvalidScale(ErrorMessages.INVALID_SCALE.format(value=name))
        return BUILTIN_SCALE_TYPES[key]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.steps})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.steps!r})"


ScaleType.MAJOR = ScaleType((2, 2, 1, 2, 2, 2, 1), "major")
ScaleType.IONIAN = ScaleType.MAJOR
ScaleType.DORIAN = ScaleType((2, 1, 2, 2, 2, 1, 2), "dorian")
ScaleType.PHRYGIAN = ScaleType((1, 2, 2, 2, 1, 2, 2), "phrygian")
ScaleType.LYDIAN = ScaleType((2, 2, 2, 1, 2, 2, 1), "lydian")
ScaleType.MIXOLYDIAN = ScaleType((2, 2, 1, 2, 2, 1, 2), "mixolydian")
ScaleType.NATURAL_MINOR = ScaleType((2, 1, 2, 2, 1, 2, 2), "natural minor")
ScaleType.AEOLIAN = ScaleType.NATURAL_MINOR
ScaleType.LOCRIAN = ScaleType((1, 2, 2, 1, 2, 2, 2), "locrian")
ScaleType.HARMONIC_MINOR = ScaleType((2, 1, 2, 2, 1, 3, 1), "harmonic minor")
ScaleType.MELODIC_MINOR = ScaleType((2, 1, 2, 2, 2, 2, 1), "melodic minor")
ScaleType.HUNGARIAN_MINOR = ScaleType((2, 1, 3, 1, 1, 3, 1), "hungarian minor")
ScaleType.NEAPOLITAN_MAJOR = ScaleType((1, 2, 2, 2, 2, 2, 1), "neapolitan major")
ScaleType.PHRYGIAN_DOMINANT = ScaleType((1, 3, 1, 2, 1, 2, 2), "phrygian dominant")

BUILTIN_SCALE_TYPES: dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "ionian": ScaleType.IONIAN,
    "dorian": ScaleType.DORIAN,
    "phrygian": ScaleType.PHRYGIAN,
    "lydian": ScaleType.LYDIAN,
    "mixolydian": ScaleType.MIXOLYDIAN,
    "minor": ScaleType.NATURAL_MINOR,
    "natural_minor": ScaleType.NATURAL_MINOR,
    "aeolian": ScaleType.AEOLIAN,
    "locrian": ScaleType.LOCRIAN,
    "harmonic_minor": ScaleType.HARMONIC_MINOR,
    "melodic_minor": ScaleType.MELODIC_MINOR,
    "hungarian_minor": ScaleType.HUNGARIAN_MINOR,
    "neapolitan_major": ScaleType.NEAPOLITAN_MAJOR,
    "phrygian_dominant": ScaleType.PHRYGIAN_DOMINANT,
}


@dataclass(frozen=True)
class Scale:
    """
    A scale type applied to a spelled root.

    Notes are spelled at construction, so an unspellable root/pattern pair
    (one needing a triple accidental somewhere) fails immediately with
    UnrepresentableAccidental rather than on first use.

    Closure needs no separate check: each step moves one letter, and
    ScaleType only accepts seven steps summing to an octave, so an eighth
    step would always land back on the root's letter and pitch class.

    Examples:
        Scale(NoteName.parse("C"), ScaleType.MAJOR) = C major
        Scale.parse("F#_harmonic_minor")
    """

    root: NoteName
    scale_type: ScaleType
    _notes: tuple[NoteName, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        notes = [self.root]
        for step in self.scale_type.steps[:-1]:
            notes.append(spell(notes[-1], 1, step))
        object.__setattr__(self, "_notes", tuple(notes))

    def notes(self) -> list[NoteName]:
        """The seven degrees in order from the root."""
        return list(self._notes)

    def note_at(self, degree: int | ScaleDegree) -> NoteName:
        """
        Resolve a scale degree to a spelled note.

        Altered degrees keep the letter: in C major, ScaleDegree(7, -1) is Bb.

        Raises:
            UnrepresentableAccidental: If the alteration overflows the accidental range
        """
        if isinstance(degree, int):
            degree = ScaleDegree(degree)
        base = self._notes[degree.degree - 1]
        if degree.alteration == 0:
            return base
        accidental = Accidental.from_offset(base.accidental.offset + degree.alteration, base.letter)
        return NoteName(base.letter, accidental)

    def degree_of(self, note: NoteName) -> int | None:
        """
        Get the scale degree (1-7) of a note.

        Exact spellings match first; an enharmonic spelling still finds its
        degree (G# and Ab both find 7 in A harmonic minor).
        """
        for i, scale_note in enumerate(self._notes):
            if scale_note == note:
                return i + 1
        for i, scale_note in enumerate(self._notes):
            if scale_note.is_enharmonic_with(note):
                return i + 1
        return None

    def chromatic_degree(self, note: NoteName) -> tuple[int, int]:
        """
        Get (degree, alteration) for any note, by letter.

        In C major: C -> (1, 0), C# -> (1, 1), F# -> (4, 1), Bb -> (7, -1).
        """
        for i, scale_note in enumerate(self._notes):
            if scale_note.letter == note.letter:
                return i + 1, note.accidental.offset - scale_note.accidental.offset
        raise InvalidScale(f"{self} has no {note.letter.name}")  # every letter is present

    def contains(self, note: NoteName) -> bool:
        """True if this exact spelling is in the scale (Ab is not in A harmonic minor)."""
        return note in self._notes

    def pitches(self, octave: int = 4) -> list[Pitch]:
        """
        Ascending spelled pitches from the root up to its octave (8 pitches).
        """
        pitches = [Pitch(self.root, octave)]
        for step in self.scale_type.steps:
            pitches.append(spell_pitch(pitches[-1], 1, step))
        return pitches

    def relative(self) -> Scale:
        """Relative minor of a major scale, or relative major of a natural minor."""
        if self.scale_type == ScaleType.MAJOR:
            return Scale(self._notes[5], ScaleType.NATURAL_MINOR)
        if self.scale_type == ScaleType.NATURAL_MINOR:
            return Scale(self._notes[2], ScaleType.MAJOR)
        raise InvalidScale(f"No relative scale defined for {self.scale_type}")

    def parallel(self) -> Scale:
        """Same root, major <-> natural minor."""
        if self.scale_type == ScaleType.MAJOR:
            return Scale(self.root, ScaleType.NATURAL_MINOR)
        if self.scale_type == ScaleType.NATURAL_MINOR:
            return Scale(self.root, ScaleType.MAJOR)
        raise InvalidScale(f"No parallel scale defined for {self.scale_type}")

    def key_signature(self) -> int:
        """
        Sharps (positive) or flats (negative) in the key signature.

        Defined for major and its modes, natural minor included. The count
        is the accidental total of the spelled notes, so it follows the
        root's spelling: C# major is +7, Db major is -5, Cb major is -7,
        A minor and D dorian are 0.

        Raises:
            InvalidScale: For scale types that are not modes of major
        """
        major_modes = {ScaleType.MAJOR.mode(n).steps for n in range(1, LETTERS_PER_OCTAVE + 1)}
        if self.scale_type.steps not in major_modes:
            raise InvalidScale(f"No key signature defined for {self.scale_type}")
        return sum(note.accidental.offset for note in self._notes)

    def dominant(self) -> Scale:
        """Same scale type a perfect fifth higher."""
        return Scale(self.root.transpose(Interval.PERFECT_FIFTH), self.scale_type)

    def subdominant(self) -> Scale:
        """Same scale type a perfect fourth higher."""
        return Scale(self.root.transpose(Interval.PERFECT_FOURTH), self.scale_type)

    def __str__(self) -> str:
        return f"{self.root} {self.scale_type}"

    @classmethod
    def parse(cls, name: str) -> Scale:
        """
        Parse a scale from a string like 'C_major', 'D_minor', 'F#_harmonic_minor'.

        Args:
            name: Root and scale name with underscore separator

        Returns:
            Parsed Scale
        """
        parts = name.strip().split("_")
        if len(parts) < 2:
            raise ParseError(ErrorMessages.INVALID_KEY.format(value=name))
        root = NoteName.parse(parts[0])
        return cls(root, ScaleType.parse("_".join(parts[1:])))
