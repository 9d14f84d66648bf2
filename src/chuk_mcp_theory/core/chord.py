"""
Chord primitives - TriadQuality, SeventhQuality, Triad, SeventhChord, Chord.

Diatonic chords are stacks of every other scale note. Quality is never looked
up by degree; it is measured from the semitone gaps between the stacked
notes, so the same code handles major, minor and exotic scales:

    C major, degree 2:          D F A    (3 + 4 = minor)
    F# harmonic minor, degree 3: A C# E#  (4 + 4 = augmented)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from chuk_mcp_theory.constants import LETTERS_PER_OCTAVE, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_theory.errors import InvalidChord

from .interval import Interval
from .note import NoteName
from .pitch import Pitch
from .scale import Scale

_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")


def _gap(lower: NoteName, upper: NoteName) -> int:
    return (upper.pitch_class - lower.pitch_class) % SEMITONES_PER_OCTAVE


def _stacks_of_thirds(notes: list[NoteName]) -> list[list[NoteName]]:
    """
    Every way to read distinct notes as a stack of thirds, root first.

    A root qualifies when the other letters sit 2, 4, 6 ... letters above it.
    """
    wanted = [2 * i for i in range(1, len(notes))]
    stacks = []
    for root in notes:
        by_steps = {root.letter.steps_to(n.letter): n for n in notes if n != root}
        if all(steps in by_steps for steps in wanted):
            stacks.append([root] + [by_steps[steps] for steps in wanted])
    return stacks


class TriadQuality(str, Enum):
    """Triad qualities, measured from the two stacked thirds."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    OTHER = "other"

    @classmethod
    def from_gaps(cls, lower: int, upper: int) -> TriadQuality:
        """Quality from the semitones of the lower and upper thirds."""
        return _TRIAD_GAPS.get((lower, upper), cls.OTHER)

    @property
    def gaps(self) -> tuple[int, int]:
        """Semitones of the lower and upper thirds."""
        for gaps, quality in _TRIAD_GAPS.items():
            if quality == self:
                return gaps
        raise InvalidChord(f"A {self.value} triad has no fixed stack of thirds")

    @property
    def suffix(self) -> str:
        """Chord symbol suffix: '' for major, 'm', 'dim', 'aug'."""
        return _TRIAD_SUFFIXES[self]


_TRIAD_GAPS: dict[tuple[int, int], TriadQuality] = {
    (4, 3): TriadQuality.MAJOR,
    (3, 4): TriadQuality.MINOR,
    (3, 3): TriadQuality.DIMINISHED,
    (4, 4): TriadQuality.AUGMENTED,
}

_TRIAD_SUFFIXES: dict[TriadQuality, str] = {
    TriadQuality.MAJOR: "",
    TriadQuality.MINOR: "m",
    TriadQuality.DIMINISHED: "dim",
    TriadQuality.AUGMENTED: "aug",
    TriadQuality.OTHER: "(?)",
}


class SeventhQuality(str, Enum):
    """Seventh chord qualities, valued by their chord symbol suffix."""

    MAJOR_7 = "maj7"
    DOMINANT_7 = "7"
    MINOR_7 = "m7"
    HALF_DIMINISHED_7 = "m7b5"
    DIMINISHED_7 = "dim7"
    MINOR_MAJOR_7 = "mMaj7"
    AUGMENTED_MAJOR_7 = "augMaj7"
    OTHER = "(?)7"

    @classmethod
    def from_triad(cls, triad: TriadQuality, seventh: int) -> SeventhQuality:
        """Quality from the underlying triad and the root-to-seventh semitones."""
        return _SEVENTH_SHAPES.get((triad, seventh), cls.OTHER)


_SEVENTH_SHAPES: dict[tuple[TriadQuality, int], SeventhQuality] = {
    (TriadQuality.MAJOR, 11): SeventhQuality.MAJOR_7,
    (TriadQuality.MAJOR, 10): SeventhQuality.DOMINANT_7,
    (TriadQuality.MINOR, 10): SeventhQuality.MINOR_7,
    (TriadQuality.MINOR, 11): SeventhQuality.MINOR_MAJOR_7,
    (TriadQuality.DIMINISHED, 10): SeventhQuality.HALF_DIMINISHED_7,
    (TriadQuality.DIMINISHED, 9): SeventhQuality.DIMINISHED_7,
    (TriadQuality.AUGMENTED, 11): SeventhQuality.AUGMENTED_MAJOR_7,
}

_SEVENTH_NUMERAL_SUFFIXES: dict[SeventhQuality, str] = {
    SeventhQuality.MAJOR_7: "Δ7",
    SeventhQuality.DOMINANT_7: "7",
    SeventhQuality.MINOR_7: "7",
    SeventhQuality.HALF_DIMINISHED_7: "ø7",
    SeventhQuality.DIMINISHED_7: "°7",
    SeventhQuality.MINOR_MAJOR_7: "Δ7",
    SeventhQuality.AUGMENTED_MAJOR_7: "+Δ7",
    SeventhQuality.OTHER: "7",
}


def roman_numeral(degree: int, quality: TriadQuality) -> str:
    """
    Roman numeral for a triad quality on a scale degree.

    Case follows the third: upper for major/augmented, lower for
    minor/diminished. Diminished adds '°', augmented adds '+'.

    Examples:
        roman_numeral(1, MAJOR) = 'I'
        roman_numeral(7, DIMINISHED) = 'vii°'
        roman_numeral(3, AUGMENTED) = 'III+'
    """
    if not 1 <= degree <= LETTERS_PER_OCTAVE:
        raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
    numeral = _NUMERALS[degree - 1]
    if quality in (TriadQuality.MINOR, TriadQuality.DIMINISHED):
        numeral = numeral.lower()
    if quality == TriadQuality.DIMINISHED:
        numeral += "°"
    elif quality == TriadQuality.AUGMENTED:
        numeral += "+"
    elif quality == TriadQuality.OTHER:
        numeral += "?"
    return numeral


@dataclass(frozen=True)
class Triad:
    """
    Three spelled notes stacked in thirds.

    The degree is set when the triad comes from a scale, and is None for
    triads built from a root or identified from loose notes.

    Immutable and hashable.
    """

    root: NoteName
    third: NoteName
    fifth: NoteName
    degree: int | None = None

    @property
    def quality(self) -> TriadQuality:
        return TriadQuality.from_gaps(_gap(self.root, self.third), _gap(self.third, self.fifth))

    @property
    def symbol(self) -> str:
        """Chord symbol, e.g. 'C', 'Dm', 'Bdim', 'Aaug'."""
        return f"{self.root}{self.quality.suffix}"

    @property
    def roman(self) -> str | None:
        """Roman numeral, or None outside a scale context."""
        if self.degree is None:
            return None
        return roman_numeral(self.degree, self.quality)

    def notes(self) -> list[NoteName]:
        return [self.root, self.third, self.fifth]

    def pitches(self, octave: int = 4) -> list[Pitch]:
        """
        Close-position pitches with the root in the given octave.

        Octaves follow the letters, so E## Gbb B keeps Gbb4 above E##4.
        """
        root = Pitch(self.root, octave)
        return [root] + [
            Pitch(note, (root.diatonic_number + steps) // LETTERS_PER_OCTAVE)
            for note, steps in ((self.third, 2), (self.fifth, 4))
        ]

    def transform_p(self) -> Triad:
        """Parallel: swap major and minor over the same root and fifth (C <-> Cm)."""
        if self.quality == TriadQuality.MAJOR:
            return Triad.build(self.root, TriadQuality.MINOR)
        if self.quality == TriadQuality.MINOR:
            return Triad.build(self.root, TriadQuality.MAJOR)
        raise InvalidChord(f"P applies to major and minor triads, not {self.symbol}")

    def transform_r(self) -> Triad:
        """Relative: C <-> Am, Fm <-> Ab."""
        if self.quality == TriadQuality.MAJOR:
            return Triad.build(self.root.transpose(Interval.MAJOR_SIXTH), TriadQuality.MINOR)
        if self.quality == TriadQuality.MINOR:
            return Triad.build(self.third, TriadQuality.MAJOR)
        raise InvalidChord(f"R applies to major and minor triads, not {self.symbol}")

    def transform_l(self) -> Triad:
        """Leading-tone exchange: C <-> Em."""
        if self.quality == TriadQuality.MAJOR:
            return Triad.build(self.third, TriadQuality.MINOR)
        if self.quality == TriadQuality.MINOR:
            return Triad.build(self.root.transpose_down(Interval.MAJOR_THIRD), TriadQuality.MAJOR)
        raise InvalidChord(f"L applies to major and minor triads, not {self.symbol}")

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def build(cls, root: NoteName, quality: TriadQuality) -> Triad:
        """
        Spell a triad from its root by stacking thirds.

        F# major = F# A# C#, C# diminished = C# E G.

        Raises:
            UnrepresentableAccidental: If a chord tone needs a triple accidental
        """
        lower, upper = quality.gaps
        third = root.transpose(Interval(3, lower))
        fifth = third.transpose(Interval(3, upper))
        return cls(root, third, fifth)

    @classmethod
    def identify(cls, notes: Iterable[NoteName]) -> Triad:
        """
        Find the root of three notes that stack in thirds, in any order.

        The root is the note whose letter sits two and four letters below the
        other two. A recognised quality wins over an OTHER stack.

        Raises:
            InvalidChord: If the notes don't form a stack of thirds
        """
        unique = list(dict.fromkeys(notes))
        if len(unique) != 3:
            raise InvalidChord(f"A triad needs three distinct notes, got {len(unique)}")

        candidates = [cls(*stack) for stack in _stacks_of_thirds(unique)]
        for triad in candidates:
            if triad.quality != TriadQuality.OTHER:
                return triad
        if candidates:
            return candidates[0]
        raise InvalidChord(
            "Notes do not stack in thirds: " + ", ".join(str(n) for n in unique)
        )


@dataclass(frozen=True)
class SeventhChord:
    """A triad with the next third stacked on top."""

    root: NoteName
    third: NoteName
    fifth: NoteName
    seventh: NoteName
    degree: int | None = None

    @property
    def triad(self) -> Triad:
        return Triad(self.root, self.third, self.fifth, self.degree)

    @property
    def quality(self) -> SeventhQuality:
        return SeventhQuality.from_triad(self.triad.quality, _gap(self.root, self.seventh))

    @property
    def symbol(self) -> str:
        """Chord symbol, e.g. 'Cmaj7', 'G7', 'Bm7b5'."""
        return f"{self.root}{self.quality.value}"

    @property
    def roman(self) -> str | None:
        if self.degree is None:
            return None
        base = roman_numeral(self.degree, self.triad.quality).rstrip("°+?")
        return base + _SEVENTH_NUMERAL_SUFFIXES[self.quality]

    def notes(self) -> list[NoteName]:
        return [self.root, self.third, self.fifth, self.seventh]

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def identify(cls, notes: Iterable[NoteName]) -> SeventhChord:
        """
        Find the root of four notes that stack in thirds, in any order.

        G B D F = G7, A C E G = Am7, C E G B = Cmaj7.

        Raises:
            InvalidChord: If the notes don't form a stack of thirds
        """
        unique = list(dict.fromkeys(notes))
        if len(unique) != 4:
            raise InvalidChord(f"A seventh chord needs four distinct notes, got {len(unique)}")

        candidates = [cls(*stack) for stack in _stacks_of_thirds(unique)]
        for chord in candidates:
            if chord.quality != SeventhQuality.OTHER:
                return chord
        if candidates:
            return candidates[0]
        raise InvalidChord(
            "Notes do not stack in thirds: " + ", ".join(str(n) for n in unique)
        )


class ChordExtension(str, Enum):
    """Tones added to, altered in or removed from a triad, valued by symbol."""

    SEVENTH = "7"
    MAJOR_SEVENTH = "maj7"
    DIMINISHED_SEVENTH = "dim7"
    NINTH = "9"
    FLAT_NINTH = "b9"
    SHARP_NINTH = "#9"
    ELEVENTH = "11"
    SHARP_ELEVENTH = "#11"
    THIRTEENTH = "13"
    FLAT_THIRTEENTH = "b13"
    ADD_2 = "add2"
    ADD_4 = "add4"
    ADD_6 = "add6"
    ADD_FLAT_6 = "addb6"
    SUS_2 = "sus2"
    SUS_4 = "sus4"
    FLAT_FIFTH = "b5"
    SHARP_FIFTH = "#5"
    NO_THIRD = "no3"
    NO_FIFTH = "no5"

    @classmethod
    def parse(cls, token: str) -> ChordExtension:
        """Parse a symbol like '9', 'b9', '♯11', 'sus4' or 'no5'."""
        text = token.strip().replace("♭", "b").replace("♯", "#")
        try:
            return cls(text)
        except ValueError:
            raise InvalidChord(f"Unknown chord extension: '{token}'") from None


@dataclass(frozen=True)
class _ExtensionShape:
    adds: tuple[Interval, ...] = ()
    implies: tuple[Interval, ...] = ()  # only where that generic size is still empty
    removes: tuple[int, ...] = ()  # generic sizes


def _shape(adds: str = "", implies: str = "", removes: tuple[int, ...] = ()) -> _ExtensionShape:
    return _ExtensionShape(
        tuple(Interval.parse(s) for s in adds.split()),
        tuple(Interval.parse(s) for s in implies.split()),
        removes,
    )


# Upper extensions imply the minor seventh; 11 and 13 also imply the ninth.
_EXTENSION_SHAPES: dict[ChordExtension, _ExtensionShape] = {
    ChordExtension.SEVENTH: _shape("m7"),
    ChordExtension.MAJOR_SEVENTH: _shape("M7"),
    ChordExtension.DIMINISHED_SEVENTH: _shape("d7"),
    ChordExtension.NINTH: _shape("M9", implies="m7"),
    ChordExtension.FLAT_NINTH: _shape("m9", implies="m7"),
    ChordExtension.SHARP_NINTH: _shape("A9", implies="m7"),
    ChordExtension.ELEVENTH: _shape("P11", implies="m7 M9"),
    ChordExtension.SHARP_ELEVENTH: _shape("A11", implies="m7"),
    ChordExtension.THIRTEENTH: _shape("M13", implies="m7 M9"),
    ChordExtension.FLAT_THIRTEENTH: _shape("m13", implies="m7"),
    ChordExtension.ADD_2: _shape("M2"),
    ChordExtension.ADD_4: _shape("P4"),
    ChordExtension.ADD_6: _shape("M6"),
    ChordExtension.ADD_FLAT_6: _shape("m6"),
    ChordExtension.SUS_2: _shape("M2", removes=(3,)),
    ChordExtension.SUS_4: _shape("P4", removes=(3,)),
    ChordExtension.FLAT_FIFTH: _shape("d5", removes=(5,)),
    ChordExtension.SHARP_FIFTH: _shape("A5", removes=(5,)),
    ChordExtension.NO_THIRD: _shape(removes=(3,)),
    ChordExtension.NO_FIFTH: _shape(removes=(5,)),
}

_SEVENTH_SEMITONES: dict[ChordExtension, int] = {
    ChordExtension.SEVENTH: 10,
    ChordExtension.MAJOR_SEVENTH: 11,
    ChordExtension.DIMINISHED_SEVENTH: 9,
}


_UPPER_EXTENSIONS = (ChordExtension.NINTH, ChordExtension.ELEVENTH, ChordExtension.THIRTEENTH)


def _chord_suffix(quality: TriadQuality, extensions: tuple[ChordExtension, ...]) -> str:
    """
    Symbol suffix. A seventh merges with the triad ('m7', 'm7b5') when it
    can, and gives way to a following upper extension ('maj7' + '9' = 'maj9').
    """
    head = quality.suffix
    rest = list(extensions)
    for ext in extensions:
        if ext in _SEVENTH_SEMITONES:
            seventh = SeventhQuality.from_triad(quality, _SEVENTH_SEMITONES[ext])
            if seventh != SeventhQuality.OTHER:
                head = seventh.value
                rest.remove(ext)
                if rest and rest[0] in _UPPER_EXTENSIONS and head.endswith("7"):
                    head = head[:-1]
            break
    return head + "".join(ext.value for ext in rest)


@dataclass(frozen=True)
class Chord:
    """
    A spelled root plus intervals above it, in any inversion.

    Intervals start with P1 and may be compound (M9, P11), so every chord
    tone is spelled by its interval: C9 is C E G Bb D, never C E G A# D.
    The inversion picks which chord tone is in the bass.

    Examples:
        Chord.build(C, extensions=(ChordExtension.NINTH,)) = C9
        Chord.build(C, extensions=(ChordExtension.SUS_4,)) = Csus4 (C F G)
        Chord.build(C).inverted(1) = C/E
    """

    root: NoteName
    intervals: tuple[Interval, ...]
    suffix: str = ""
    inversion: int = 0
    _tones: tuple[NoteName, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.intervals or self.intervals[0] != Interval.PERFECT_UNISON:
            raise InvalidChord("Chord intervals must start with the root (P1)")
        if not 0 <= self.inversion < len(self.intervals):
            raise InvalidChord(
                f"A {len(self.intervals)}-note chord has no inversion {self.inversion}"
            )
        object.__setattr__(
            self, "_tones", tuple(self.root.transpose(i) for i in self.intervals)
        )

    def tones(self) -> list[NoteName]:
        """Chord tones in root position."""
        return list(self._tones)

    def notes(self) -> list[NoteName]:
        """Chord tones from the bass up."""
        return list(self._tones[self.inversion :] + self._tones[: self.inversion])

    @property
    def bass(self) -> NoteName:
        return self._tones[self.inversion]

    @property
    def symbol(self) -> str:
        """Chord symbol with a slash bass when inverted, e.g. 'C9', 'Am7/G'."""
        name = f"{self.root}{self.suffix}"
        if self.inversion:
            return f"{name}/{self.bass}"
        return name

    def inverted(self, inversion: int) -> Chord:
        """The same chord with another tone in the bass (1 = first inversion)."""
        return replace(self, inversion=inversion)

    def pitches(self, octave: int = 4) -> list[Pitch]:
        """
        Ascending pitches starting in the given octave.

        Tones below the bass move up an octave, so C/E in octave 4 is E4 G4 C5.
        """
        root = Pitch(self.root, octave)
        placed = [
            Pitch(note, (root.diatonic_number + interval.steps) // LETTERS_PER_OCTAVE)
            for note, interval in zip(self._tones, self.intervals)
        ]
        lifted = [Pitch(p.name, p.octave + 1) for p in placed[: self.inversion]]
        return placed[self.inversion :] + lifted

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def build(
        cls,
        root: NoteName,
        quality: TriadQuality = TriadQuality.MAJOR,
        extensions: Iterable[ChordExtension] = (),
    ) -> Chord:
        """
        Spell a chord from a triad quality and extensions applied in order.

        An extension replaces any tone of the same generic size, so
        (SEVENTH, FLAT_NINTH) gives C7b9 and (NINTH, SUS_4) gives C9sus4.

        Raises:
            InvalidChord: If the quality has no fixed stack of thirds
            UnrepresentableAccidental: If a chord tone needs a triple accidental
        """
        extensions = tuple(extensions)
        lower, upper = quality.gaps
        tones = {3: Interval(3, lower), 5: Interval(5, lower + upper)}
        for ext in extensions:
            shape = _EXTENSION_SHAPES[ext]
            for size in shape.removes:
                tones.pop(size, None)
            for interval in shape.implies:
                tones.setdefault(interval.generic_size, interval)
            for interval in shape.adds:
                tones[interval.generic_size] = interval
        intervals = (Interval.PERFECT_UNISON,) + tuple(
            tones[size] for size in sorted(tones)
        )
        return cls(root, intervals, _chord_suffix(quality, extensions))

    @classmethod
    def from_triad(cls, triad: Triad) -> Chord:
        return cls(
            triad.root,
            (
                Interval.PERFECT_UNISON,
                triad.root.interval_to(triad.third),
                triad.root.interval_to(triad.fifth),
            ),
            triad.quality.suffix,
        )

    @classmethod
    def from_seventh(cls, chord: SeventhChord) -> Chord:
        return cls(
            chord.root,
            (Interval.PERFECT_UNISON,)
            + tuple(chord.root.interval_to(n) for n in chord.notes()[1:]),
            chord.quality.value,
        )

    @classmethod
    def identify(cls, notes: Iterable[NoteName]) -> Chord:
        """
        Name three or four loose notes; the first note given is the bass.

        [E, G, C] = C/E, [G, B, D, F] = G7, [G, A, C, E] = Am7/G.

        Raises:
            InvalidChord: If the notes don't stack in thirds
        """
        unique = list(dict.fromkeys(notes))
        if len(unique) == 3:
            chord = cls.from_triad(Triad.identify(unique))
        elif len(unique) == 4:
            chord = cls.from_seventh(SeventhChord.identify(unique))
        else:
            raise InvalidChord(f"Can only name three or four distinct notes, got {len(unique)}")
        return chord.inverted(chord.tones().index(unique[0]))


def _stack(scale: Scale, degree: int, size: int) -> list[NoteName]:
    if not 1 <= degree <= LETTERS_PER_OCTAVE:
        raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
    notes = scale.notes()
    return [notes[(degree - 1 + 2 * i) % LETTERS_PER_OCTAVE] for i in range(size)]


def triad_at_degree(scale: Scale, degree: int) -> Triad:
    """
    Build the triad on a scale degree (1-7) from the scale's own spellings.

    Args:
        scale: The scale
        degree: Degree of the root

    Returns:
        Triad with root, third and fifth taken from the scale
    """
    root, third, fifth = _stack(scale, degree, 3)
    return Triad(root, third, fifth, degree)


def seventh_at_degree(scale: Scale, degree: int) -> SeventhChord:
    """Build the seventh chord on a scale degree (1-7)."""
    root, third, fifth, seventh = _stack(scale, degree, 4)
    return SeventhChord(root, third, fifth, seventh, degree)


def diatonic_triads(scale: Scale) -> list[Triad]:
    """All seven triads of a scale, tonic first."""
    return [triad_at_degree(scale, d) for d in range(1, LETTERS_PER_OCTAVE + 1)]


def diatonic_sevenths(scale: Scale) -> list[SeventhChord]:
    """All seven seventh chords of a scale, tonic first."""
    return [seventh_at_degree(scale, d) for d in range(1, LETTERS_PER_OCTAVE + 1)]
