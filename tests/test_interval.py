"""
Tests for Interval.

Quality is derived from generic size and semitones together, so the same
semitone count can be different intervals (M3 vs d4).
"""

import pytest

from chuk_mcp_theory.core import Interval, IntervalQuality
from chuk_mcp_theory.errors import InvalidInterval


class TestIntervalQuality:
    """Quality derivation from the diatonic baseline."""

    def test_perfect_class(self) -> None:
        assert Interval(1, 0).quality == IntervalQuality.PERFECT
        assert Interval(4, 5).quality == IntervalQuality.PERFECT
        assert Interval(5, 7).quality == IntervalQuality.PERFECT
        assert Interval(8, 12).quality == IntervalQuality.PERFECT
        assert Interval(4, 6).quality == IntervalQuality.AUGMENTED
        assert Interval(5, 6).quality == IntervalQuality.DIMINISHED
        assert Interval(4, 7).quality == IntervalQuality.DOUBLY_AUGMENTED
        assert Interval(5, 5).quality == IntervalQuality.DOUBLY_DIMINISHED

    def test_imperfect_class(self) -> None:
        assert Interval(3, 4).quality == IntervalQuality.MAJOR
        assert Interval(3, 3).quality == IntervalQuality.MINOR
        assert Interval(3, 2).quality == IntervalQuality.DIMINISHED
        assert Interval(3, 5).quality == IntervalQuality.AUGMENTED
        assert Interval(7, 9).quality == IntervalQuality.DIMINISHED
        assert Interval(6, 7).quality == IntervalQuality.DIMINISHED
        assert Interval(2, 4).quality == IntervalQuality.DOUBLY_AUGMENTED

    def test_compound(self) -> None:
        assert Interval(9, 14).quality == IntervalQuality.MAJOR
        assert Interval(10, 15).quality == IntervalQuality.MINOR
        assert Interval(12, 19).quality == IntervalQuality.PERFECT

    def test_same_semitones_different_intervals(self) -> None:
        """Four semitones is a major third or a diminished fourth."""
        assert Interval(3, 4) != Interval(4, 4)
        assert Interval(4, 4).quality == IntervalQuality.DIMINISHED


class TestIntervalValidation:
    """Construction rejects inconsistent pairs."""

    def test_beyond_doubly_augmented(self) -> None:
        with pytest.raises(InvalidInterval):
            Interval(5, 10)
        with pytest.raises(InvalidInterval):
            Interval(3, 7)

    def test_beyond_doubly_diminished(self) -> None:
        with pytest.raises(InvalidInterval):
            Interval(4, 2)
        with pytest.raises(InvalidInterval):
            Interval(3, 0)

    def test_generic_size_positive(self) -> None:
        with pytest.raises(InvalidInterval):
            Interval(0, 0)

    def test_from_semitones_and_generic(self) -> None:
        assert Interval.from_semitones_and_generic(7, 5) == Interval.PERFECT_FIFTH
        with pytest.raises(InvalidInterval) as exc:
            Interval.from_semitones_and_generic(1, 5)
        assert exc.value.generic_size == 5
        assert exc.value.semitones == 1


class TestIntervalParse:
    """Shorthand parsing and printing."""

    @pytest.mark.parametrize(
        "text,generic,semitones",
        [
            ("P1", 1, 0),
            ("m2", 2, 1),
            ("M3", 3, 4),
            ("P5", 5, 7),
            ("A4", 4, 6),
            ("AA4", 4, 7),
            ("d5", 5, 6),
            ("dd5", 5, 5),
            ("d7", 7, 9),
            ("M9", 9, 14),
            ("m10", 10, 15),
        ],
    )
    def test_parse(self, text: str, generic: int, semitones: int) -> None:
        interval = Interval.parse(text)
        assert interval == Interval(generic, semitones)
        assert str(interval) == text

    @pytest.mark.parametrize("text", ["P2", "m4", "M5", "X3", "M0", "", "3", "AAA4", "P"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(InvalidInterval):
            Interval.parse(text)

    def test_from_quality(self) -> None:
        assert Interval.from_quality(IntervalQuality.MINOR, 7) == Interval.MINOR_SEVENTH
        with pytest.raises(InvalidInterval):
            Interval.from_quality(IntervalQuality.PERFECT, 3)

    def test_name(self) -> None:
        assert Interval.M3.name == "major third"
        assert Interval(4, 7).name == "doubly augmented fourth"
        assert Interval.P8.name == "perfect octave"


class TestIntervalArithmetic:
    """Inversion, reduction and stacking."""

    def test_invert(self) -> None:
        assert Interval.M3.invert() == Interval.m6
        assert Interval.P5.invert() == Interval.P4
        assert Interval.A4.invert() == Interval.d5
        assert Interval.P1.invert() == Interval.P8
        assert Interval.P8.invert() == Interval.P1
        assert Interval.m2.invert() == Interval.M7

    def test_invert_compound_uses_simple(self) -> None:
        assert Interval.MAJOR_NINTH.invert() == Interval.MINOR_SEVENTH

    def test_simple(self) -> None:
        assert Interval.MAJOR_TENTH.simple() == Interval.MAJOR_THIRD
        assert Interval.PERFECT_TWELFTH.simple() == Interval.PERFECT_FIFTH
        assert Interval.OCTAVE.simple() == Interval.OCTAVE

    def test_is_compound(self) -> None:
        assert Interval.MAJOR_NINTH.is_compound
        assert not Interval.OCTAVE.is_compound

    def test_add(self) -> None:
        assert Interval.M3 + Interval.m3 == Interval.P5
        assert Interval.P5 + Interval.P4 == Interval.P8
        assert Interval.P8 + Interval.M2 == Interval.MAJOR_NINTH

    def test_steps(self) -> None:
        assert Interval.P1.steps == 0
        assert Interval.M3.steps == 2
        assert Interval.P8.steps == 7

    def test_ordering(self) -> None:
        ordered = sorted([Interval.P5, Interval.M3, Interval.DIMINISHED_FOURTH, Interval.m2])
        assert ordered == [Interval.m2, Interval.M3, Interval.DIMINISHED_FOURTH, Interval.P5]

    def test_between_picks_nearest_octave(self) -> None:
        """A letter distance plus a pitch-class difference names one interval."""
        assert Interval.between(2, 4) == Interval.M3
        assert Interval.between(2, -8) == Interval.M3
        assert Interval.between(6, 9) == Interval.DIMINISHED_SEVENTH
