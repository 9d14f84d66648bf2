"""
Tests for note primitives.

Tests cover:
- Letter ordering, stepping and natural pitch classes
- Accidental offsets and parsing (ASCII and Unicode)
- NoteName equality vs enharmonic equivalence
"""

import pytest

from chuk_mcp_theory.core import Accidental, Letter, NoteName
from chuk_mcp_theory.errors import ParseError, TheoryError, UnrepresentableAccidental


class TestLetter:
    """Tests for Letter enum."""

    def test_natural_pitch_classes(self) -> None:
        """Letters map to the white-key pitch classes."""
        assert [le.natural_pitch_class for le in Letter] == [0, 2, 4, 5, 7, 9, 11]

    def test_all_starts_from_c(self) -> None:
        assert Letter.all()[0] == Letter.C
        assert Letter.all()[-1] == Letter.B
        assert len(Letter.all()) == 7

    def test_step_wraps(self) -> None:
        """Stepping is cyclic in both directions."""
        assert Letter.C.step(2) == Letter.E
        assert Letter.B.step(1) == Letter.C
        assert Letter.G.step(3) == Letter.C
        assert Letter.C.step(-1) == Letter.B
        assert Letter.D.step(-9) == Letter.B
        assert Letter.A.step(7) == Letter.A

    def test_steps_to(self) -> None:
        assert Letter.C.steps_to(Letter.G) == 4
        assert Letter.G.steps_to(Letter.C) == 3
        assert Letter.E.steps_to(Letter.E) == 0

    def test_parse(self) -> None:
        assert Letter.parse("c") == Letter.C
        assert Letter.parse("B") == Letter.B

    def test_parse_invalid(self) -> None:
        with pytest.raises(ParseError):
            Letter.parse("H")
        with pytest.raises(ParseError):
            Letter.parse("CD")


class TestAccidental:
    """Tests for Accidental enum."""

    def test_offsets(self) -> None:
        assert Accidental.DOUBLE_FLAT.offset == -2
        assert Accidental.FLAT.offset == -1
        assert Accidental.NATURAL.offset == 0
        assert Accidental.SHARP.offset == 1
        assert Accidental.DOUBLE_SHARP.offset == 2

    def test_parse_ascii(self) -> None:
        assert Accidental.parse("") == Accidental.NATURAL
        assert Accidental.parse("n") == Accidental.NATURAL
        assert Accidental.parse("b") == Accidental.FLAT
        assert Accidental.parse("#") == Accidental.SHARP
        assert Accidental.parse("bb") == Accidental.DOUBLE_FLAT
        assert Accidental.parse("##") == Accidental.DOUBLE_SHARP
        assert Accidental.parse("x") == Accidental.DOUBLE_SHARP

    def test_parse_unicode(self) -> None:
        assert Accidental.parse("♭") == Accidental.FLAT
        assert Accidental.parse("♯") == Accidental.SHARP
        assert Accidental.parse("𝄫") == Accidental.DOUBLE_FLAT
        assert Accidental.parse("𝄪") == Accidental.DOUBLE_SHARP
        assert Accidental.parse("♮") == Accidental.NATURAL

    def test_parse_triple_rejected(self) -> None:
        with pytest.raises(ParseError):
            Accidental.parse("###")
        with pytest.raises(ParseError):
            Accidental.parse("bbb")

    def test_from_offset(self) -> None:
        assert Accidental.from_offset(-1, Letter.B) == Accidental.FLAT
        assert Accidental.from_offset(2, Letter.F) == Accidental.DOUBLE_SHARP

    def test_from_offset_out_of_range(self) -> None:
        with pytest.raises(UnrepresentableAccidental) as exc:
            Accidental.from_offset(3, Letter.F)
        assert exc.value.letter == Letter.F
        assert exc.value.needed == 3

    def test_ascii(self) -> None:
        assert Accidental.NATURAL.ascii == ""
        assert Accidental.DOUBLE_FLAT.ascii == "bb"


class TestNoteName:
    """Tests for NoteName."""

    def test_pitch_class(self) -> None:
        assert NoteName(Letter.C).pitch_class == 0
        assert NoteName(Letter.C, Accidental.SHARP).pitch_class == 1
        assert NoteName(Letter.C, Accidental.FLAT).pitch_class == 11
        assert NoteName(Letter.B, Accidental.SHARP).pitch_class == 0
        assert NoteName(Letter.B, Accidental.DOUBLE_SHARP).pitch_class == 1

    def test_enharmonic_but_not_equal(self) -> None:
        """C# and Db sound the same but are different notes."""
        c_sharp = NoteName.parse("C#")
        d_flat = NoteName.parse("Db")
        assert c_sharp.is_enharmonic_with(d_flat)
        assert c_sharp != d_flat

    def test_hashable(self) -> None:
        notes = {NoteName.parse("C#"), NoteName.parse("C#"), NoteName.parse("Db")}
        assert len(notes) == 2

    def test_parse(self) -> None:
        assert NoteName.parse("F##") == NoteName(Letter.F, Accidental.DOUBLE_SHARP)
        assert NoteName.parse("bbb") == NoteName(Letter.B, Accidental.DOUBLE_FLAT)
        assert NoteName.parse("G♯") == NoteName(Letter.G, Accidental.SHARP)
        assert NoteName.parse(" e ") == NoteName(Letter.E)

    def test_parse_invalid(self) -> None:
        for text in ["", "H", "C###", "C4", "#C"]:
            with pytest.raises(ParseError):
                NoteName.parse(text)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            NoteName.parse("X")
        assert issubclass(ParseError, TheoryError)

    def test_str(self) -> None:
        assert str(NoteName.parse("Eb")) == "Eb"
        assert str(NoteName.parse("F𝄪")) == "F##"
        assert str(NoteName.natural(Letter.A)) == "A"

    def test_transpose_by_interval(self) -> None:
        from chuk_mcp_theory.core import Interval

        assert NoteName.parse("C#").transpose(Interval.M3) == NoteName.parse("E#")
        assert NoteName.parse("C").transpose_down(Interval.P5) == NoteName.parse("F")

    def test_interval_to(self) -> None:
        from chuk_mcp_theory.core import Interval

        c = NoteName.parse("C")
        assert c.interval_to(NoteName.parse("E")) == Interval.MAJOR_THIRD
        assert c.interval_to(NoteName.parse("Fb")) == Interval.DIMINISHED_FOURTH
        assert c.interval_to(NoteName.parse("E#")) == Interval.AUGMENTED_THIRD
        assert NoteName.parse("A").interval_to(c) == Interval.MINOR_THIRD
