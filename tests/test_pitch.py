"""
Tests for Pitch - note names with octaves.
"""

import pytest

from chuk_mcp_theory.core import Accidental, Interval, Letter, NoteName, Pitch
from chuk_mcp_theory.errors import ParseError, UnrepresentableAccidental


class TestPitchNumbering:
    """MIDI numbers and frequencies."""

    def test_middle_c(self) -> None:
        assert Pitch.parse("C4").midi_number == 60

    def test_a440(self) -> None:
        a4 = Pitch.parse("A4")
        assert a4.midi_number == 69
        assert a4.frequency == pytest.approx(440.0)
        assert Pitch.parse("A5").frequency == pytest.approx(880.0)

    def test_accidentals(self) -> None:
        assert Pitch.parse("Eb4").midi_number == 63
        assert Pitch.parse("C#4").midi_number == 61
        assert Pitch.parse("Bbb3").midi_number == 57

    def test_octave_changes_at_c(self) -> None:
        """B#4 sounds as C5; Cb4 sounds as B3."""
        assert Pitch.parse("B#4").midi_number == Pitch.parse("C5").midi_number
        assert Pitch.parse("Cb4").midi_number == Pitch.parse("B3").midi_number

    def test_low_octaves(self) -> None:
        assert Pitch.parse("C-1").midi_number == 0
        assert Pitch.parse("G9").midi_number == 127

    def test_enharmonic(self) -> None:
        assert Pitch.parse("F#4").is_enharmonic_with(Pitch.parse("Gb4"))
        assert Pitch.parse("F#4") != Pitch.parse("Gb4")
        assert not Pitch.parse("F#4").is_enharmonic_with(Pitch.parse("Gb5"))

    def test_from_parts(self) -> None:
        pitch = Pitch.from_parts(Letter.E, Accidental.FLAT, 2)
        assert pitch.name == NoteName.parse("Eb")
        assert pitch.octave == 2


class TestPitchParse:
    """Parsing pitches from text."""

    @pytest.mark.parametrize(
        "text,letter,accidental,octave",
        [
            ("C4", Letter.C, Accidental.NATURAL, 4),
            ("C-2", Letter.C, Accidental.NATURAL, -2),
            ("F#-1", Letter.F, Accidental.SHARP, -1),
            ("Bbb5", Letter.B, Accidental.DOUBLE_FLAT, 5),
            ("a♭3", Letter.A, Accidental.FLAT, 3),
            ("Gx2", Letter.G, Accidental.DOUBLE_SHARP, 2),
        ],
    )
    def test_parse(self, text: str, letter: Letter, accidental: Accidental, octave: int) -> None:
        pitch = Pitch.parse(text)
        assert pitch.letter == letter
        assert pitch.accidental == accidental
        assert pitch.octave == octave

    @pytest.mark.parametrize("text", ["C", "C#", "4", "H4", "C4.5", "", "C###4"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ParseError):
            Pitch.parse(text)

    def test_str(self) -> None:
        assert str(Pitch.parse("C#4")) == "C#4"
        assert str(Pitch.parse("b♭-1")) == "Bb-1"


class TestPitchTranspose:
    """Transposition carries the octave with the letter."""

    def test_fifth_across_octave(self) -> None:
        assert Pitch.parse("F4").transpose(Interval.P5) == Pitch.parse("C5")

    def test_second_across_octave(self) -> None:
        assert Pitch.parse("B4").transpose(Interval.M2) == Pitch.parse("C#5")

    def test_augmented_third(self) -> None:
        assert Pitch.parse("C#4").transpose(Interval.M3) == Pitch.parse("E#4")

    def test_compound(self) -> None:
        assert Pitch.parse("C4").transpose(Interval.MAJOR_NINTH) == Pitch.parse("D5")
        assert Pitch.parse("G3").transpose(Interval.MINOR_TENTH) == Pitch.parse("Bb4")

    def test_transpose_down(self) -> None:
        assert Pitch.parse("C5").transpose_down(Interval.P5) == Pitch.parse("F4")
        assert Pitch.parse("C4").transpose_down(Interval.m2) == Pitch.parse("B3")
        assert Pitch.parse("E4").transpose_down(Interval.OCTAVE) == Pitch.parse("E3")

    def test_transpose_round_trip(self) -> None:
        start = Pitch.parse("Ab3")
        for interval in [Interval.m3, Interval.A4, Interval.M7, Interval.MAJOR_NINTH]:
            assert start.transpose(interval).transpose_down(interval) == start

    def test_midi_distance_matches_interval(self) -> None:
        start = Pitch.parse("D4")
        assert start.transpose(Interval.M6).midi_number - start.midi_number == 9

    def test_unrepresentable(self) -> None:
        with pytest.raises(UnrepresentableAccidental):
            Pitch.parse("B##4").transpose(Interval.M3)

    def test_by_semitones(self) -> None:
        assert Pitch.parse("B4").transpose_by_semitones(1) == Pitch.parse("C5")
        assert Pitch.parse("C4").transpose_by_semitones(1) == Pitch.parse("C#4")
        assert Pitch.parse("C4").transpose_by_semitones(-1) == Pitch.parse("B3")
        assert Pitch.parse("C4").transpose_by_semitones(11) == Pitch.parse("B4")
        assert Pitch.parse("C4").transpose_by_semitones(12) == Pitch.parse("C5")
        assert Pitch.parse("Db4").transpose_by_semitones(2) == Pitch.parse("Eb4")


class TestPitchIntervals:
    """Intervals between pitches, compound included."""

    def test_simple(self) -> None:
        assert Pitch.parse("C4").interval_to(Pitch.parse("E4")) == Interval.M3

    def test_compound(self) -> None:
        assert Pitch.parse("C4").interval_to(Pitch.parse("D5")) == Interval.MAJOR_NINTH
        assert Pitch.parse("C4").interval_to(Pitch.parse("C5")) == Interval.OCTAVE

    def test_measured_from_lower(self) -> None:
        assert Pitch.parse("G4").interval_to(Pitch.parse("C4")) == Interval.P5

    def test_spelling_decides(self) -> None:
        assert Pitch.parse("C4").interval_to(Pitch.parse("Fb4")) == Interval.DIMINISHED_FOURTH


class TestFromMidi:
    """Default spellings from MIDI numbers."""

    def test_naturals(self) -> None:
        assert Pitch.from_midi(60) == Pitch.parse("C4")
        assert Pitch.from_midi(69) == Pitch.parse("A4")
        assert Pitch.from_midi(0) == Pitch.parse("C-1")

    def test_sharps_by_default(self) -> None:
        assert Pitch.from_midi(61) == Pitch.parse("C#4")

    def test_prefer_flats(self) -> None:
        assert Pitch.from_midi(61, prefer_flats=True) == Pitch.parse("Db4")
        assert Pitch.from_midi(70, prefer_flats=True) == Pitch.parse("Bb4")

    def test_round_trip(self) -> None:
        for midi in range(128):
            assert Pitch.from_midi(midi).midi_number == midi
