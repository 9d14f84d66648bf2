"""
Tests for the spelling engine.

The letter comes from the step count and the accidental from the
semitones, so the result is never an arbitrary enharmonic.
"""

import itertools

import pytest

from chuk_mcp_theory.core import (
    Accidental,
    Interval,
    Letter,
    NoteName,
    Pitch,
    preferred_generic_steps,
    spell,
    spell_by_semitones,
    spell_pitch,
)
from chuk_mcp_theory.errors import UnrepresentableAccidental

ALL_NOTES = [NoteName(letter, acc) for letter, acc in itertools.product(Letter, Accidental)]

SIMPLE_INTERVALS = [
    Interval.P1,
    Interval.m2,
    Interval.M2,
    Interval.AUGMENTED_SECOND,
    Interval.m3,
    Interval.M3,
    Interval.P4,
    Interval.A4,
    Interval.d5,
    Interval.P5,
    Interval.m6,
    Interval.M6,
    Interval.DIMINISHED_SEVENTH,
    Interval.m7,
    Interval.M7,
]


class TestSpell:
    """Letter steps plus semitones to a spelled note."""

    def test_major_third(self) -> None:
        assert spell(NoteName.parse("C"), 2, 4) == NoteName.parse("E")

    def test_diminished_fourth(self) -> None:
        """Same four semitones, three letters: Fb, not E."""
        assert spell(NoteName.parse("C"), 3, 4) == NoteName.parse("Fb")

    def test_never_respells(self) -> None:
        """C# up a major third is E#, never F."""
        assert spell(NoteName.parse("C#"), 2, 4) == NoteName.parse("E#")

    def test_descending(self) -> None:
        assert spell(NoteName.parse("C"), -2, -4) == NoteName.parse("Ab")
        assert spell(NoteName.parse("F"), -1, -1) == NoteName.parse("E")

    def test_double_accidentals(self) -> None:
        assert spell(NoteName.parse("B#"), 2, 4) == NoteName.parse("D##")
        assert spell(NoteName.parse("Gb"), 2, 3) == NoteName.parse("Bbb")

    def test_triple_sharp_rejected(self) -> None:
        with pytest.raises(UnrepresentableAccidental) as exc:
            spell(NoteName.parse("B##"), 2, 4)
        assert exc.value.letter == Letter.D
        assert exc.value.needed == 3

    def test_triple_flat_rejected(self) -> None:
        with pytest.raises(UnrepresentableAccidental):
            spell(NoteName.parse("Fb"), 2, 2)

    def test_major_third_moves_two_letters(self) -> None:
        """From any spelling, a M3 lands exactly two letters up."""
        for note in ALL_NOTES:
            try:
                result = note.transpose(Interval.M3)
            except UnrepresentableAccidental:
                continue
            assert note.letter.steps_to(result.letter) == 2
            assert (result.pitch_class - note.pitch_class) % 12 == 4

    def test_letter_and_pitch_class_agree(self) -> None:
        """Every successful spelling keeps both distances."""
        for note, interval in itertools.product(ALL_NOTES, SIMPLE_INTERVALS):
            try:
                result = note.transpose(interval)
            except UnrepresentableAccidental:
                continue
            assert note.letter.steps_to(result.letter) == interval.steps % 7
            assert (result.pitch_class - note.pitch_class) % 12 == interval.semitones % 12
            assert note.interval_to(result) == interval


class TestSpellPitch:
    """Spelling with octaves."""

    def test_octave_follows_letter_wrap(self) -> None:
        assert spell_pitch(Pitch.parse("F4"), 4, 7) == Pitch.parse("C5")
        assert spell_pitch(Pitch.parse("B4"), 1, 2) == Pitch.parse("C#5")

    def test_descending_across_c(self) -> None:
        assert spell_pitch(Pitch.parse("C4"), -1, -1) == Pitch.parse("B3")

    def test_octave_belongs_to_letter(self) -> None:
        """B#3 sounds as C4 but keeps its own octave."""
        result = spell_pitch(Pitch.parse("A3"), 1, 3)
        assert result == Pitch.parse("B#3")
        assert result.midi_number == 60

    def test_unrepresentable(self) -> None:
        with pytest.raises(UnrepresentableAccidental):
            spell_pitch(Pitch.parse("C4"), 1, 5)


class TestChromaticPolicy:
    """Semitone-only transposition picks the letter by policy."""

    @pytest.mark.parametrize(
        "start,semitones,expected",
        [
            ("C", 1, "C#"),
            ("C", -1, "B"),
            ("B", 1, "C"),
            ("A#", 1, "B"),
            ("F#", 1, "G"),
            ("Db", 2, "Eb"),
            ("E", 1, "F"),
            ("G", 6, "C#"),
            ("Gb", -6, "C"),
            ("D", -1, "Db"),
            ("Eb", 1, "E"),
            ("C", 0, "C"),
            ("C", 12, "C"),
        ],
    )
    def test_examples(self, start: str, semitones: int, expected: str) -> None:
        result = spell_by_semitones(NoteName.parse(start), semitones)
        assert result == NoteName.parse(expected)

    def test_fewest_accidentals(self) -> None:
        """B is preferred over A## and Cb."""
        result = spell_by_semitones(NoteName.parse("A"), 2)
        assert result.accidental == Accidental.NATURAL

    def test_conventional_steps(self) -> None:
        assert preferred_generic_steps(NoteName.parse("C"), 7) == 4
        assert preferred_generic_steps(NoteName.parse("C"), 4) == 2
        assert preferred_generic_steps(NoteName.parse("C"), -7) == -4
        assert preferred_generic_steps(NoteName.parse("C"), 12) == 7

    def test_pitch_class_always_correct(self) -> None:
        for note in ALL_NOTES:
            for semitones in range(-12, 13):
                result = spell_by_semitones(note, semitones)
                assert (result.pitch_class - note.pitch_class) % 12 == semitones % 12
