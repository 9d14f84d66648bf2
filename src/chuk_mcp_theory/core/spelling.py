"""
Spelling engine - resolves letter steps plus semitones into a spelled note.

This is where the theory lives. Transposition is a function of both the
generic distance (letters) and the specific distance (semitones):

    spell(C, 2, 4) = E      (major third: two letters up, four semitones)
    spell(C, 3, 4) = Fb     (diminished fourth: three letters up, four semitones)
    spell(C#, 2, 4) = E#    (never F)

The letter is fixed by the step count, so there is never an enharmonic tie
to break. If the letter can't reach the target pitch with at most a double
accidental, the request fails - no silent respelling.

When only a semitone count is given (chromatic transposition), a letter
distance is chosen first by an explicit policy - see preferred_generic_steps.
"""

from __future__ import annotations

import logging

from chuk_mcp_theory.constants import (
    LETTERS_PER_OCTAVE,
    MIDI_OCTAVE_OFFSET,
    SEMITONES_PER_OCTAVE,
)
from chuk_mcp_theory.errors import InvalidInterval, UnrepresentableAccidental

from .interval import Interval
from .note import Accidental, Letter, NoteName
from .pitch import Pitch

logger = logging.getLogger(__name__)

# Conventional letter distance for each semitone count within an octave,
# used only to break ties in chromatic spelling.
_CONVENTIONAL_STEPS: tuple[int, ...] = (0, 1, 1, 2, 2, 3, 3, 4, 5, 5, 6, 6)


def _signed_offset(semitones: int) -> int:
    """Normalize a semitone difference into -6..5."""
    half = SEMITONES_PER_OCTAVE // 2
    return (semitones + half) % SEMITONES_PER_OCTAVE - half


def spell(start: NoteName, generic_steps: int, semitones: int) -> NoteName:
    """
    Spell the note `generic_steps` letters and `semitones` semitones from start.

    Both distances may be negative (descending).

    Args:
        start: The starting note
        generic_steps: Letter steps to move (interval generic size minus one)
        semitones: Semitones to move

    Returns:
        The spelled note

    Raises:
        UnrepresentableAccidental: If the target letter needs more than a
            double sharp or double flat
    """
    letter = start.letter.step(generic_steps)
    target = start.pitch_class + semitones
    needed = _signed_offset(target - letter.natural_pitch_class)
    if not -2 <= needed <= 2:
        logger.debug(
            "Unspellable: %s %+d steps %+d semitones needs %+d on %s",
            start,
            generic_steps,
            semitones,
            needed,
            letter.name,
        )
        raise UnrepresentableAccidental(letter, needed)

    result = NoteName(letter, Accidental(needed))
    logger.debug("Spelled %s %+d steps %+d semitones -> %s", start, generic_steps, semitones, result)
    return result


def spell_pitch(start: Pitch, generic_steps: int, semitones: int) -> Pitch:
    """
    Spell a pitch, carrying the octave across the B-C boundary.

    The octave comes from counting letters (F4 up four letters is C5), and
    the accidental is measured against that absolute target, so an
    inconsistent request can't wrap around into a wrong octave.

    Raises:
        UnrepresentableAccidental: If the target needs more than a double accidental
    """
    octave, index = divmod(start.diatonic_number + generic_steps, LETTERS_PER_OCTAVE)
    letter = Letter(index)
    natural_midi = SEMITONES_PER_OCTAVE * (octave + MIDI_OCTAVE_OFFSET) + letter.natural_pitch_class
    needed = start.midi_number + semitones - natural_midi
    if not -2 <= needed <= 2:
        raise UnrepresentableAccidental(letter, needed)
    return Pitch(NoteName(letter, Accidental(needed)), octave)


def _chromatic_candidates(start: NoteName, semitones: int) -> list[tuple[int, Accidental]]:
    """Every (signed letter steps, accidental) that reaches start + semitones."""
    direction = 1 if semitones > 0 else -1
    magnitude = abs(semitones)
    target_pc = (start.pitch_class + semitones) % SEMITONES_PER_OCTAVE
    octaves = magnitude // SEMITONES_PER_OCTAVE

    candidates: list[tuple[int, Accidental]] = []
    for letter in Letter:
        offset = _signed_offset(target_pc - letter.natural_pitch_class)
        if not -2 <= offset <= 2:
            continue
        if direction > 0:
            k = start.letter.steps_to(letter)
        else:
            k = letter.steps_to(start.letter)
        for j in (octaves - 1, octaves, octaves + 1):
            steps = k + LETTERS_PER_OCTAVE * j
            if steps < 0:
                continue
            try:
                Interval(steps + 1, magnitude)
            except InvalidInterval:
                continue
            candidates.append((direction * steps, Accidental(offset)))
            break
    return candidates


def preferred_generic_steps(start: NoteName, semitones: int) -> int:
    """
    Choose the letter distance for a chromatic (semitone-only) transposition.

    Policy, applied in order over every spelling of the target pitch that
    needs at most a double accidental:

    1. Fewest accidentals wins (B over A##, F over E#).
    2. Accidentals lean the way the start note leans - flats from a flat,
       sharps from a sharp. From a natural, sharps going up, flats going down.
    3. The conventional letter distance for the semitone count
       (1-2 semitones: one letter, 3-4: two, 5-6: three, 7: four, ...).

    Examples:
        C +1 -> C#    C -1 -> B     A# +1 -> B
        Db +2 -> Eb   G +6 -> C#    Gb -6 -> C

    Returns:
        Signed letter steps (negative when descending)
    """
    if semitones == 0:
        return 0

    direction = 1 if semitones > 0 else -1
    lean = (1 if start.accidental.is_sharp else -1) if start.accidental.offset else direction
    octaves, remainder = divmod(abs(semitones), SEMITONES_PER_OCTAVE)
    conventional = _CONVENTIONAL_STEPS[remainder] + LETTERS_PER_OCTAVE * octaves

    def score(candidate: tuple[int, Accidental]) -> tuple[int, int, int, int]:
        steps, accidental = candidate
        against_lean = 0 if accidental.offset == 0 or (accidental.offset > 0) == (lean > 0) else 1
        return (
            abs(accidental.offset),
            against_lean,
            abs(abs(steps) - conventional),
            abs(steps),
        )

    candidates = _chromatic_candidates(start, semitones)
    if not candidates:
        raise UnrepresentableAccidental(start.letter, semitones)
    steps, accidental = min(candidates, key=score)
    logger.debug(
        "Chromatic %s %+d: chose %+d steps (%s) from %d candidates",
        start,
        semitones,
        steps,
        accidental.name,
        len(candidates),
    )
    return steps


def spell_by_semitones(start: NoteName, semitones: int) -> NoteName:
    """Spell a chromatic transposition using preferred_generic_steps."""
    return spell(start, preferred_generic_steps(start, semitones), semitones)
