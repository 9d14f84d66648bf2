"""
Text rendering for spelled notes, pitches and intervals.

Spelling is decided by the core; this module only chooses glyphs.
"""

from __future__ import annotations

from chuk_mcp_theory.constants import AccidentalStyle
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.note import Accidental, NoteName
from chuk_mcp_theory.core.pitch import Pitch

_UNICODE_ACCIDENTALS: dict[Accidental, str] = {
    Accidental.DOUBLE_FLAT: "𝄫",
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "",
    Accidental.SHARP: "♯",
    Accidental.DOUBLE_SHARP: "𝄪",
}

NATURAL_SIGN = "♮"


def render_accidental(
    accidental: Accidental,
    style: AccidentalStyle = AccidentalStyle.ASCII,
    show_natural: bool = False,
) -> str:
    """
    Render an accidental.

    ASCII uses b, #, bb, ## and never shows a natural. Unicode uses
    ♭ ♯ 𝄫 𝄪, and ♮ for naturals when show_natural is set.
    """
    if style == AccidentalStyle.ASCII:
        return accidental.ascii
    if accidental == Accidental.NATURAL and show_natural:
        return NATURAL_SIGN
    return _UNICODE_ACCIDENTALS[accidental]


def render_note(
    note: NoteName,
    style: AccidentalStyle = AccidentalStyle.ASCII,
    show_natural: bool = False,
) -> str:
    """Render a note name, e.g. 'F#' or 'F♯'."""
    return note.letter.name + render_accidental(note.accidental, style, show_natural)


def render_pitch(
    pitch: Pitch,
    style: AccidentalStyle = AccidentalStyle.ASCII,
    show_natural: bool = False,
) -> str:
    """Render a pitch, e.g. 'Bb3' or 'B♭3'."""
    return render_note(pitch.name, style, show_natural) + str(pitch.octave)


def render_interval(interval: Interval, long: bool = False) -> str:
    """Render an interval as shorthand ('M3') or in full ('major third')."""
    return interval.name if long else str(interval)
