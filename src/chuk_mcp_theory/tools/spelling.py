"""
Spelling tools - MCP tools for transposition and intervals.

Every result carries its spelling: asking for a major third above C#
answers E#, never F.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.config import TheorySettings
from chuk_mcp_theory.core import Interval, NoteName, Pitch
from chuk_mcp_theory.models import IntervalInfo, NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_note_or_pitch(text: str) -> NoteName | Pitch:
    """'C#4' parses as a Pitch, 'C#' as a NoteName."""
    stripped = text.strip()
    if stripped and stripped[-1].isdigit():
        return Pitch.parse(stripped)
    return NoteName.parse(stripped)


def note_info(value: NoteName | Pitch, settings: TheorySettings) -> dict[str, Any]:
    """Render a note or pitch with the configured accidental style."""
    if isinstance(value, Pitch):
        info = NoteInfo.from_pitch(value, settings.accidental_style, settings.show_natural)
    else:
        info = NoteInfo.from_note(value, settings.accidental_style, settings.show_natural)
    return info.model_dump(exclude_none=True)


def register_spelling_tools(mcp: ChukMCPServer, settings: TheorySettings) -> dict[str, Any]:
    """
    Register spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Rendering settings

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_spell_note(note: str, interval: str, direction: str = "up") -> str:
        """
        Spell the note an interval above or below another.

        The letter is fixed by the interval's size, so the answer is always
        the theoretically correct spelling.

        Args:
            note: Note name ('C#') or pitch with octave ('C#4')
            interval: Interval shorthand: 'M3', 'P5', 'm7', 'A4', 'M9'
            direction: 'up' or 'down'

        Returns:
            JSON string with the spelled note

        Example:
            theory_spell_note(note="C#4", interval="M3")  # E#4
        """
        try:
            start = parse_note_or_pitch(note)
            ivl = Interval.parse(interval)
            if direction == "up":
                result = start.transpose(ivl)
            elif direction == "down":
                result = start.transpose_down(ivl)
            else:
                return json.dumps(
                    {"status": "error", "message": f"Direction must be 'up' or 'down', got '{direction}'"}
                )

            return json.dumps(
                {
                    "status": "success",
                    "start": note_info(start, settings),
                    "interval": IntervalInfo.from_interval(ivl).model_dump(),
                    "direction": direction,
                    "result": note_info(result, settings),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_spell_note"] = theory_spell_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(note: str, semitones: int) -> str:
        """
        Transpose by a number of semitones.

        With no interval given, the letter is chosen by the fewest-accidentals
        policy: C + 1 = C#, B + 1 = C, C - 1 = B, Db + 2 = Eb.

        Args:
            note: Note name ('Db') or pitch with octave ('Db4')
            semitones: Semitones to move, negative for down

        Returns:
            JSON string with the spelled result

        Example:
            theory_transpose(note="B4", semitones=1)  # C5
        """
        try:
            start = parse_note_or_pitch(note)
            result = start.transpose_by_semitones(semitones)

            return json.dumps(
                {
                    "status": "success",
                    "start": note_info(start, settings),
                    "semitones": semitones,
                    "result": note_info(result, settings),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval_between(lower: str, upper: str) -> str:
        """
        Name the interval between two notes.

        Spelling matters: C to E is a major third, C to Fb a diminished fourth.
        With octaves on both notes, compound intervals are named (C4 to D5 = M9).

        Args:
            lower: First note ('C' or 'C4')
            upper: Second note ('E' or 'E4')

        Returns:
            JSON string with the interval

        Example:
            theory_interval_between(lower="C", upper="Fb")  # d4
        """
        try:
            a = parse_note_or_pitch(lower)
            b = parse_note_or_pitch(upper)
            if isinstance(a, Pitch) and isinstance(b, Pitch):
                ivl = a.interval_to(b)
            else:
                a_name = a.name if isinstance(a, Pitch) else a
                b_name = b.name if isinstance(b, Pitch) else b
                ivl = a_name.interval_to(b_name)

            return json.dumps(
                {
                    "status": "success",
                    "lower": note_info(a, settings),
                    "upper": note_info(b, settings),
                    "interval": IntervalInfo.from_interval(ivl).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval_between"] = theory_interval_between

    return tools
