"""
Chord tools - MCP tools for triads, extended chords and diatonic harmony.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.config import TheorySettings
from chuk_mcp_theory.core import (
    Chord,
    ChordExtension,
    NoteName,
    Triad,
    TriadQuality,
    diatonic_sevenths,
    diatonic_triads,
)
from chuk_mcp_theory.errors import InvalidChord
from chuk_mcp_theory.models import ChordInfo, TriadInfo
from chuk_mcp_theory.scales import ScaleLibrary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(
    mcp: ChukMCPServer,
    settings: TheorySettings,
    library: ScaleLibrary,
) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Rendering settings
        library: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def info(chord: Any) -> dict[str, Any]:
        return TriadInfo.from_chord(
            chord, settings.accidental_style, settings.show_natural
        ).model_dump()

    @mcp.tool  # type: ignore[arg-type]
    async def theory_triad(root: str, quality: str = "major", transform: str = "") -> str:
        """
        Spell a triad from its root, optionally applying neo-Riemannian moves.

        Args:
            root: Root note name ('F#')
            quality: 'major', 'minor', 'diminished' or 'augmented'
            transform: Sequence of P, R, L applied left to right ('PR', 'LPR')

        Returns:
            JSON string with the triad and any transformed result

        Example:
            theory_triad(root="C", quality="major", transform="R")  # Am
        """
        try:
            triad = Triad.build(NoteName.parse(root), TriadQuality(quality.lower()))
            result: dict[str, Any] = {"status": "success", "triad": info(triad)}

            if transform:
                current = triad
                steps = []
                for move in transform.upper():
                    if move == "P":
                        current = current.transform_p()
                    elif move == "R":
                        current = current.transform_r()
                    elif move == "L":
                        current = current.transform_l()
                    else:
                        raise InvalidChord(f"Unknown transform '{move}', expected P, R or L")
                    steps.append({"transform": move, "symbol": current.symbol})
                result["transforms"] = steps
                result["result"] = info(current)

            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to build triad")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_triad"] = theory_triad

    @mcp.tool  # type: ignore[arg-type]
    async def theory_diatonic_chords(
        root: str,
        scale_type: str = "major",
        sevenths: bool = False,
    ) -> str:
        """
        List the chords built on each degree of a scale.

        Qualities are measured from the scale's own spelling, so harmonic
        minor gives an augmented III and a diminished vii.

        Args:
            root: Root note name
            scale_type: Scale name ('major', 'harmonic_minor', ...)
            sevenths: Return seventh chords instead of triads

        Returns:
            JSON string with one chord per degree

        Example:
            theory_diatonic_chords(root="F#", scale_type="harmonic_minor")
        """
        try:
            scale = library.get_scale(root, scale_type)
            chords = diatonic_sevenths(scale) if sevenths else diatonic_triads(scale)
            return json.dumps(
                {
                    "status": "success",
                    "scale": str(scale),
                    "chords": [info(c) for c in chords],
                    "progression": " ".join(c.roman or "" for c in chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to derive diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_diatonic_chords"] = theory_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_triad(notes: list[str]) -> str:
        """
        Name a triad from three notes in any order.

        Args:
            notes: Three note names, e.g. ['F', 'A', 'D']

        Returns:
            JSON string with the root, quality and symbol

        Example:
            theory_identify_triad(notes=["F", "A", "D"])  # Dm
        """
        try:
            triad = Triad.identify(NoteName.parse(n) for n in notes)
            return json.dumps({"status": "success", "triad": info(triad)})
        except Exception as e:
            logger.exception("Failed to identify triad")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_triad"] = theory_identify_triad

    def chord_info(chord: Chord, octave: int | None) -> dict[str, Any]:
        return ChordInfo.from_chord(
            chord,
            settings.default_octave if octave is None else octave,
            settings.accidental_style,
            settings.show_natural,
        ).model_dump()

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord(
        root: str,
        quality: str = "major",
        extensions: list[str] | None = None,
        inversion: int = 0,
        octave: int | None = None,
    ) -> str:
        """
        Spell an extended, altered or inverted chord.

        Every tone is spelled by its interval from the root, so C9 has Bb
        and D, and C7#9 has D# rather than Eb.

        Args:
            root: Root note name ('C', 'F#')
            quality: Base triad: 'major', 'minor', 'diminished' or 'augmented'
            extensions: Applied in order, e.g. ['7', 'b9'], ['9'], ['sus4'], ['add6']
            inversion: Chord tone in the bass (0 = root position, 1 = first inversion)
            octave: Octave of the voicing (defaults to the configured octave)

        Returns:
            JSON string with the symbol, intervals, notes and pitches

        Example:
            theory_chord(root="C", extensions=["9"])  # C E G Bb D
        """
        try:
            chord = Chord.build(
                NoteName.parse(root),
                TriadQuality(quality.lower()),
                [ChordExtension.parse(e) for e in extensions or []],
            ).inverted(inversion)
            return json.dumps({"status": "success", "chord": chord_info(chord, octave)})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord"] = theory_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_chord(notes: list[str], octave: int | None = None) -> str:
        """
        Name a triad or seventh chord from loose notes; the first note is the bass.

        Args:
            notes: Three or four note names, e.g. ['B', 'D', 'F', 'G']
            octave: Octave of the voicing (defaults to the configured octave)

        Returns:
            JSON string with the symbol, inversion and voicing

        Example:
            theory_identify_chord(notes=["G", "B", "D", "F"])  # G7
        """
        try:
            chord = Chord.identify(NoteName.parse(n) for n in notes)
            return json.dumps({"status": "success", "chord": chord_info(chord, octave)})
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_chord"] = theory_identify_chord

    return tools
