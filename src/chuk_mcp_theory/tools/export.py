"""
Export tools - MCP tools for MIDI export of spelled material.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.compiler import scale_to_midi, triads_to_midi
from chuk_mcp_theory.config import TheorySettings
from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import diatonic_triads
from chuk_mcp_theory.scales import ScaleLibrary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    settings: TheorySettings,
    library: ScaleLibrary,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Output directory, tempo and default octave
        library: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    output_dir = settings.output_dir

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_scale_midi(
        root: str,
        scale_type: str = "major",
        octave: int | None = None,
        descending: bool = False,
        output_name: str | None = None,
    ) -> str:
        """
        Write a scale run to a MIDI file.

        Args:
            root: Root note name
            scale_type: Scale name
            octave: Octave of the root (default from settings)
            descending: Come back down to the root after the octave
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path

        Example:
            theory_export_scale_midi(root="D", scale_type="dorian")
        """
        try:
            scale = library.get_scale(root, scale_type)
            mid = scale_to_midi(
                scale,
                octave=settings.default_octave if octave is None else octave,
                tempo_bpm=settings.tempo_bpm,
                descending=descending,
            )

            filename = f"{output_name or str(scale).replace(' ', '_')}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            mid.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "scale": str(scale),
                    "message": f"Exported {scale} to {output_path}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_scale_midi"] = theory_export_scale_midi

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_chords_midi(
        root: str,
        scale_type: str = "major",
        degrees: list[int] | None = None,
        octave: int | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Write diatonic triads to a MIDI file as block chords.

        Args:
            root: Root note name
            scale_type: Scale name
            degrees: Degrees to play in order (default 1-7), e.g. [1, 6, 4, 5]
            octave: Octave of each chord root (default from settings)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and chord symbols

        Example:
            theory_export_chords_midi(root="C", degrees=[1, 6, 4, 5])
        """
        try:
            scale = library.get_scale(root, scale_type)
            triads = diatonic_triads(scale)
            for d in degrees or []:
                if not 1 <= d <= 7:
                    raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=d))
            chosen = [triads[d - 1] for d in degrees] if degrees else triads
            mid = triads_to_midi(
                chosen,
                octave=settings.default_octave if octave is None else octave,
                tempo_bpm=settings.tempo_bpm,
            )

            filename = f"{output_name or str(scale).replace(' ', '_') + '_chords'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            mid.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": [t.symbol for t in chosen],
                    "message": f"Exported {len(chosen)} chords to {output_path}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_chords_midi"] = theory_export_chords_midi

    return tools
