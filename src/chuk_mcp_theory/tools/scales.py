"""
Scale tools - MCP tools for scale construction and discovery.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.config import TheorySettings
from chuk_mcp_theory.core import BUILTIN_SCALE_TYPES
from chuk_mcp_theory.models import ScaleInfo
from chuk_mcp_theory.scales import ScaleLibrary
from chuk_mcp_theory.tools.spelling import note_info

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(
    mcp: ChukMCPServer,
    settings: TheorySettings,
    library: ScaleLibrary,
) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Rendering settings
        library: The scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(
        root: str,
        scale_type: str = "major",
        octave: int | None = None,
    ) -> str:
        """
        Spell a scale from a root.

        Each letter appears exactly once, so D major has F# and C#, and
        F# harmonic minor has E# as its leading tone.

        Args:
            root: Root note name ('F#', 'Bb')
            scale_type: Scale name ('major', 'harmonic_minor', 'dorian', 'lydian_dominant')
            octave: If given, also return the ascending pitches from this octave

        Returns:
            JSON string with notes, steps and root-to-degree intervals

        Example:
            theory_build_scale(root="F#", scale_type="harmonic_minor")
        """
        try:
            scale = library.get_scale(root, scale_type)
            info = ScaleInfo.from_scale(scale, settings.accidental_style, settings.show_natural)
            result: dict[str, Any] = {"status": "success", "scale": info.model_dump()}
            if octave is not None:
                result["pitches"] = [note_info(p, settings) for p in scale.pitches(octave)]
            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List available scale types.

        Returns the built-in scale types and every catalog scale from the
        library and project directories.

        Returns:
            JSON string with scale names and catalog details

        Example:
            theory_list_scales()
        """
        try:
            catalog = library.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "builtin": [
                        {"name": name, "steps": list(scale_type.steps)}
                        for name, scale_type in BUILTIN_SCALE_TYPES.items()
                    ],
                    "catalog": [m.model_dump() for m in catalog],
                    "count": len(BUILTIN_SCALE_TYPES) + len(catalog),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_scales"] = theory_list_scales

    return tools
