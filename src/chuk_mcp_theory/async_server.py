#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for correctly spelled music theory. Every
note it returns has the right letter and accidental for its context:
a major third above C# is E#, the leading tone of F# harmonic minor is E#,
and B + 1 semitone is C.

The server provides tools for:
- Spelling notes by interval or semitone distance
- Naming intervals between spelled notes
- Building scales from built-in and catalog patterns
- Diatonic triads and seventh chords, triad identification
- Extended, altered and inverted chords, chord naming from loose notes
- Exporting scales and chords to MIDI files
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.config import TheorySettings
from chuk_mcp_theory.scales import ScaleLibrary
from chuk_mcp_theory.tools import (
    register_chord_tools,
    register_export_tools,
    register_scale_tools,
    register_spelling_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

settings = TheorySettings.from_env()
scale_library = ScaleLibrary(project_path=settings.scales_dir)

# Register all tools
spelling_tools = register_spelling_tools(mcp, settings)
scale_tools = register_scale_tools(mcp, settings, scale_library)
chord_tools = register_chord_tools(mcp, settings, scale_library)
export_tools = register_export_tools(mcp, settings, scale_library)

# Export tool functions for direct access
theory_spell_note = spelling_tools["theory_spell_note"]
theory_transpose = spelling_tools["theory_transpose"]
theory_interval_between = spelling_tools["theory_interval_between"]

theory_build_scale = scale_tools["theory_build_scale"]
theory_list_scales = scale_tools["theory_list_scales"]

theory_triad = chord_tools["theory_triad"]
theory_diatonic_chords = chord_tools["theory_diatonic_chords"]
theory_identify_triad = chord_tools["theory_identify_triad"]
theory_chord = chord_tools["theory_chord"]
theory_identify_chord = chord_tools["theory_identify_chord"]

theory_export_scale_midi = export_tools["theory_export_scale_midi"]
theory_export_chords_midi = export_tools["theory_export_chords_midi"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Scale library: {scale_library.library_path}")
logger.info(f"  Project scales: {settings.scales_dir}")
logger.info(f"  Output dir: {settings.output_dir}")
