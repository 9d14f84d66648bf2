"""
MCP tool implementations.

Tools are organized by domain:
- spelling - Transposition and interval naming
- scales - Scale construction and discovery
- chords - Triads, diatonic chords and identification
- export - MIDI export tools
"""

from chuk_mcp_theory.tools.chords import register_chord_tools
from chuk_mcp_theory.tools.export import register_export_tools
from chuk_mcp_theory.tools.scales import register_scale_tools
from chuk_mcp_theory.tools.spelling import register_spelling_tools

__all__ = [
    "register_chord_tools",
    "register_export_tools",
    "register_scale_tools",
    "register_spelling_tools",
]
