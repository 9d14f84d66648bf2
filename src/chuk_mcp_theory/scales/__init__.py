"""
Scale catalog - scale types beyond the built-ins, described in YAML.
"""

from chuk_mcp_theory.scales.loader import ScaleLibrary

__all__ = ["ScaleLibrary"]
