"""
chuk-mcp-theory - correctly spelled pitches, intervals, scales and triads.
"""

__version__ = "0.1.0"
