"""
Pydantic models for the theory server.

This module provides:
- NoteInfo / IntervalInfo / ScaleInfo / TriadInfo / ChordInfo: tool responses
- ScaleDefinition / ScaleMetadata: YAML scale catalog entries
"""

from chuk_mcp_theory.models.scale import ScaleDefinition, ScaleMetadata
from chuk_mcp_theory.models.theory import (
    ChordInfo,
    IntervalInfo,
    NoteInfo,
    ScaleInfo,
    TriadInfo,
)

__all__ = [
    "ChordInfo",
    "IntervalInfo",
    "NoteInfo",
    "ScaleDefinition",
    "ScaleInfo",
    "ScaleMetadata",
    "TriadInfo",
]
