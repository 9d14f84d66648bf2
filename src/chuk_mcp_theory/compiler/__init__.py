"""
Compiler - spelled pitches to MIDI.
"""

from chuk_mcp_theory.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    pitches_to_events,
    scale_to_midi,
    triads_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "pitches_to_events",
    "scale_to_midi",
    "triads_to_midi",
]
