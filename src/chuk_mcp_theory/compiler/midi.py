"""
MIDI export - spelled pitches out to a file.

MIDI has no notion of spelling, so export only reads Pitch.midi_number.
This module handles conversion from MidiEvents to MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_theory.constants import MIDI_MAX, MIDI_MIN

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_theory.core.chord import Triad
    from chuk_mcp_theory.core.pitch import Pitch
    from chuk_mcp_theory.core.scale import Scale

logger = logging.getLogger(__name__)

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int = DEFAULT_VELOCITY  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not MIDI_MIN <= self.pitch <= MIDI_MAX:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def pitches_to_events(
    pitches: Sequence[Pitch],
    start_ticks: int = 0,
    duration_ticks: int = TICKS_PER_BEAT,
    velocity: int = DEFAULT_VELOCITY,
    simultaneous: bool = False,
) -> list[MidiEvent]:
    """
    Turn pitches into note events, one after another or all at once.

    Args:
        pitches: Spelled pitches
        start_ticks: Tick of the first note
        duration_ticks: Length of each note
        velocity: Note velocity
        simultaneous: Sound every pitch together (a chord)

    Raises:
        ValueError: If a pitch falls outside MIDI 0-127
    """
    events = []
    for i, pitch in enumerate(pitches):
        offset = 0 if simultaneous else i * duration_ticks
        events.append(
            MidiEvent(
                pitch=pitch.midi_number,
                start_ticks=start_ticks + offset,
                duration_ticks=duration_ticks,
                velocity=velocity,
            )
        )
    return events


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def scale_to_midi(
    scale: Scale,
    octave: int = 4,
    tempo_bpm: int = 120,
    descending: bool = False,
) -> MidiFile:
    """
    Render a scale as ascending quarter notes, root to octave.

    With descending=True the run comes back down to the root.
    """
    pitches = scale.pitches(octave)
    if descending:
        pitches = pitches + pitches[-2::-1]
    logger.debug("Exporting %s as %d notes", scale, len(pitches))
    return events_to_midi(pitches_to_events(pitches), tempo_bpm=tempo_bpm)


def triads_to_midi(
    triads: Sequence[Triad],
    octave: int = 4,
    tempo_bpm: int = 120,
    beats_per_chord: int = 2,
) -> MidiFile:
    """Render triads as block chords in close position, one after another."""
    duration = TICKS_PER_BEAT * beats_per_chord
    events: list[MidiEvent] = []
    for i, triad in enumerate(triads):
        events.extend(
            pitches_to_events(
                triad.pitches(octave),
                start_ticks=i * duration,
                duration_ticks=duration,
                simultaneous=True,
            )
        )
    return events_to_midi(events, tempo_bpm=tempo_bpm)
