"""
Theory response models - what the tools hand back to clients.

Every model carries both the structured spelling (letter, accidental offset)
and a rendered display string, so clients never have to re-spell.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.constants import AccidentalStyle
from chuk_mcp_theory.core.chord import Chord, SeventhChord, Triad
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.note import NoteName
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.core.scale import Scale
from chuk_mcp_theory.errors import InvalidScale
from chuk_mcp_theory.rendering import render_interval, render_note, render_pitch


class NoteInfo(BaseModel):
    """A spelled note, optionally with an octave."""

    name: str = Field(description="ASCII spelling, e.g. 'F#' or 'Bb4'")
    display: str = Field(description="Spelling in the configured accidental style")
    letter: str = Field(description="Letter A-G")
    accidental: int = Field(ge=-2, le=2, description="Semitone offset of the accidental")
    pitch_class: int = Field(ge=0, le=11)
    octave: int | None = None
    midi_number: int | None = None
    frequency: float | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_note(
        cls,
        note: NoteName,
        style: AccidentalStyle = AccidentalStyle.ASCII,
        show_natural: bool = False,
    ) -> NoteInfo:
        return cls(
            name=str(note),
            display=render_note(note, style, show_natural),
            letter=note.letter.name,
            accidental=note.accidental.offset,
            pitch_class=note.pitch_class,
        )

    @classmethod
    def from_pitch(
        cls,
        pitch: Pitch,
        style: AccidentalStyle = AccidentalStyle.ASCII,
        show_natural: bool = False,
    ) -> NoteInfo:
        return cls(
            name=str(pitch),
            display=render_pitch(pitch, style, show_natural),
            letter=pitch.letter.name,
            accidental=pitch.accidental.offset,
            pitch_class=pitch.pitch_class,
            octave=pitch.octave,
            midi_number=pitch.midi_number,
            frequency=round(pitch.frequency, 3),
        )


class IntervalInfo(BaseModel):
    """An interval with its derived quality."""

    shorthand: str = Field(description="e.g. 'M3', 'AA4'")
    name: str = Field(description="e.g. 'major third'")
    generic_size: int = Field(ge=1)
    semitones: int
    quality: str
    is_compound: bool

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        return cls(
            shorthand=render_interval(interval),
            name=render_interval(interval, long=True),
            generic_size=interval.generic_size,
            semitones=interval.semitones,
            quality=interval.quality.long_name,
            is_compound=interval.is_compound,
        )


class TriadInfo(BaseModel):
    """A triad or seventh chord, spelled."""

    symbol: str = Field(description="Chord symbol, e.g. 'Dm', 'G7'")
    quality: str
    roman: str | None = None
    degree: int | None = Field(default=None, ge=1, le=7)
    notes: list[str] = Field(description="Chord tones in the configured accidental style")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(
        cls,
        chord: Triad | SeventhChord,
        style: AccidentalStyle = AccidentalStyle.ASCII,
        show_natural: bool = False,
    ) -> TriadInfo:
        return cls(
            symbol=chord.symbol,
            quality=chord.quality.name.lower(),
            roman=chord.roman,
            degree=chord.degree,
            notes=[render_note(n, style, show_natural) for n in chord.notes()],
        )


class ChordInfo(BaseModel):
    """A general chord: extensions, alterations and inversions."""

    symbol: str = Field(description="Chord symbol with slash bass, e.g. 'C9', 'C/E'")
    root: str
    bass: str
    inversion: int = Field(ge=0)
    intervals: list[str] = Field(description="Root-position intervals above the root")
    notes: list[str] = Field(description="Chord tones from the bass up")
    pitches: list[str] = Field(default_factory=list, description="Voicing with octaves")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(
        cls,
        chord: Chord,
        octave: int = 4,
        style: AccidentalStyle = AccidentalStyle.ASCII,
        show_natural: bool = False,
    ) -> ChordInfo:
        return cls(
            symbol=chord.symbol,
            root=render_note(chord.root, style, show_natural),
            bass=render_note(chord.bass, style, show_natural),
            inversion=chord.inversion,
            intervals=[str(i) for i in chord.intervals],
            notes=[render_note(n, style, show_natural) for n in chord.notes()],
            pitches=[render_pitch(p, style, show_natural) for p in chord.pitches(octave)],
        )


class ScaleInfo(BaseModel):
    """A spelled scale."""

    name: str = Field(description="e.g. 'F# harmonic minor'")
    root: str
    scale_type: str
    steps: list[int]
    notes: list[str] = Field(description="Seven degrees in the configured accidental style")
    intervals: list[str] = Field(default_factory=list, description="Root-to-degree intervals")
    key_signature: int | None = Field(
        default=None,
        description="Sharps (positive) or flats (negative); None outside major and its modes",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_scale(
        cls,
        scale: Scale,
        style: AccidentalStyle = AccidentalStyle.ASCII,
        show_natural: bool = False,
    ) -> ScaleInfo:
        notes = scale.notes()
        try:
            key_signature: int | None = scale.key_signature()
        except InvalidScale:
            key_signature = None
        return cls(
            name=str(scale),
            root=render_note(scale.root, style, show_natural),
            scale_type=str(scale.scale_type),
            steps=list(scale.scale_type.steps),
            notes=[render_note(n, style, show_natural) for n in notes],
            intervals=[str(i) for i in scale.scale_type.intervals()],
            key_signature=key_signature,
        )
