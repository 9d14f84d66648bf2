"""
Server configuration.

Settings only affect the outer surfaces (rendering, export, the scale
catalog). The core theory never reads them.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from chuk_mcp_theory.constants import AccidentalStyle

ENV_PREFIX = "CHUK_THEORY_"


class TheorySettings(BaseModel):
    """Settings for the theory server and its exporters."""

    accidental_style: AccidentalStyle = Field(
        default=AccidentalStyle.UNICODE,
        description="How accidentals are rendered in tool output",
    )
    show_natural: bool = Field(
        default=False,
        description="Render an explicit natural sign in Unicode output",
    )
    default_octave: int = Field(
        default=4,
        ge=-1,
        le=9,
        description="Octave used when a tool needs a pitch but only has a note name",
    )
    tempo_bpm: int = Field(default=120, ge=20, le=300, description="Tempo for MIDI export")
    output_dir: Path = Field(
        default=Path("output"),
        description="Directory for exported MIDI files",
    )
    scales_dir: Path | None = Field(
        default=None,
        description="Project scale catalog, overriding the built-in library",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TheorySettings:
        """
        Build settings from CHUK_THEORY_* environment variables.

        CHUK_THEORY_ACCIDENTAL_STYLE=ascii, CHUK_THEORY_TEMPO_BPM=90, ...
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(values)
