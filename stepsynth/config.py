from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .audio import SAMPLE_RATE
from .errors import InvalidConfigError
from .sequencer import DEFAULT_CHUNK_SIZE

_LOGGER = logging.getLogger("stepsynth.config")

DEFAULT_OUTPUT_FILE = Path("output.wav")
DEFAULT_BREAKPOINTS_PER_CYCLE = 1


class RenderSettings(BaseModel):
    """Inputs and knobs for one render run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    frequencies: Path
    waveforms: Path
    phase_offsets: Path | None = None
    output_file: Path = DEFAULT_OUTPUT_FILE
    sample_rate: int = Field(default=SAMPLE_RATE, gt=0)
    # Only 2 enables the half-cycle breakpoint; every other value means one.
    breakpoints_per_cycle: int = Field(default=DEFAULT_BREAKPOINTS_PER_CYCLE, ge=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderSettings:
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            _LOGGER.debug("Render settings rejected: %s", exc)
            raise InvalidConfigError(f"Invalid render settings: {exc}") from exc
