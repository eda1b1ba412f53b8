"""Load input files, run the sequencer and stream the result into a WAV file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .audio import write_wav
from .config import RenderSettings
from .loaders import load_floats, load_waveforms
from .sequencer import DEFAULT_CHUNK_SIZE, FloatArray, StepSequence, iter_chunks, nominal_length

_LOGGER = logging.getLogger("stepsynth.render")


@dataclass(frozen=True, slots=True)
class RenderResult:
    path: Path
    sample_count: int
    sample_rate: int
    steps: int

    @property
    def duration(self) -> float:
        return self.sample_count / self.sample_rate


def load_sequence(settings: RenderSettings) -> StepSequence:
    frequencies = load_floats(settings.frequencies)
    waveforms = load_waveforms(settings.waveforms)
    phase_offsets = None
    if settings.phase_offsets is not None:
        phase_offsets = load_floats(settings.phase_offsets)
    return StepSequence.from_lists(frequencies, waveforms, phase_offsets)


def render_sequence(
    sequence: StepSequence,
    output_file: str | Path,
    *,
    sample_rate: int,
    breakpoints_per_cycle: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> RenderResult:
    """Synthesize ``sequence`` chunk by chunk straight into ``output_file``."""
    _LOGGER.debug(
        "Rendering %d steps, about %d samples",
        sequence.length,
        nominal_length(sequence, sample_rate, breakpoints_per_cycle),
    )
    counted = 0

    def _counting() -> Iterator[FloatArray]:
        nonlocal counted
        for chunk in iter_chunks(
            sequence,
            sample_rate=sample_rate,
            breakpoints_per_cycle=breakpoints_per_cycle,
            chunk_size=chunk_size,
        ):
            counted += len(chunk)
            yield chunk

    path = write_wav(output_file, _counting(), sample_rate=sample_rate)
    result = RenderResult(
        path=path,
        sample_count=counted,
        sample_rate=sample_rate,
        steps=sequence.length,
    )
    _LOGGER.info(
        "Rendered %d samples (%.3fs, %d steps) to %s",
        result.sample_count,
        result.duration,
        result.steps,
        result.path,
    )
    return result


def render(settings: RenderSettings) -> RenderResult:
    sequence = load_sequence(settings)
    return render_sequence(
        sequence,
        settings.output_file,
        sample_rate=settings.sample_rate,
        breakpoints_per_cycle=settings.breakpoints_per_cycle,
        chunk_size=settings.chunk_size,
    )
