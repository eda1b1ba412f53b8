"""
Phase-accumulator step sequencer.

A run walks a shared step index through three independently-cycling
sequences (frequencies, waveforms, phase offsets). Each step lasts until the
oscillator completes a cycle, or half a cycle when two breakpoints per cycle
are requested. The fractional phase left over at a step boundary carries into
the next step, so there is no discontinuity at the switch.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

from .errors import EmptySequenceError, InvalidSequenceError, SequencerExhaustedError
from .waveforms import Waveform, evaluate, format_waveform, wrap_phase

_LOGGER = logging.getLogger("stepsynth.sequencer")

FloatArray: TypeAlias = NDArray[np.float64]

DEFAULT_CHUNK_SIZE = 4096
HALF_CYCLE_BREAKPOINTS = 2


def freq_to_phase_inc(freq: float, sample_rate: int) -> float:
    return freq / sample_rate


def freq_to_sample_length(freq: float, sample_rate: int) -> float:
    return sample_rate / freq


@dataclass(frozen=True, slots=True)
class StepSequence:
    """Frequencies, waveforms and optional phase offsets, each cycled on its own."""

    frequencies: tuple[float, ...]
    waveforms: tuple[Waveform, ...]
    phase_offsets: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies", tuple(float(f) for f in self.frequencies))
        object.__setattr__(self, "waveforms", tuple(self.waveforms))
        if self.phase_offsets is not None:
            object.__setattr__(
                self, "phase_offsets", tuple(float(p) for p in self.phase_offsets)
            )
        if not self.frequencies:
            raise EmptySequenceError("frequency sequence is empty; at least one frequency is required")
        if not self.waveforms:
            raise EmptySequenceError("waveform sequence is empty; at least one waveform is required")
        for index, freq in enumerate(self.frequencies):
            if not math.isfinite(freq) or freq <= 0.0:
                raise InvalidSequenceError(
                    f"frequency #{index} must be a positive finite number of Hz, got {freq!r}"
                )

    @classmethod
    def from_lists(
        cls,
        frequencies: Sequence[float],
        waveforms: Sequence[Waveform],
        phase_offsets: Sequence[float] | None = None,
    ) -> StepSequence:
        return cls(
            tuple(frequencies),
            tuple(waveforms),
            None if phase_offsets is None else tuple(phase_offsets),
        )

    @property
    def length(self) -> int:
        """Number of steps in one run: the longest of the three sequences."""
        offsets = len(self.phase_offsets) if self.phase_offsets else 0
        return max(len(self.frequencies), len(self.waveforms), offsets)

    def frequency_at(self, step_index: int) -> float:
        return self.frequencies[step_index % len(self.frequencies)]

    def waveform_at(self, step_index: int) -> Waveform:
        return self.waveforms[step_index % len(self.waveforms)]

    def phase_offset_at(self, step_index: int) -> float:
        if not self.phase_offsets:
            return 0.0
        return self.phase_offsets[step_index % len(self.phase_offsets)]


@dataclass(slots=True)
class SequencerState:
    waveform: Waveform
    frequency: float
    phase_increment: float
    phase_offset: float = 0.0
    step_index: int = 0
    phase: float = 0.0
    last_phase: float = 0.0
    # Phase at the start of the current step and samples advanced since then.
    origin: float = 0.0
    elapsed: int = 0


class Sequencer:
    """Stateful sample generator; iterate it or call :meth:`step` per sample."""

    def __init__(
        self,
        sequence: StepSequence,
        *,
        sample_rate: int,
        breakpoints_per_cycle: int = 1,
    ) -> None:
        if sample_rate <= 0:
            raise InvalidSequenceError(f"sample rate must be positive, got {sample_rate!r}")
        self._sequence = sequence
        self._sample_rate = sample_rate
        self._half_cycle = breakpoints_per_cycle == HALF_CYCLE_BREAKPOINTS
        self._length = sequence.length
        frequency = sequence.frequency_at(0)
        self._state = SequencerState(
            waveform=sequence.waveform_at(0),
            frequency=frequency,
            phase_increment=freq_to_phase_inc(frequency, sample_rate),
            phase_offset=sequence.phase_offset_at(0),
        )

    @property
    def state(self) -> SequencerState:
        return self._state

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def length(self) -> int:
        return self._length

    @property
    def done(self) -> bool:
        return self._state.step_index >= self._length

    def step(self) -> float:
        """Emit the current sample, then advance the phase and maybe the step."""
        state = self._state
        if state.step_index >= self._length:
            raise SequencerExhaustedError(f"sequencer finished after {self._length} steps")

        sample = evaluate(state.waveform, state.phase, state.phase_offset)

        # Measured from the step origin so rounding does not build up per sample.
        state.elapsed += 1
        state.phase = state.origin + (state.elapsed * state.frequency) / self._sample_rate

        if state.phase >= 1.0 or (
            self._half_cycle and state.phase >= 0.5 and state.last_phase < 0.5
        ):
            self._advance()
        return sample

    def _advance(self) -> None:
        state = self._state
        sequence = self._sequence
        state.step_index += 1
        state.phase = wrap_phase(state.phase)
        state.last_phase = state.phase
        state.origin = state.phase
        state.elapsed = 0
        state.frequency = sequence.frequency_at(state.step_index)
        state.phase_increment = freq_to_phase_inc(state.frequency, self._sample_rate)
        state.waveform = sequence.waveform_at(state.step_index)
        state.phase_offset = sequence.phase_offset_at(state.step_index)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "step %d/%d: %.6g Hz %s offset=%.6g phase=%.6g",
                state.step_index,
                self._length,
                state.frequency,
                format_waveform(state.waveform),
                state.phase_offset,
                state.phase,
            )

    def __iter__(self) -> Iterator[float]:
        while not self.done:
            yield self.step()


def iter_samples(
    sequence: StepSequence,
    *,
    sample_rate: int,
    breakpoints_per_cycle: int = 1,
) -> Iterator[float]:
    """Yield samples one at a time until the last step completes."""
    return iter(
        Sequencer(sequence, sample_rate=sample_rate, breakpoints_per_cycle=breakpoints_per_cycle)
    )


def iter_chunks(
    sequence: StepSequence,
    *,
    sample_rate: int,
    breakpoints_per_cycle: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[FloatArray]:
    """Yield float64 blocks of at most ``chunk_size`` samples."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size!r}")
    sequencer = Sequencer(
        sequence, sample_rate=sample_rate, breakpoints_per_cycle=breakpoints_per_cycle
    )
    buffer = np.empty(chunk_size, dtype=np.float64)
    while not sequencer.done:
        count = 0
        while count < chunk_size and not sequencer.done:
            buffer[count] = sequencer.step()
            count += 1
        yield buffer[:count].copy()


def synthesize(
    sequence: StepSequence,
    *,
    sample_rate: int,
    breakpoints_per_cycle: int = 1,
) -> FloatArray:
    """Run the whole sequence and return every sample as one array."""
    samples = iter_samples(
        sequence, sample_rate=sample_rate, breakpoints_per_cycle=breakpoints_per_cycle
    )
    return np.fromiter(samples, dtype=np.float64)


def nominal_length(
    sequence: StepSequence,
    sample_rate: int,
    breakpoints_per_cycle: int = 1,
) -> int:
    """Rough sample count, ignoring the phase carried across step boundaries."""
    fraction = 0.5 if breakpoints_per_cycle == HALF_CYCLE_BREAKPOINTS else 1.0
    total = 0.0
    for step_index in range(sequence.length):
        total += freq_to_sample_length(sequence.frequency_at(step_index), sample_rate) * fraction
    return math.ceil(total)
