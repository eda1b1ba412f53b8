from __future__ import annotations

__version__ = "0.1.0"

from .audio import PCM24_SCALE, SAMPLE_RATE, quantize_pcm24, write_wav
from .config import RenderSettings
from .errors import (
    EmptySequenceError,
    InvalidConfigError,
    InvalidSequenceError,
    NumberParseError,
    ParseError,
    SequencerExhaustedError,
    StepSynthError,
    WaveformParseError,
)
from .loaders import load_floats, load_waveforms, parse_floats, parse_waveforms
from .logging_utils import configure_logging as _configure_logging
from .render import RenderResult, render, render_sequence
from .sequencer import (
    Sequencer,
    SequencerState,
    StepSequence,
    iter_chunks,
    iter_samples,
    nominal_length,
    synthesize,
)
from .waveforms import (
    COSINE,
    DC,
    PULSE,
    SAW_DOWN,
    SAW_UP,
    SINE,
    TRIANGLE,
    Cosine,
    Pulse,
    SawDown,
    SawUp,
    Sine,
    Triangle,
    Waveform,
    evaluate,
    format_waveform,
    parse_waveform,
)

__all__ = [
    "COSINE",
    "DC",
    "PCM24_SCALE",
    "PULSE",
    "SAMPLE_RATE",
    "SAW_DOWN",
    "SAW_UP",
    "SINE",
    "TRIANGLE",
    "Cosine",
    "EmptySequenceError",
    "InvalidConfigError",
    "InvalidSequenceError",
    "NumberParseError",
    "ParseError",
    "Pulse",
    "RenderResult",
    "RenderSettings",
    "SawDown",
    "SawUp",
    "Sequencer",
    "SequencerExhaustedError",
    "SequencerState",
    "Sine",
    "StepSequence",
    "StepSynthError",
    "Triangle",
    "Waveform",
    "WaveformParseError",
    "evaluate",
    "format_waveform",
    "iter_chunks",
    "iter_samples",
    "load_floats",
    "load_waveforms",
    "nominal_length",
    "parse_floats",
    "parse_waveform",
    "parse_waveforms",
    "quantize_pcm24",
    "render",
    "render_sequence",
    "synthesize",
    "write_wav",
]

_configure_logging()
del _configure_logging
