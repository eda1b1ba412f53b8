"""
Waveform shapes and their evaluators.

Every shape maps ``(phase, phase_offset)`` to an amplitude. Sine and Cosine
are periodic on their own; Triangle and the saws wrap ``phase + offset`` into
[0, 1) first. Pulse compares the raw sum against 0.5 without wrapping, so an
offset that pushes the sum past 1.0 keeps the pulse low for the whole cycle.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from .errors import WaveformParseError

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class Sine:
    pass


@dataclass(frozen=True, slots=True)
class Cosine:
    pass


@dataclass(frozen=True, slots=True)
class Pulse:
    pass


@dataclass(frozen=True, slots=True)
class Triangle:
    pass


@dataclass(frozen=True, slots=True)
class SawUp:
    pass


@dataclass(frozen=True, slots=True)
class SawDown:
    pass


@dataclass(frozen=True, slots=True)
class DC:
    """Constant amplitude, independent of phase."""

    value: float


Waveform: TypeAlias = Sine | Cosine | Pulse | Triangle | SawUp | SawDown | DC

SINE = Sine()
COSINE = Cosine()
PULSE = Pulse()
TRIANGLE = Triangle()
SAW_UP = SawUp()
SAW_DOWN = SawDown()

# Single-letter shape codes used in waveform files
SHAPE_CODES: Mapping[str, Waveform] = MappingProxyType(
    {
        "s": SINE,
        "c": COSINE,
        "p": PULSE,
        "t": TRIANGLE,
        "u": SAW_UP,
        "d": SAW_DOWN,
    }
)


def wrap_phase(phase: float) -> float:
    """Wrap into [0, 1) with a non-negative remainder."""
    return phase - math.floor(phase / 1.0) * 1.0


def lerp(x: float, y1: float, y2: float) -> float:
    return y1 + ((y2 - y1) * x)


def sine(phase: float, phase_offset: float) -> float:
    return math.sin((phase + phase_offset) * TWO_PI)


def cosine(phase: float, phase_offset: float) -> float:
    return math.cos((phase + phase_offset) * TWO_PI)


def pulse(phase: float, phase_offset: float) -> float:
    # Unwrapped on purpose: the sum is compared as-is.
    if phase + phase_offset < 0.5:
        return 1.0
    return -1.0


def triangle(phase: float, phase_offset: float) -> float:
    ph = wrap_phase(phase + phase_offset)
    if ph <= 0.25:
        return lerp(ph / 0.25, 0.0, 1.0)
    if ph <= 0.75:
        return lerp((ph - 0.25) / 0.5, 1.0, -1.0)
    return lerp((ph - 0.75) / 0.25, -1.0, 0.0)


def saw_up(phase: float, phase_offset: float) -> float:
    ph = wrap_phase(phase + phase_offset)
    return (ph * 2.0) - 1.0


def saw_down(phase: float, phase_offset: float) -> float:
    return -saw_up(phase, phase_offset)


def evaluate(waveform: Waveform, phase: float, phase_offset: float = 0.0) -> float:
    """Amplitude of ``waveform`` at ``phase`` shifted by ``phase_offset``."""
    match waveform:
        case Sine():
            return sine(phase, phase_offset)
        case Cosine():
            return cosine(phase, phase_offset)
        case Pulse():
            return pulse(phase, phase_offset)
        case Triangle():
            return triangle(phase, phase_offset)
        case SawUp():
            return saw_up(phase, phase_offset)
        case SawDown():
            return saw_down(phase, phase_offset)
        case DC(value=value):
            return value
        case _:
            raise TypeError(f"Unknown waveform: {waveform!r}")


def parse_number(token: str) -> float:
    """Parse a decimal number token; raises ValueError for anything else."""
    if "_" in token:
        raise ValueError(f"digit separators are not allowed: {token!r}")
    return float(token)


def parse_waveform(token: str, *, source: str = "<string>", line: int | None = None) -> Waveform:
    """Map a shape letter (any case) or a number (DC level) to a waveform."""
    shape = SHAPE_CODES.get(token.lower())
    if shape is not None:
        return shape
    try:
        return DC(parse_number(token))
    except ValueError as exc:
        raise WaveformParseError(token, source=source, line=line) from exc


def format_waveform(waveform: Waveform) -> str:
    match waveform:
        case DC(value=value):
            return repr(float(value))
        case _:
            for code, shape in SHAPE_CODES.items():
                if shape == waveform:
                    return code
    raise TypeError(f"Unknown waveform: {waveform!r}")
