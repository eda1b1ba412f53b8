from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

import numpy as np
import soundfile as sf  # type: ignore[import]
from numpy.typing import NDArray

from .errors import InvalidConfigError

FloatArray = NDArray[np.float64]
Int32Array = NDArray[np.int32]
AudioNumbers = NDArray[np.floating[Any]] | Sequence[float]

SAMPLE_RATE = 48_000
# Full scale for 24-bit signed PCM; -1.0 maps to -(2**23 - 1), never -2**23.
PCM24_SCALE = 2**23 - 1
PCM24_SUBTYPE = "PCM_24"
WAV_FORMAT = "WAV"
# libsndfile keeps the top 24 bits of int32 input for PCM_24 files.
_INT32_SHIFT = 8


def quantize_pcm24(samples: AudioNumbers) -> Int32Array:
    """Clip to [-1, 1] and scale to signed 24-bit integers."""

    mono: FloatArray = np.asarray(samples, dtype=np.float64).reshape(-1)
    clipped = np.clip(mono, -1.0, 1.0)
    return np.round(clipped * PCM24_SCALE).astype(np.int32)


def _to_int32_frames(samples: AudioNumbers) -> Int32Array:
    return np.left_shift(quantize_pcm24(samples), _INT32_SHIFT)


def iter_quantized(chunks: Iterable[AudioNumbers]) -> Iterator[Int32Array]:
    """Yield int32 frames ready for a PCM_24 sound file, one per chunk."""

    for chunk in chunks:
        yield _to_int32_frames(chunk)


def _write_whole(target: Path, samples: AudioNumbers, sample_rate: int) -> None:
    sf.write(target, _to_int32_frames(samples), sample_rate, subtype=PCM24_SUBTYPE, format=WAV_FORMAT)


def _looks_like_samples(sequence: Sequence[object]) -> bool:
    match sequence:
        case []:
            return True
        case [int() | float() | np.floating(), *_]:
            return True
        case _:
            return False


def write_wav(
    path: str | Path,
    audio_or_chunks: AudioNumbers | Iterable[AudioNumbers],
    *,
    sample_rate: int = SAMPLE_RATE,
) -> Path:
    """Write mono 24-bit PCM from a full array, a float sequence or a chunk iterator."""

    if sample_rate <= 0:
        raise InvalidConfigError(f"sample_rate must be positive, got {sample_rate!r}")
    target = Path(path)
    audio_obj: object = audio_or_chunks
    match audio_obj:
        case np.ndarray():
            _write_whole(target, audio_obj, sample_rate)
            return target
        case str() | bytes():
            raise InvalidConfigError("audio_or_chunks must be audio samples or chunk iterables")
        case Sequence() as sequence if _looks_like_samples(sequence):
            _write_whole(target, sequence, sample_rate)
            return target
        case Iterable() as chunks:
            pass
        case _:
            raise InvalidConfigError("audio_or_chunks must be audio samples or chunk iterables")

    with sf.SoundFile(
        target,
        mode="w",
        samplerate=sample_rate,
        channels=1,
        subtype=PCM24_SUBTYPE,
        format=WAV_FORMAT,
    ) as handle:
        for frames in iter_quantized(chunks):
            handle.write(frames)

    return target
