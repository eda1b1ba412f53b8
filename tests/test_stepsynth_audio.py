from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf  # type: ignore[import]

from stepsynth.audio import PCM24_SCALE, quantize_pcm24, write_wav
from stepsynth.errors import InvalidConfigError


def _read_pcm24(path: Path) -> np.ndarray:
    data, _ = sf.read(path, dtype="int32")
    return np.right_shift(data, 8)


def test_quantize_clips_and_scales() -> None:
    samples = [1.0, -1.0, 2.0, -3.0, 0.0, 0.5]
    out = quantize_pcm24(samples)
    assert out.dtype == np.int32
    assert out.tolist() == [
        PCM24_SCALE,
        -PCM24_SCALE,
        PCM24_SCALE,
        -PCM24_SCALE,
        0,
        4_194_304,
    ]


def test_negative_full_scale_is_not_reached() -> None:
    assert PCM24_SCALE == 8_388_607
    assert int(quantize_pcm24(np.array([-1.0]))[0]) == -8_388_607


def test_write_wav_array_is_pcm24(tmp_path: Path) -> None:
    target = tmp_path / "tone.wav"
    audio = np.sin(2 * np.pi * np.arange(480) / 480)

    path = write_wav(target, audio, sample_rate=48_000)

    info = sf.info(path)
    assert info.subtype == "PCM_24"
    assert info.channels == 1
    assert info.samplerate == 48_000
    assert info.frames == 480
    assert np.array_equal(_read_pcm24(path), quantize_pcm24(audio))


def test_write_wav_accepts_sequence(tmp_path: Path) -> None:
    target = tmp_path / "seq.wav"
    samples = [0.0, 0.1, -0.1, 1.5]

    write_wav(target, samples, sample_rate=22_050)

    assert _read_pcm24(target).tolist() == quantize_pcm24(samples).tolist()


def test_write_wav_streams_chunks(tmp_path: Path) -> None:
    audio = np.linspace(-1.2, 1.2, 1000)
    chunks = (audio[start : start + 64] for start in range(0, len(audio), 64))

    path = write_wav(tmp_path / "chunks.wav", chunks, sample_rate=8_000)

    assert np.array_equal(_read_pcm24(path), quantize_pcm24(audio))


def test_write_wav_without_wav_suffix(tmp_path: Path) -> None:
    path = write_wav(tmp_path / "render.out", [0.25, -0.25], sample_rate=8_000)
    assert sf.info(path).format == "WAV"


@pytest.mark.parametrize("bad", ["0.1 0.2", b"\x00\x01", 42])
def test_write_wav_rejects_non_audio(tmp_path: Path, bad: object) -> None:
    with pytest.raises(InvalidConfigError):
        write_wav(tmp_path / "bad.wav", bad)  # type: ignore[arg-type]


def test_write_wav_rejects_bad_sample_rate(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfigError):
        write_wav(tmp_path / "bad.wav", [0.0], sample_rate=0)
