from __future__ import annotations

from pathlib import Path

import pytest

from stepsynth.errors import NumberParseError, WaveformParseError
from stepsynth.loaders import load_floats, load_waveforms, parse_floats, parse_waveforms
from stepsynth.waveforms import COSINE, DC, PULSE, SAW_DOWN, SAW_UP, SINE, TRIANGLE


def test_parse_floats_spans_lines() -> None:
    assert parse_floats("100 200\n\t300.5\n\n  -0.25  ") == [100.0, 200.0, 300.5, -0.25]


def test_parse_floats_empty_text() -> None:
    assert parse_floats("") == []
    assert parse_floats(" \n \n") == []


def test_parse_floats_reports_token_and_line() -> None:
    with pytest.raises(NumberParseError) as info:
        parse_floats("1 2\n3 x4", source="freqs.txt")
    assert info.value.token == "x4"
    assert info.value.line == 2
    assert info.value.source == "freqs.txt"
    assert "freqs.txt:2" in str(info.value)


def test_parse_waveforms_mixes_letters_and_dc() -> None:
    waves = parse_waveforms("s C p\nT u D 0.5 -1")
    assert waves == [SINE, COSINE, PULSE, TRIANGLE, SAW_UP, SAW_DOWN, DC(0.5), DC(-1.0)]


def test_parse_waveforms_rejects_unknown_token() -> None:
    with pytest.raises(WaveformParseError) as info:
        parse_waveforms("s t\n\nq", source="waves.txt")
    assert info.value.token == "q"
    assert info.value.line == 3


def test_load_files(tmp_path: Path) -> None:
    freqs = tmp_path / "freqs.txt"
    waves = tmp_path / "waves.txt"
    freqs.write_text("440 880\n220\n", encoding="utf-8")
    waves.write_text("s t 0.3\n", encoding="utf-8")

    assert load_floats(freqs) == [440.0, 880.0, 220.0]
    assert load_waveforms(str(waves)) == [SINE, TRIANGLE, DC(0.3)]


def test_load_error_names_the_file(tmp_path: Path) -> None:
    offsets = tmp_path / "offsets.txt"
    offsets.write_text("0.1 oops\n", encoding="utf-8")
    with pytest.raises(NumberParseError, match="offsets.txt:1"):
        load_floats(offsets)


def test_missing_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_floats(tmp_path / "nope.txt")
