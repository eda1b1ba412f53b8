"""Readers for the whitespace-separated frequency, waveform and offset files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .errors import NumberParseError
from .waveforms import Waveform, parse_number, parse_waveform

_LOGGER = logging.getLogger("stepsynth.loaders")


def _iter_tokens(text: str) -> Iterator[tuple[int, str]]:
    for line_number, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            yield line_number, token


def parse_floats(text: str, *, source: str = "<string>") -> list[float]:
    numbers: list[float] = []
    for line_number, token in _iter_tokens(text):
        try:
            numbers.append(parse_number(token))
        except ValueError as exc:
            raise NumberParseError(token, source=source, line=line_number) from exc
    return numbers


def parse_waveforms(text: str, *, source: str = "<string>") -> list[Waveform]:
    return [
        parse_waveform(token, source=source, line=line_number)
        for line_number, token in _iter_tokens(text)
    ]


def load_floats(path: str | Path) -> list[float]:
    target = Path(path)
    numbers = parse_floats(target.read_text(encoding="utf-8"), source=str(target))
    _LOGGER.info("Loaded %d numbers from %s", len(numbers), target)
    return numbers


def load_waveforms(path: str | Path) -> list[Waveform]:
    target = Path(path)
    waveforms = parse_waveforms(target.read_text(encoding="utf-8"), source=str(target))
    _LOGGER.info("Loaded %d waveforms from %s", len(waveforms), target)
    return waveforms
