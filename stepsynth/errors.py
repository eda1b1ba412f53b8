from __future__ import annotations


class StepSynthError(Exception):
    """Base error for the stepsynth library."""


class InvalidSequenceError(StepSynthError):
    """Raised when a step sequence cannot be synthesized."""


class EmptySequenceError(InvalidSequenceError):
    """Raised when the frequency or waveform sequence is empty."""


class InvalidConfigError(StepSynthError):
    """Raised when render settings or writer inputs are invalid."""


class SequencerExhaustedError(StepSynthError):
    """Raised when stepping a sequencer that already reached the last step."""


class ParseError(StepSynthError):
    """Raised when a token in an input source cannot be parsed."""

    kind = "token"

    def __init__(self, token: str, *, source: str = "<string>", line: int | None = None) -> None:
        self.token = token
        self.source = source
        self.line = line
        where = source if line is None else f"{source}:{line}"
        super().__init__(f"{where}: invalid {self.kind} {token!r}")


class NumberParseError(ParseError):
    """Raised when a frequency or phase offset token is not a number."""

    kind = "number"


class WaveformParseError(ParseError):
    """Raised when a waveform token is neither a shape letter nor a number."""

    kind = "waveform"
