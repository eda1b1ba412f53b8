from __future__ import annotations

import io

from stepsynth.errors import WaveformParseError
from stepsynth.spinner import Spinner, render_error


def test_spinner_disabled_is_noop() -> None:
    spinner = Spinner("Rendering", enabled=False)
    spinner.start()
    spinner.update("Still rendering")
    spinner.stop()
    with Spinner("Rendering", stream=io.StringIO()):
        pass


def test_render_error_plain_stream() -> None:
    stream = io.StringIO()
    render_error("stepsynth render", WaveformParseError("zz", source="w.txt", line=1), stream=stream)
    text = stream.getvalue()
    assert text.startswith("stepsynth render failed: WaveformParseError: w.txt:1: invalid waveform 'zz'")
    assert "logs:" in text
