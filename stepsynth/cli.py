from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from rich.console import Console

from . import __version__
from .audio import SAMPLE_RATE
from .config import DEFAULT_BREAKPOINTS_PER_CYCLE, DEFAULT_OUTPUT_FILE, RenderSettings
from .logging_utils import configure_logging, log_exception
from .render import render
from .spinner import Spinner, render_error

_LOGGER = logging.getLogger("stepsynth.cli")
_CONSOLE = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepsynth",
        description="Render a sequence of oscillator steps to a 24-bit mono WAV file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help="WAV file to write (default: %(default)s).",
    )
    parser.add_argument(
        "-s",
        "--sample-rate",
        type=int,
        default=SAMPLE_RATE,
        help="Sample rate in Hz (default: %(default)s).",
    )
    parser.add_argument(
        "-f",
        "--frequencies",
        type=Path,
        required=True,
        help="File of whitespace-separated frequencies in Hz.",
    )
    parser.add_argument(
        "-w",
        "--waveforms",
        type=Path,
        required=True,
        help="File of waveform tokens: s c p t u d, or a number for a DC level.",
    )
    parser.add_argument(
        "-p",
        "--phase-offsets",
        type=Path,
        default=None,
        help="Optional file of phase offsets in cycles.",
    )
    parser.add_argument(
        "-b",
        "--breakpoints-per-cycle",
        type=int,
        default=DEFAULT_BREAKPOINTS_PER_CYCLE,
        help="2 advances at every half cycle, anything else at every full cycle.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    try:
        parser = build_parser()
        args = parser.parse_args(argv)
        settings = RenderSettings.from_mapping(
            {
                "frequencies": args.frequencies,
                "waveforms": args.waveforms,
                "phase_offsets": args.phase_offsets,
                "output_file": args.output_file,
                "sample_rate": args.sample_rate,
                "breakpoints_per_cycle": args.breakpoints_per_cycle,
            }
        )
        with Spinner(f"Rendering {settings.output_file}"):
            result = render(settings)
        _CONSOLE.print(
            f"Wrote {result.sample_count} samples ({result.duration:.3f}s, "
            f"{result.steps} steps) to {result.path} (sr={result.sample_rate})"
        )
        return 0
    except Exception as exc:
        debug = bool(os.environ.get("STEPSYNTH_DEBUG"))
        _LOGGER.warning("stepsynth CLI failed: %s", exc, exc_info=debug)
        log_exception("stepsynth render", exc)
        render_error("stepsynth render", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
