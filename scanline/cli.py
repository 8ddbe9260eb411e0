"""``scanline INPUT [-o OUTPUT_DIR] [-v]``: run a command file and write its PNGs."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from scanline.canvas import CanvasBoundsError
from scanline.log import setup_default_logging
from scanline.script import ScriptError, run_script

_logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("output_files")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    input_path: Path
    output_dir: Path = DEFAULT_OUTPUT_DIR
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scanline", description="Rasterize lines and triangles from a command file into PNG images."
    )
    parser.add_argument("input", type=Path, help="Command file to execute")
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR, help="Directory for the PNG files"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def parse_config(argv=None) -> RenderConfig:
    args = build_parser().parse_args(argv)
    return RenderConfig(input_path=args.input, output_dir=args.output_dir, verbose=args.verbose)


def write_canvases(canvases, output_dir: Path) -> list[Path]:
    return [canvas.save(output_dir) for canvas in canvases]


def main(argv=None) -> int:
    config = parse_config(argv)
    setup_default_logging(logging.DEBUG if config.verbose else logging.INFO)

    if not config.input_path.is_file():
        _logger.error("No input file: %s", config.input_path)
        return 1
    try:
        canvases = run_script(config.input_path)
    except (ScriptError, CanvasBoundsError) as e:
        _logger.error("%s: %s", config.input_path, e)
        return 1
    except OSError as e:
        _logger.error("Could not read %s: %s", config.input_path, e)
        return 1
    if not canvases:
        _logger.warning("%s defines no canvases; nothing written", config.input_path)

    try:
        written = write_canvases(canvases, config.output_dir)
    except OSError as e:
        _logger.error("Could not write output: %s", e)
        return 1
    _logger.info("%d image(s) written to %s", len(written), config.output_dir)
    return 0
