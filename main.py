from __future__ import annotations

import argparse
import logging
from pathlib import Path
import re
import sys
from typing import Sequence

import numpy as np

from textplot import (
    ChartConfig,
    generate_cosine,
    generate_random_walk,
    generate_sine,
    render_overlay_with_config,
    render_with_config,
)
from textplot.config import env_int


LOGGER = logging.getLogger("textplot.cli")
_TOKEN_SPLIT = re.compile(r"[\s,]+")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "plot":
        text = _read_input(args.input)
        try:
            series = _parse_series(text, overlay=args.overlay)
        except ValueError as exc:
            parser.error(str(exc))
    elif args.command == "demo":
        try:
            series = [_demo_series(args)]
        except ValueError as exc:
            parser.error(str(exc))
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    try:
        config = _resolve_config(args, series)
        if len(series) == 1:
            chart = render_with_config(series[0], config)
        else:
            chart = render_overlay_with_config(series, config)
    except ValueError as exc:
        # ChartError is a ValueError; both end up as a one-line report.
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(chart)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--height", type=int, default=None, help="Chart rows. Default: TEXTPLOT_HEIGHT or 10.")
    common.add_argument(
        "--width",
        type=int,
        default=None,
        help="Chart columns. Default: TEXTPLOT_WIDTH, else the length of the longest series.",
    )
    common.add_argument("--min", dest="vmin", type=float, default=None, help="Explicit lower value bound.")
    common.add_argument("--max", dest="vmax", type=float, default=None, help="Explicit upper value bound.")
    common.add_argument("--ticks", type=int, default=None, help="Number of Y-axis labels.")
    common.add_argument("--format", dest="label_format", default=None, help="Label template, e.g. '{:.1f}'.")
    common.add_argument("--ascii", action="store_true", help="Use ASCII-only glyphs.")
    common.add_argument("--no-labels", action="store_true", help="Omit the Y-axis label margin.")
    common.add_argument("-v", "--verbose", action="store_true", help="Log render details to stderr.")

    parser = argparse.ArgumentParser(prog="textplot")
    sub = parser.add_subparsers(dest="command", required=True)

    plot = sub.add_parser("plot", parents=[common], help="Plot numbers read from a file or stdin.")
    plot.add_argument("input", nargs="?", type=Path, default=None, help="Input file. Default: stdin.")
    plot.add_argument("--overlay", action="store_true", help="Treat each input line as a separate series.")

    demo = sub.add_parser("demo", parents=[common], help="Plot a generated series.")
    demo.add_argument("kind", choices=["sine", "cosine", "random-walk"])
    demo.add_argument("--points", type=int, default=60)
    demo.add_argument("--frequency", type=float, default=1.0)
    demo.add_argument("--phase", type=float, default=0.0)
    demo.add_argument("--start", type=float, default=100.0)
    demo.add_argument("--volatility", type=float, default=5.0)
    demo.add_argument("--seed", type=int, default=None)
    return parser


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _parse_series(text: str, *, overlay: bool) -> list[np.ndarray]:
    if overlay:
        lines = [line for line in text.splitlines() if line.strip()]
        return [_parse_numbers(line) for line in lines]
    return [_parse_numbers(text)]


def _parse_numbers(text: str) -> np.ndarray:
    tokens = [tok for tok in _TOKEN_SPLIT.split(text.strip()) if tok]
    values = np.empty(len(tokens), dtype=np.float64)
    for i, tok in enumerate(tokens):
        try:
            values[i] = float(tok)
        except ValueError as exc:
            raise ValueError(f"not a number: {tok!r}") from exc
    return values


def _demo_series(args: argparse.Namespace) -> np.ndarray:
    if args.kind == "sine":
        return generate_sine(args.points, args.frequency, args.phase)
    if args.kind == "cosine":
        return generate_cosine(args.points, args.frequency, args.phase)
    return generate_random_walk(args.points, args.start, args.volatility, seed=args.seed)


def _resolve_config(args: argparse.Namespace, series: Sequence[np.ndarray]) -> ChartConfig:
    config = ChartConfig.from_env()
    if args.width is not None:
        config = config.with_width(args.width)
    elif env_int("TEXTPLOT_WIDTH", None) is None:
        config = config.with_width(max([1] + [int(s.size) for s in series]))
    if args.height is not None:
        config = config.with_height(args.height)
    if args.vmin is not None:
        config = config.with_min(args.vmin)
    if args.vmax is not None:
        config = config.with_max(args.vmax)
    if args.ticks is not None:
        config = config.with_label_ticks(args.ticks)
    if args.label_format is not None:
        config = config.with_label_format(args.label_format)
    if args.ascii:
        config = config.with_ascii_symbols()
    if args.no_labels:
        config = config.with_labels(False)
    LOGGER.debug("resolved config: %s", config)
    return config


if __name__ == "__main__":
    raise SystemExit(main())
