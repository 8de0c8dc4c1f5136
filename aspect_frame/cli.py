"""Resolve content boxes from the command line, or launch the demo window."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core import AspectRatioConfig, Box, ResizeMode, ResizeResult, resolve

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_aspect_ratio(value: str) -> float:
    """Parse ``"1.778"``, ``"16:9"`` or ``"16/9"`` into a width/height ratio."""

    text = value.strip()
    try:
        for separator in (":", "/"):
            if separator in text:
                left, right = text.split(separator, 1)
                width = float(left)
                height = float(right)
                if height == 0:
                    raise argparse.ArgumentTypeError(f"aspect ratio {value!r} has a zero height")
                ratio = width / height
                break
        else:
            ratio = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid aspect ratio {value!r}") from None
    if not math.isfinite(ratio):
        raise argparse.ArgumentTypeError(f"aspect ratio {value!r} is not a finite number")
    return ratio


def _resize_mode(value: str) -> ResizeMode:
    try:
        return ResizeMode.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="aspect-frame", description=__doc__)
    parser.add_argument("--width", type=_positive_int, default=1920, help="Container width in pixels.")
    parser.add_argument("--height", type=_positive_int, default=1080, help="Container height in pixels.")
    parser.add_argument(
        "--ratio",
        type=parse_aspect_ratio,
        default=16 / 9,
        help="Target aspect ratio as a number or W:H (e.g. 4:3). Values <= 0 disable resizing.",
    )
    parser.add_argument(
        "--mode",
        type=_resize_mode,
        action="append",
        dest="modes",
        help="Resize mode to evaluate (repeatable). Defaults to every mode.",
    )
    parser.add_argument(
        "--crop-ratio",
        type=float,
        default=None,
        help="Share of height ADDITIONAL_ZOOM may crop, within [0, 1). Invalid values are ignored.",
    )
    parser.add_argument(
        "--no-keep-exact",
        action="store_false",
        dest="keep_exact",
        help="Let ADDITIONAL_ZOOM accept a smaller crop when natural growth is below the budget.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.0,
        help="Leave the box untouched when the ratios differ by at most this fraction (0 disables).",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the interactive demo window instead of printing a table.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging for debugging.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, mode: ResizeMode = ResizeMode.FIT) -> AspectRatioConfig:
    config = AspectRatioConfig(aspect_ratio=args.ratio, resize_mode=mode, keep_exact=args.keep_exact)
    if args.crop_ratio is not None:
        updated = config.with_crop_ratio(args.crop_ratio)
        if updated is config:
            logger.warning("Crop ratio %s is outside [0, 1); using %s", args.crop_ratio, config.crop_ratio)
        config = updated
    return config.with_deformation_tolerance(args.tolerance)


def resolve_modes(measured: Box, config: AspectRatioConfig, modes: Iterable[ResizeMode]) -> list[tuple[ResizeMode, ResizeResult]]:
    return [(mode, resolve(measured, config.with_resize_mode(mode))) for mode in modes]


def render_table(measured: Box, config: AspectRatioConfig, rows: List[tuple[ResizeMode, ResizeResult]]) -> Table:
    title = f"{measured.width} × {measured.height} → target {config.aspect_ratio:.4f}"
    table = Table(title=title)
    table.add_column("Mode", style="cyan", no_wrap=True)
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Natural", justify="right")
    table.add_column("Mismatch", justify="center")
    for mode, result in rows:
        natural = result.natural_aspect_ratio
        table.add_row(
            mode.name,
            str(result.box.width),
            str(result.box.height),
            f"{result.box.aspect_ratio:.4f}",
            f"{natural:.4f}" if natural is not None else Text("-", style="dim"),
            Text("yes", style="yellow") if result.mismatch else Text("no", style="dim"),
        )
    return table


def main(argv: list[str] | None = None, *, console: Optional[Console] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    modes = args.modes or list(ResizeMode)
    config = build_config(args, modes[0])

    if args.gui:
        from .app import run_app  # Qt is only needed for the window

        return run_app(config=config)

    measured = Box(args.width, args.height)
    rows = resolve_modes(measured, config, modes)
    logger.debug("Resolved %d mode(s) for %s", len(rows), measured)
    (console or Console()).print(render_table(measured, config, rows))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
