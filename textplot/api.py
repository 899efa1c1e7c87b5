from __future__ import annotations

import logging
from typing import Any, Sequence

from textplot.adapters import normalize_series, normalize_series_list
from textplot.config import DEFAULT_HEIGHT, ChartConfig, validate_config
from textplot.errors import ChartError, EmptyDataError
from textplot.raster import GlyphCanvas, axis_labels, composite_series, draw_axis_labels, label_margin
from textplot.scales import RowMapping, resolve_range
from textplot.series import SeriesData


LOGGER = logging.getLogger(__name__)


def render_with_config(series: Any, config: ChartConfig | None = None) -> str:
    """Render one series, raising ``ChartError`` when the chart cannot be drawn."""
    return _render([normalize_series(series)], config or ChartConfig())


def render_overlay_with_config(series_list: Sequence[Any], config: ChartConfig | None = None) -> str:
    """Render several series on one shared scale; later series win shared cells."""
    return _render(normalize_series_list(series_list), config or ChartConfig())


def render(series: Any, height: int | None = None, width: int | None = None) -> str:
    data = normalize_series(series)
    # Negative sizes degrade like zero ones instead of failing config construction.
    config = ChartConfig(
        height=DEFAULT_HEIGHT if height is None else max(0, height),
        width=_auto_width([data]) if width is None else max(0, width),
    )
    return _render_or_blank([data], config)


def render_sized(series: Any, height: int, width: int) -> str:
    return render(series, height=height, width=width)


def render_range(series: Any, vmin: float, vmax: float) -> str:
    data = normalize_series(series)
    config = ChartConfig(width=_auto_width([data]), min=vmin, max=vmax)
    return _render_or_blank([data], config)


def render_unlabeled(series: Any) -> str:
    data = normalize_series(series)
    config = ChartConfig(width=_auto_width([data]), show_labels=False)
    return _render_or_blank([data], config)


def render_ascii(series: Any) -> str:
    data = normalize_series(series)
    config = ChartConfig(width=_auto_width([data])).with_ascii_symbols()
    return _render_or_blank([data], config)


def render_overlay(series_list: Sequence[Any]) -> str:
    data = normalize_series_list(series_list)
    config = ChartConfig(width=_auto_width(data))
    return _render_or_blank(data, config)


def _auto_width(series: Sequence[SeriesData]) -> int:
    return max([1] + [s.size for s in series])


def _render_or_blank(series: list[SeriesData], config: ChartConfig) -> str:
    try:
        return _render(series, config)
    except ChartError as exc:
        LOGGER.warning("chart not rendered (%s): %s", exc.kind.value, exc)
        return ""


def _render(series: list[SeriesData], config: ChartConfig) -> str:
    cfg = validate_config(config)
    if not series or all(s.size == 0 for s in series):
        raise EmptyDataError("cannot plot empty data" if len(series) <= 1 else "every series in the overlay is empty")

    value_range = resolve_range(series, vmin=cfg.min, vmax=cfg.max)
    mapping = RowMapping(value_range=value_range, height=cfg.height)

    labels: dict[int, str] = {}
    margin = 0
    if cfg.show_labels:
        labels = axis_labels(mapping, label_ticks=cfg.label_ticks, label_format=cfg.label_format)
        margin = label_margin(list(labels.values()), offset=cfg.offset)

    canvas = GlyphCanvas(cfg.height, margin + cfg.width)
    composite_series(canvas, series, mapping, cfg.symbols, column0=margin, width=cfg.width)
    if cfg.show_labels:
        draw_axis_labels(canvas, labels, margin=margin, axis_glyph=cfg.symbols.axis)

    LOGGER.debug(
        "rendered %d series: rows=%d cols=%d range=[%g, %g] margin=%d",
        len(series),
        cfg.height,
        cfg.width,
        value_range.vmin,
        value_range.vmax,
        margin,
    )
    return canvas.to_text()
