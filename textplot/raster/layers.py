from __future__ import annotations

from typing import Sequence

from textplot.raster.canvas import GlyphCanvas
from textplot.raster.draw_lines import draw_series
from textplot.raster.symbols import SymbolSet
from textplot.scales import RowMapping
from textplot.series import SeriesData


def composite_series(
    dst: GlyphCanvas,
    series: Sequence[SeriesData],
    mapping: RowMapping,
    symbols: SymbolSet,
    *,
    column0: int = 0,
    width: int | None = None,
) -> None:
    """Rasterize each series on its own layer and merge them onto ``dst``.

    Layers are merged in the order given. Where two series draw the same cell
    the later one wins, so callers pick which line dominates overlaps by
    ordering the list.
    """
    for data in series:
        layer = GlyphCanvas(dst.height, dst.width)
        draw_series(layer, data, mapping, symbols, column0=column0, width=width)
        dst.overlay(layer)
