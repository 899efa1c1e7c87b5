from __future__ import annotations

from textplot.raster.canvas import GlyphCanvas
from textplot.raster.symbols import SymbolSet, Transition, classify_transition, transition_glyphs
from textplot.scales import RowMapping
from textplot.series import SeriesData


def draw_series(
    dst: GlyphCanvas,
    series: SeriesData,
    mapping: RowMapping,
    symbols: SymbolSet,
    *,
    column0: int = 0,
    width: int | None = None,
) -> None:
    """Paint one series as a connected line of glyphs.

    Sample ``i`` owns column ``column0 + i``. The segment from sample ``i`` to
    ``i + 1`` is drawn entirely in the arriving column; a non-finite sample on
    either end leaves that column empty.
    """
    n = series.size
    if width is None:
        width = dst.width - column0
    n = min(n, width)
    if n <= 0:
        return

    rows = mapping.rows_for(series.values[:n])
    finite = series.mask[:n]

    for i in range(n):
        if not finite[i]:
            continue
        # First sample of a finite run: nothing arrives here from the left.
        if i == 0 or not finite[i - 1]:
            dst.set(int(rows[i]), column0 + i, symbols.horizontal)

    for i in range(n - 1):
        if not (finite[i] and finite[i + 1]):
            continue
        _draw_segment(dst, int(rows[i]), int(rows[i + 1]), column0 + i + 1, symbols)


def _draw_segment(dst: GlyphCanvas, row_from: int, row_to: int, column: int, symbols: SymbolSet) -> None:
    transition = classify_transition(row_from, row_to)
    leave, arrive = transition_glyphs(symbols, transition)
    if transition is Transition.FLAT:
        dst.set(row_from, column, leave)
        return
    top = min(row_from, row_to)
    bottom = max(row_from, row_to)
    if bottom - top > 1:
        dst.draw_vline(column, top + 1, bottom - 1, symbols.vertical)
    dst.set(row_from, column, leave)
    dst.set(row_to, column, arrive)
