from __future__ import annotations

from textplot.raster.canvas import GlyphCanvas
from textplot.scales import RowMapping, format_tick_labels, tick_rows


def label_margin(labels: list[str], *, offset: int) -> int:
    """Columns needed left of the chart body: labels plus one axis column."""
    label_width = max((len(label) for label in labels), default=0)
    return max(offset, label_width + 1)


def axis_labels(mapping: RowMapping, *, label_ticks: int, label_format: str) -> dict[int, str]:
    rows = tick_rows(mapping.height, label_ticks)
    labels = format_tick_labels([mapping.value_at(row) for row in rows], label_format)
    return dict(zip(rows, labels))


def draw_axis_labels(dst: GlyphCanvas, labels: dict[int, str], *, margin: int, axis_glyph: str) -> None:
    """Write right-aligned tick labels and the axis column into the left margin.

    Every row gets the axis glyph at ``margin - 1`` so chart bodies stay aligned
    whether or not the row carries a label.
    """
    if margin <= 0:
        return
    for row in range(dst.height):
        label = labels.get(row)
        if label:
            dst.draw_text(row, margin - 1 - len(label), label)
        dst.set(row, margin - 1, axis_glyph)
