from .canvas import GlyphCanvas
from .draw_lines import draw_series
from .draw_text import axis_labels, draw_axis_labels, label_margin
from .layers import composite_series
from .symbols import ASCII_SYMBOLS, TRANSITIONS, UNICODE_SYMBOLS, SymbolSet, Transition

__all__ = [
    "ASCII_SYMBOLS",
    "GlyphCanvas",
    "SymbolSet",
    "TRANSITIONS",
    "Transition",
    "UNICODE_SYMBOLS",
    "axis_labels",
    "composite_series",
    "draw_axis_labels",
    "draw_series",
    "label_margin",
]
