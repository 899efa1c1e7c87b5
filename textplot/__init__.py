from textplot.api import (
    render,
    render_ascii,
    render_overlay,
    render_overlay_with_config,
    render_range,
    render_sized,
    render_unlabeled,
    render_with_config,
)
from textplot.config import ChartConfig
from textplot.errors import (
    AllNonFiniteError,
    ChartError,
    ChartErrorKind,
    EmptyDataError,
    InvalidRangeError,
    SeriesInputError,
    ZeroDimensionError,
)
from textplot.generators import generate_cosine, generate_random_walk, generate_sine
from textplot.raster.symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, SymbolSet

__all__ = [
    "ASCII_SYMBOLS",
    "AllNonFiniteError",
    "ChartConfig",
    "ChartError",
    "ChartErrorKind",
    "EmptyDataError",
    "InvalidRangeError",
    "SeriesInputError",
    "SymbolSet",
    "UNICODE_SYMBOLS",
    "ZeroDimensionError",
    "generate_cosine",
    "generate_random_walk",
    "generate_sine",
    "render",
    "render_ascii",
    "render_overlay",
    "render_overlay_with_config",
    "render_range",
    "render_sized",
    "render_unlabeled",
    "render_with_config",
]
