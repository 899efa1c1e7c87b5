from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
import os

from textplot.errors import InvalidRangeError, ZeroDimensionError
from textplot.raster.symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, SymbolSet


DEFAULT_HEIGHT = 10
DEFAULT_WIDTH = 80
DEFAULT_OFFSET = 3
DEFAULT_LABEL_TICKS = 5
DEFAULT_LABEL_FORMAT = "{:.2f}"

SYMBOL_SETS: dict[str, SymbolSet] = {
    "unicode": UNICODE_SYMBOLS,
    "ascii": ASCII_SYMBOLS,
}


@dataclass(frozen=True)
class ChartConfig:
    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    offset: int = DEFAULT_OFFSET
    min: float | None = None
    max: float | None = None
    show_labels: bool = True
    label_ticks: int = DEFAULT_LABEL_TICKS
    label_format: str = DEFAULT_LABEL_FORMAT
    symbols: SymbolSet = field(default=UNICODE_SYMBOLS)

    def __post_init__(self) -> None:
        for name in ("height", "width", "offset", "label_ticks"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0")
        if not isinstance(self.show_labels, bool):
            raise ValueError("show_labels must be a bool")
        if not isinstance(self.label_format, str):
            raise ValueError("label_format must be a str.format template")
        if not isinstance(self.symbols, SymbolSet):
            raise ValueError("symbols must be a SymbolSet")

    @classmethod
    def from_env(cls, *, prefix: str = "TEXTPLOT_") -> "ChartConfig":
        symbols_name = os.getenv(f"{prefix}SYMBOLS", "unicode").strip().lower()
        return cls(
            height=env_int(f"{prefix}HEIGHT", DEFAULT_HEIGHT),
            width=env_int(f"{prefix}WIDTH", DEFAULT_WIDTH),
            offset=env_int(f"{prefix}OFFSET", DEFAULT_OFFSET),
            show_labels=os.getenv(f"{prefix}SHOW_LABELS", "1").strip() != "0",
            label_ticks=env_int(f"{prefix}LABEL_TICKS", DEFAULT_LABEL_TICKS),
            label_format=os.getenv(f"{prefix}LABEL_FORMAT", DEFAULT_LABEL_FORMAT) or DEFAULT_LABEL_FORMAT,
            symbols=SYMBOL_SETS.get(symbols_name, UNICODE_SYMBOLS),
        )

    def with_height(self, height: int) -> "ChartConfig":
        return replace(self, height=height)

    def with_width(self, width: int) -> "ChartConfig":
        return replace(self, width=width)

    def with_offset(self, offset: int) -> "ChartConfig":
        return replace(self, offset=offset)

    def with_min(self, vmin: float) -> "ChartConfig":
        return replace(self, min=float(vmin))

    def with_max(self, vmax: float) -> "ChartConfig":
        return replace(self, max=float(vmax))

    def with_range(self, vmin: float, vmax: float) -> "ChartConfig":
        return replace(self, min=float(vmin), max=float(vmax))

    def with_labels(self, show: bool) -> "ChartConfig":
        return replace(self, show_labels=show)

    def with_label_ticks(self, ticks: int) -> "ChartConfig":
        return replace(self, label_ticks=ticks)

    def with_label_format(self, label_format: str) -> "ChartConfig":
        return replace(self, label_format=label_format)

    def with_symbols(self, symbols: SymbolSet) -> "ChartConfig":
        return replace(self, symbols=symbols)

    def with_ascii_symbols(self) -> "ChartConfig":
        return replace(self, symbols=ASCII_SYMBOLS)


@dataclass(frozen=True)
class ValidatedConfig:
    height: int
    width: int
    offset: int
    min: float | None
    max: float | None
    show_labels: bool
    label_ticks: int
    label_format: str
    symbols: SymbolSet


def validate_config(config: ChartConfig) -> ValidatedConfig:
    """Check a config before anything is allocated.

    Raises ``ZeroDimensionError`` for a zero height or width and
    ``InvalidRangeError`` for non-finite or non-increasing explicit bounds.
    A ``label_ticks`` of 0 is read as 1.
    """
    if config.height == 0 or config.width == 0:
        raise ZeroDimensionError(f"chart dimensions must be > 0, got height={config.height} width={config.width}")

    vmin = _coerce_bound(config.min, "min")
    vmax = _coerce_bound(config.max, "max")
    if vmin is not None and vmax is not None and vmin >= vmax:
        raise InvalidRangeError(f"min must be < max, got min={vmin} max={vmax}")

    _check_label_format(config.label_format)

    return ValidatedConfig(
        height=config.height,
        width=config.width,
        offset=config.offset,
        min=vmin,
        max=vmax,
        show_labels=config.show_labels,
        label_ticks=max(1, config.label_ticks),
        label_format=config.label_format,
        symbols=config.symbols,
    )


def _coerce_bound(value: float | None, name: str) -> float | None:
    if value is None:
        return None
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRangeError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(out):
        raise InvalidRangeError(f"{name} must be finite, got {out}")
    return out


def _check_label_format(label_format: str) -> None:
    try:
        label_format.format(0.0)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"label_format cannot format a float: {label_format!r}") from exc


def env_int(env_var: str, default: int | None) -> int | None:
    """Non-negative int from the environment, or ``default`` when unset or unparsable."""
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < 0:
        return default
    return value
