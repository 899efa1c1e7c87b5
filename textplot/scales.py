from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import numpy as np

from textplot.errors import AllNonFiniteError, InvalidRangeError
from textplot.series import SeriesData


FLAT_RANGE_RELATIVE_EPSILON = 1e-6
FLAT_RANGE_ABSOLUTE_EPSILON = 1e-9


@dataclass(frozen=True)
class ValueRange:
    vmin: float
    vmax: float

    @property
    def span(self) -> float:
        return self.vmax - self.vmin


def resolve_range(
    series: Sequence[SeriesData],
    *,
    vmin: float | None = None,
    vmax: float | None = None,
) -> ValueRange:
    """Resolve the value range shared by every series drawn on one chart.

    Explicit bounds override the data on their own side only. A flat result is
    widened around its value so row quantization always has a non-zero span.
    """
    if vmin is None or vmax is None:
        finite = _collect_finite(series)
        if finite.size == 0:
            raise AllNonFiniteError("no finite samples to derive the value range from")
        lo = float(np.min(finite)) if vmin is None else float(vmin)
        hi = float(np.max(finite)) if vmax is None else float(vmax)
    else:
        lo = float(vmin)
        hi = float(vmax)

    if lo > hi:
        raise InvalidRangeError(f"resolved min {lo} exceeds resolved max {hi}")
    if lo == hi:
        lo, hi = widen_flat_range(lo)
    return ValueRange(vmin=lo, vmax=hi)


def widen_flat_range(value: float) -> tuple[float, float]:
    delta = abs(value) * FLAT_RANGE_RELATIVE_EPSILON
    if delta == 0.0:
        delta = FLAT_RANGE_ABSOLUTE_EPSILON
    lo = value - delta
    hi = value + delta
    if not (math.isfinite(lo) and math.isfinite(hi) and lo < hi):
        # Near the float64 limits only the neighbouring representable values fit.
        lo = float(np.nextafter(value, -np.inf))
        hi = float(np.nextafter(value, np.inf))
        if not math.isfinite(lo):
            lo = value
        if not math.isfinite(hi):
            hi = value
    return lo, hi


def _collect_finite(series: Sequence[SeriesData]) -> np.ndarray:
    chunks = [s.finite_values() for s in series if s.size > 0]
    if not chunks:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(chunks)


@dataclass(frozen=True)
class RowMapping:
    value_range: ValueRange
    height: int

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError("height must be > 0")

    def rows_for(self, values: np.ndarray) -> np.ndarray:
        """Map values to row indices, top row = max. Non-finite values map to -1."""
        rows = np.full(values.shape, -1, dtype=np.int64)
        finite = np.isfinite(values)
        if not np.any(finite):
            return rows
        if self.height == 1:
            rows[finite] = 0
            return rows
        vmin = self.value_range.vmin
        vmax = self.value_range.vmax
        with np.errstate(over="ignore"):
            if math.isfinite(self.value_range.span):
                frac = (vmax - values[finite]) / self.value_range.span
            else:
                # Bounds near opposite float64 limits: subtract halves so the span stays finite.
                frac = (vmax / 2 - values[finite] / 2) / (vmax / 2 - vmin / 2)
        scaled = np.rint(frac * (self.height - 1))
        np.clip(scaled, 0, self.height - 1, out=scaled)
        rows[finite] = np.nan_to_num(scaled, nan=0.0).astype(np.int64)
        return rows

    def row_for(self, value: float) -> int:
        return int(self.rows_for(np.asarray([value], dtype=np.float64))[0])

    def value_at(self, row: int) -> float:
        vmin = self.value_range.vmin
        vmax = self.value_range.vmax
        if self.height == 1:
            return vmax
        t = row / (self.height - 1)
        if math.isfinite(self.value_range.span):
            return vmax - t * self.value_range.span
        return 2.0 * (vmax / 2 - t * (vmax / 2 - vmin / 2))


def tick_rows(height: int, label_ticks: int) -> list[int]:
    """Rows that carry a label, endpoint-inclusive; a single tick sits on the top row."""
    if height <= 0:
        return []
    if label_ticks <= 1 or height == 1:
        return [0]
    rows = np.rint(np.linspace(0.0, float(height - 1), label_ticks)).astype(np.int64)
    return sorted(set(rows.tolist()))


def format_tick(value: float, label_format: str) -> str:
    out = label_format.format(value)
    zero = label_format.format(0.0)
    # Values that round to zero should not print as "-0.00".
    if out != zero and out.replace("-", "", 1).strip() == zero.strip():
        return zero
    return out


def format_tick_labels(values: Sequence[float], label_format: str) -> list[str]:
    labels = [format_tick(float(v), label_format) for v in values]
    if not labels:
        return []
    label_width = max(len(label) for label in labels)
    return [label.rjust(label_width) for label in labels]
