from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from textplot.errors import SeriesInputError
from textplot.series import SeriesData


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_series(values: Any, *, source_name: str | None = None) -> SeriesData:
    """Coerce one series input into a float64 array plus its finite mask.

    Empty input is allowed here; deciding whether an empty series is an
    error belongs to the renderer.
    """
    arr = _coerce_1d_numeric(values, label=source_name or "series")
    mask = np.isfinite(arr)
    return SeriesData(values=arr, mask=mask, source_name=source_name)


def normalize_series_list(series_list: Any) -> list[SeriesData]:
    if isinstance(series_list, np.ndarray):
        if series_list.ndim != 2:
            raise SeriesInputError("an array of series must be 2-D (one row per series)")
        series_list = list(series_list)
    if isinstance(series_list, (str, bytes, bytearray)) or not isinstance(series_list, Sequence):
        raise SeriesInputError(f"series list must be a sequence of series, got {type(series_list)!r}")
    return [normalize_series(s, source_name=f"series[{i}]") for i, s in enumerate(series_list)]


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise SeriesInputError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy().copy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise SeriesInputError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.empty(0, dtype=np.float64)
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise SeriesInputError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise SeriesInputError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise SeriesInputError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise SeriesInputError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
