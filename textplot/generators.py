"""Synthetic series for demos and tests.

All generators return float64 numpy arrays that can be passed straight to the
``render*`` functions.
"""

from __future__ import annotations

import numpy as np


def generate_sine(points: int, frequency: float = 1.0, phase: float = 0.0) -> np.ndarray:
    """Sample ``sin(frequency * x + phase)`` over one period of ``x`` in [0, 2*pi).

    Args:
        points: Number of samples; zero or negative gives an empty array.
        frequency: Cycles per ``points`` samples.
        phase: Phase offset in radians.
    """
    return np.sin(frequency * _phase_axis(points) + phase)


def generate_cosine(points: int, frequency: float = 1.0, phase: float = 0.0) -> np.ndarray:
    """Cosine counterpart of :func:`generate_sine`; starts at the peak."""
    return np.cos(frequency * _phase_axis(points) + phase)


def generate_random_walk(
    points: int,
    start: float = 0.0,
    volatility: float = 1.0,
    *,
    seed: int | None = None,
) -> np.ndarray:
    """Random walk starting at ``start``.

    Each step adds ``(u - 0.5) * volatility`` with ``u`` uniform in [0, 1), so a
    step never moves more than ``volatility / 2``. Pass ``seed`` for a
    reproducible walk.
    """
    if volatility < 0:
        raise ValueError("volatility must be >= 0")
    if points <= 0:
        return np.empty(0, dtype=np.float64)
    rng = np.random.default_rng(seed)
    steps = (rng.random(points - 1) - 0.5) * volatility
    walk = np.empty(points, dtype=np.float64)
    walk[0] = float(start)
    walk[1:] = float(start) + np.cumsum(steps)
    return walk


def _phase_axis(points: int) -> np.ndarray:
    if points <= 0:
        return np.empty(0, dtype=np.float64)
    return np.linspace(0.0, 2.0 * np.pi, points, endpoint=False, dtype=np.float64)
