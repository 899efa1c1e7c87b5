from __future__ import annotations

import numpy as np

from textplot import ChartConfig, render_overlay_with_config, render_sized, render_with_config


def _daily_close() -> np.ndarray:
    return np.asarray(
        [
            100.0, 102.5, 101.0, 103.0, 105.5, 104.0, 106.5, 108.0,
            107.0, 109.5, 112.0, 110.5, 113.0, 115.5, 114.0, 116.5,
            118.0, 117.0, 119.5, 122.0,
        ],
        dtype=np.float64,
    )


def _crash_and_recovery() -> np.ndarray:
    stable = np.full(10, 150.0)
    crash = 150.0 - np.arange(15) * 5.0
    recovery = 75.0 + np.arange(20) * 2.0
    return np.concatenate([stable, crash, recovery])


def _portfolio(days: int = 30) -> list[np.ndarray]:
    x = np.arange(days)
    conservative = 100.0 + x * 0.3
    moderate = 100.0 + x * 0.8 + (x * 3) % 5 - 2.0
    aggressive = 100.0 + x * 1.5 + (x * 7) % 11 - 5.0
    return [conservative, moderate, aggressive]


def main() -> None:
    prices = _daily_close()
    print("Stock price, daily close:")
    print(render_with_config(prices, ChartConfig(height=15, width=60, label_format="{:.1f}")))
    change = prices[-1] - prices[0]
    print(
        f"Start: ${prices[0]:.2f} | End: ${prices[-1]:.2f} | "
        f"Change: ${change:.2f} ({(prices[-1] / prices[0] - 1.0) * 100.0:.2f}%)",
        end="\n\n",
    )

    print("Market crash and recovery:")
    print(render_sized(_crash_and_recovery(), 18, 80), end="\n\n")

    print("Portfolio, three stocks (aggressive drawn last):")
    print(render_overlay_with_config(_portfolio(), ChartConfig(height=12, width=30)))


if __name__ == "__main__":
    main()
