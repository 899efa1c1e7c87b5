from __future__ import annotations

import math

from textplot import ChartConfig, ChartError, render, render_with_config
from textplot.config import validate_config


def main() -> None:
    print("Fully customized chart:")
    config = (
        ChartConfig()
        .with_height(20)
        .with_width(70)
        .with_range(0.0, 35.0)
        .with_label_ticks(7)
        .with_label_format("{:.1f}")
    )
    print(render_with_config([10.0, 20.0, 15.0, 25.0, 30.0, 22.0, 18.0, 28.0], config), end="\n\n")

    print("Minimal labels (3 ticks):")
    print(render_with_config([10.0, 20.0, 30.0, 40.0, 50.0], ChartConfig(height=15, width=5, label_ticks=3)), end="\n\n")

    print("Wide chart:")
    wide = [math.sin(x * 0.1) * 5.0 + 10.0 for x in range(100)]
    print(render(wide, height=15, width=100), end="\n\n")

    print("Empty data:")
    try:
        render_with_config([], ChartConfig())
    except ChartError as exc:
        print(f"caught {exc.kind.value}: {exc}", end="\n\n")

    print("Invalid range:")
    try:
        validate_config(ChartConfig().with_min(10.0).with_max(5.0))
    except ChartError as exc:
        print(f"caught {exc.kind.value}: {exc}", end="\n\n")

    print("Gaps from NaN samples:")
    print(render([1.0, 2.0, math.nan, 4.0, 5.0, math.nan, 7.0]), end="\n\n")

    print("Very small value range:")
    print(render_with_config([100.001, 100.002, 100.003, 100.002, 100.001], ChartConfig(height=12, width=50)))


if __name__ == "__main__":
    main()
