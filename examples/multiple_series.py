from __future__ import annotations

import numpy as np

from textplot import (
    ChartConfig,
    generate_cosine,
    generate_random_walk,
    generate_sine,
    render_overlay,
    render_overlay_with_config,
    render_sized,
)


def main() -> None:
    rising = np.arange(1.0, 9.0)
    falling = rising[::-1]
    print("Two opposite trends:")
    print(render_overlay([rising, falling]), end="\n\n")

    print("Sine and cosine on one scale:")
    waves = [generate_sine(60, 2.0), generate_cosine(60, 2.0)]
    print(render_overlay_with_config(waves, ChartConfig(height=12, width=60)), end="\n\n")

    print("Phase shifted sine waves:")
    for label, phase in (("0", 0.0), ("90", np.pi / 2), ("180", np.pi)):
        print(f"phase {label} deg:")
        print(render_sized(generate_sine(60, 1.0, phase), 10, 60), end="\n\n")

    print("Three seeded random walks:")
    walks = [generate_random_walk(50, 0.0, 1.0, seed=seed) for seed in (1, 2, 3)]
    print(render_overlay_with_config(walks, ChartConfig(height=12, width=50)), end="\n\n")

    print("Exponential growth:")
    print(render_sized(1.1 ** np.arange(30), 15, 50))


if __name__ == "__main__":
    main()
