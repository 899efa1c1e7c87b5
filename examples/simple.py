from __future__ import annotations

import numpy as np

from textplot import render, render_ascii, render_range, render_sized, render_unlabeled


def main() -> None:
    wave = [1.0, 2.0, 3.0, 4.0, 5.0, 4.0, 3.0, 2.0, 1.0]

    print("Basic plot:")
    print(render(wave), end="\n\n")

    print("Custom size (height=15, width=60):")
    print(render_sized(wave, 15, 60), end="\n\n")

    print("Without Y-axis labels:")
    print(render_unlabeled(wave), end="\n\n")

    print("ASCII-only glyphs:")
    print(render_ascii(wave), end="\n\n")

    print("Fixed range 0..10:")
    print(render_range([3.0, 4.0, 5.0, 6.0, 7.0], 0.0, 10.0), end="\n\n")

    print("Flat line:")
    print(render([5.0] * 8), end="\n\n")

    print("Single spike:")
    print(render([1.0, 1.0, 1.0, 10.0, 1.0, 1.0, 1.0]), end="\n\n")

    print("Step function:")
    print(render(np.repeat([1.0, 5.0, 2.0, 8.0], 4)))


if __name__ == "__main__":
    main()
