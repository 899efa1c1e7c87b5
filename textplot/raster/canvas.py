from __future__ import annotations

import numpy as np


EMPTY_CELL = ""


class GlyphCanvas:
    """Row-major grid of single-character cells; row 0 is the top of the chart."""

    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("canvas width/height must be > 0")
        self.cells = np.full((height, width), EMPTY_CELL, dtype="<U1")

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def set(self, row: int, column: int, glyph: str) -> None:
        if not self.in_bounds(row, column):
            return
        self.cells[row, column] = glyph

    def get(self, row: int, column: int) -> str | None:
        if not self.in_bounds(row, column):
            return None
        glyph = str(self.cells[row, column])
        return glyph or None

    def draw_text(self, row: int, column: int, text: str) -> None:
        for i, ch in enumerate(text):
            self.set(row, column + i, ch)

    def draw_vline(self, column: int, row0: int, row1: int, glyph: str) -> None:
        if column < 0 or column >= self.width:
            return
        ra = max(0, min(row0, row1))
        rb = min(self.height - 1, max(row0, row1))
        if ra > rb:
            return
        self.cells[ra : rb + 1, column] = glyph

    def overlay(self, other: "GlyphCanvas") -> None:
        """Copy every set cell of ``other`` over this canvas (last writer wins)."""
        if other.cells.shape != self.cells.shape:
            raise ValueError(f"canvas shape mismatch: {other.cells.shape} != {self.cells.shape}")
        placed = other.cells != EMPTY_CELL
        self.cells[placed] = other.cells[placed]

    def rows(self) -> list[str]:
        filled = np.where(self.cells == EMPTY_CELL, " ", self.cells)
        return ["".join(row.tolist()).rstrip() for row in filled]

    def to_text(self) -> str:
        return "\n".join(self.rows())
