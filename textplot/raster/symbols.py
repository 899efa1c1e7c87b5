from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


@dataclass(frozen=True)
class SymbolSet:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    axis: str

    def __post_init__(self) -> None:
        for f in fields(self):
            glyph = getattr(self, f.name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"symbol {f.name!r} must be a single character, got {glyph!r}")


UNICODE_SYMBOLS = SymbolSet(
    horizontal="─",
    vertical="│",
    top_left="╭",
    top_right="╮",
    bottom_left="╰",
    bottom_right="╯",
    axis="┤",
)

ASCII_SYMBOLS = SymbolSet(
    horizontal="-",
    vertical="|",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    axis="|",
)


class Transition(Enum):
    FLAT = "flat"
    ASCENDING = "ascending"
    DESCENDING = "descending"


# Glyph roles for (row of the leaving sample, row of the arriving sample).
# Ascending and descending must stay horizontal mirror images of each other:
#   ascending   ╭    descending   ╮
#               ╯                 ╰
TRANSITIONS: dict[Transition, tuple[str, str]] = {
    Transition.FLAT: ("horizontal", "horizontal"),
    Transition.ASCENDING: ("bottom_right", "top_left"),
    Transition.DESCENDING: ("top_right", "bottom_left"),
}


def classify_transition(row_from: int, row_to: int) -> Transition:
    if row_to == row_from:
        return Transition.FLAT
    # Rows grow downward, so a smaller row index means a larger value.
    if row_to < row_from:
        return Transition.ASCENDING
    return Transition.DESCENDING


def transition_glyphs(symbols: SymbolSet, transition: Transition) -> tuple[str, str]:
    leave_role, arrive_role = TRANSITIONS[transition]
    return getattr(symbols, leave_role), getattr(symbols, arrive_role)
