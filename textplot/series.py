from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SeriesData:
    values: np.ndarray
    mask: np.ndarray
    source_name: str | None = None

    @property
    def size(self) -> int:
        return int(self.values.size)

    def finite_values(self) -> np.ndarray:
        return self.values[self.mask]
