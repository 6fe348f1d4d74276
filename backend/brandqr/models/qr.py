"""QR symbol inputs: error-correction level and the module matrix."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from brandqr.errors import ConfigurationError


class EccLevel(str, Enum):
    """Error-correction level, in increasing redundancy order."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    QUARTILE = "QUARTILE"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, value: str | EccLevel | None) -> EccLevel:
        """Case-insensitive lookup. Unknown or missing values fall back to MEDIUM."""
        if isinstance(value, EccLevel):
            return value
        if value:
            try:
                return cls(str(value).strip().upper())
            except ValueError:
                pass
        return cls.MEDIUM


@dataclass(frozen=True)
class ModuleMatrix:
    """Square grid of QR modules. True = dark.

    Stored row-major as ``modules[y, x]``; read through :meth:`get_module`
    with ``(x, y)`` coordinates, origin top-left. The backing array is a
    read-only copy, so a matrix never changes after construction.
    """

    modules: NDArray[np.bool_]

    def __post_init__(self) -> None:
        grid = np.array(self.modules, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ConfigurationError(f"Module matrix must be square, got shape {grid.shape}")
        if grid.shape[0] == 0:
            raise ConfigurationError("Module matrix must not be empty")
        grid.setflags(write=False)
        object.__setattr__(self, "modules", grid)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> ModuleMatrix:
        return cls(np.asarray(rows, dtype=bool))

    @property
    def size(self) -> int:
        return int(self.modules.shape[0])

    def get_module(self, x: int, y: int) -> bool:
        if 0 <= x < self.size and 0 <= y < self.size:
            return bool(self.modules[y, x])
        return False

    def dark_modules(self) -> list[tuple[int, int]]:
        """(x, y) of every dark module, row by row."""
        return [(int(x), int(y)) for y, x in np.argwhere(self.modules)]
