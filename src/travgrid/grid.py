"""Traversability grids: per-cell class ids plus a class -> drivability table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

FULL_DRIVABILITY = 1.0
NO_DRIVABILITY = 0.0


@dataclass(frozen=True)
class TraversabilityClass:
    """Ease of traversal shared by every cell of one class.

    Attributes:
        drivability: 1.0 means full speed, 0.0 means impassable.
    """

    drivability: float = FULL_DRIVABILITY

    def __post_init__(self) -> None:
        if not NO_DRIVABILITY <= self.drivability <= FULL_DRIVABILITY:
            raise ValueError(
                f"drivability must lie in [0, 1], got {self.drivability}"
            )


@runtime_checkable
class GridLike(Protocol):
    """What the cost model needs from a grid provider."""

    @property
    def cell_size_x(self) -> int: ...

    @property
    def cell_size_y(self) -> int: ...

    @property
    def scale_x(self) -> float: ...

    @property
    def scale_y(self) -> float: ...

    def class_at(self, x: float, y: float) -> int: ...

    def traversability_class(self, class_id: int) -> TraversabilityClass: ...


class TraversabilityGrid:
    """Numpy-backed traversability grid.

    ``class_data`` has shape (height, width) and is indexed ``[y, x]``.
    ``scale_x``/``scale_y`` are metres per cell edge.
    """

    def __init__(
        self,
        class_data: np.ndarray,
        classes: Sequence[TraversabilityClass],
        scale_x: float = 1.0,
        scale_y: Optional[float] = None,
    ) -> None:
        class_data = np.asarray(class_data)
        if class_data.ndim != 2:
            raise ValueError(f"class_data must be 2D, got shape {class_data.shape}")
        if not np.issubdtype(class_data.dtype, np.integer):
            raise ValueError("class_data must hold integer class ids")
        if scale_y is None:
            scale_y = scale_x
        if scale_x <= 0 or scale_y <= 0:
            raise ValueError("Grid scale must be positive")

        self._classes = tuple(classes)
        if class_data.size:
            lo, hi = int(class_data.min()), int(class_data.max())
            if lo < 0 or hi >= len(self._classes):
                raise ValueError(
                    f"class_data references class ids in [{lo}, {hi}] but only "
                    f"{len(self._classes)} traversability classes are defined"
                )

        self._class_data = class_data.copy()
        self._class_data.setflags(write=False)
        self._scale_x = float(scale_x)
        self._scale_y = float(scale_y)

    @classmethod
    def uniform(
        cls,
        width: int,
        height: int,
        drivability: float,
        scale: float = 1.0,
    ) -> "TraversabilityGrid":
        """Grid whose every cell has the same drivability."""
        return cls(
            np.zeros((height, width), dtype=int),
            [TraversabilityClass(drivability)],
            scale_x=scale,
        )

    @classmethod
    def from_drivability(
        cls,
        drivability: np.ndarray,
        num_classes: int = 11,
        scale: float = 1.0,
    ) -> "TraversabilityGrid":
        """Quantise a drivability array into evenly spaced classes.

        Class 0 is impassable and class ``num_classes - 1`` is full speed.
        """
        if num_classes < 2:
            raise ValueError("At least two classes are needed to quantise drivability")
        drivability = np.asarray(drivability, dtype=float)
        if drivability.size and (drivability.min() < 0.0 or drivability.max() > 1.0):
            raise ValueError("drivability values must lie in [0, 1]")
        levels = np.linspace(NO_DRIVABILITY, FULL_DRIVABILITY, num_classes)
        class_data = np.rint(drivability * (num_classes - 1)).astype(int)
        return cls(
            class_data,
            [TraversabilityClass(float(level)) for level in levels],
            scale_x=scale,
        )

    @property
    def cell_size_x(self) -> int:
        return int(self._class_data.shape[1])

    @property
    def cell_size_y(self) -> int:
        return int(self._class_data.shape[0])

    @property
    def scale_x(self) -> float:
        return self._scale_x

    @property
    def scale_y(self) -> float:
        return self._scale_y

    @property
    def class_data(self) -> np.ndarray:
        return self._class_data

    @property
    def classes(self) -> tuple[TraversabilityClass, ...]:
        return self._classes

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x < self.cell_size_x and 0 <= y < self.cell_size_y

    def class_at(self, x: float, y: float) -> int:
        """Class id of the cell containing (x, y)."""
        if not self.contains(x, y):
            raise IndexError(
                f"({x}, {y}) outside of {self.cell_size_x}x{self.cell_size_y} grid"
            )
        return int(self._class_data[int(y), int(x)])

    def traversability_class(self, class_id: int) -> TraversabilityClass:
        return self._classes[class_id]

    def drivability_at(self, x: float, y: float) -> float:
        return self.traversability_class(self.class_at(x, y)).drivability
