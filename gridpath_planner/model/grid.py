"""Grid - Square array of passability codes with designated start and end cells.

The grid is the read-only input of path generation:
- Cell codes are stored in a NumPy integer array indexed [y, x]
- Code 0 is blocked, code 1 is open, other positive codes are passable
- Start and end cells are validated to be in bounds and passable

The backing array is marked read-only after construction, so the generator
can never modify the caller's level data.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from gridpath_planner.constants import CellCode
from gridpath_planner.model.grid_point import GridPoint


@dataclass(eq=False)
class Grid:
    """A square grid of integer passability codes.

    Attributes:
        cells: Square 2-D array of codes, rows are y and columns are x
        start: Cell where every generated path begins
        end: Cell where every generated path finishes

    Example:
        grid = Grid.from_rows(
            rows=[[1, 1, 0], [1, 1, 1], [0, 1, 1]],
            start=GridPoint(0, 0),
            end=GridPoint(2, 2),
        )
        grid.get(x=2, y=0)  # 0
    """

    cells: np.ndarray
    start: GridPoint
    end: GridPoint

    def __post_init__(self) -> None:
        """Copy cells into a read-only integer array and validate the layout."""
        cells = np.array(self.cells, dtype=np.int64)
        if cells.ndim != 2:
            raise ValueError(f"Grid cells must be 2-dimensional, got {cells.ndim} dimensions")
        if cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Grid must be square, got shape {cells.shape}")
        if cells.shape[0] < 1:
            raise ValueError("Grid must have at least one cell")
        if (cells < 0).any():
            raise ValueError("Grid cell codes must be non-negative")
        cells.setflags(write=False)
        self.cells = cells

        for name, point in (("start", self.start), ("end", self.end)):
            if not self.in_bounds(point):
                raise ValueError(f"Grid {name} {point} is outside a {self.dimension}x{self.dimension} grid")
            if not self.is_passable(point):
                raise ValueError(f"Grid {name} {point} is on a blocked cell")

    @property
    def dimension(self) -> int:
        """Side length of the square grid."""
        return int(self.cells.shape[0])

    def get(self, x: int, y: int) -> int:
        """Return the code at column x, row y.

        Raises:
            IndexError: If (x, y) lies outside the grid.
        """
        if not (0 <= x < self.dimension and 0 <= y < self.dimension):
            raise IndexError(f"Cell ({x}, {y}) out of bounds for dimension {self.dimension}")
        return int(self.cells[y, x])

    def code_at(self, point: GridPoint) -> int:
        return self.get(x=point.x, y=point.y)

    def in_bounds(self, point: GridPoint) -> bool:
        return 0 <= point.x < self.dimension and 0 <= point.y < self.dimension

    def is_passable(self, point: GridPoint) -> bool:
        """True if the point is inside the grid and its code is not BLOCKED."""
        return self.in_bounds(point) and self.code_at(point) != CellCode.BLOCKED

    def is_open(self, point: GridPoint) -> bool:
        """True if the point is inside the grid and its code is exactly OPEN."""
        return self.in_bounds(point) and self.code_at(point) == CellCode.OPEN

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], start: GridPoint, end: GridPoint) -> "Grid":
        """Build a grid from nested lists where rows[y][x] is the cell code."""
        return cls(cells=np.array(rows, dtype=np.int64), start=start, end=end)

    @classmethod
    def open(
        cls,
        dimension: int,
        start: Optional[GridPoint] = None,
        end: Optional[GridPoint] = None,
    ) -> "Grid":
        """Build a fully open grid, by default from top-left to bottom-right corner."""
        if dimension < 1:
            raise ValueError(f"Grid dimension must be positive, got {dimension}")
        return cls(
            cells=np.full((dimension, dimension), CellCode.OPEN, dtype=np.int64),
            start=start or GridPoint(x=0, y=0),
            end=end or GridPoint(x=dimension - 1, y=dimension - 1),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "cells": self.cells.tolist(),
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Grid":
        """Create Grid from dictionary."""
        return cls.from_rows(
            rows=data["cells"],
            start=GridPoint.from_dict(data["start"]),
            end=GridPoint.from_dict(data["end"]),
        )

    def __repr__(self) -> str:
        return f"Grid({self.dimension}x{self.dimension}, start={self.start}, end={self.end})"
