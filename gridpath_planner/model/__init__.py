"""Data model classes for grid path planning.

- GridPoint: Coordinate atom (x, y)
- Grid: Square array of passability codes with start and end cells
- GridPath: Ordered sequence of GridPoints
- AttemptOutcome: Result of one generation attempt (succeeded / failed)
"""

from gridpath_planner.model.attempt_outcome import (
    AttemptFailed,
    AttemptOutcome,
    AttemptSucceeded,
    FailureReason,
)
from gridpath_planner.model.grid import Grid
from gridpath_planner.model.grid_path import GridPath
from gridpath_planner.model.grid_point import GridPoint

__all__ = [
    "GridPoint",
    "Grid",
    "GridPath",
    "AttemptOutcome",
    "AttemptSucceeded",
    "AttemptFailed",
    "FailureReason",
]
