"""Path validation against grid passability.

Validators are pure predicates over existing data:
- find_blocked_point returns the first offending cell, or None
- validate_matrix_path returns True if the whole path can be walked

A cell is walkable when it is inside the grid and its code is not BLOCKED.
"""

import logging
from typing import Iterable

from gridpath_planner.model.grid import Grid
from gridpath_planner.model.grid_point import GridPoint

logger = logging.getLogger(__name__)


def find_blocked_point(grid: Grid, path: Iterable[GridPoint]) -> GridPoint | None:
    """Find the first point of the path that cannot be entered.

    Returns:
        None if every point is in bounds and passable, else the first point
        that is out of bounds or on a blocked cell.
    """
    for point in path:
        if not grid.is_passable(point):
            return point
    return None


def validate_matrix_path(grid: Grid, path: Iterable[GridPoint]) -> bool:
    """Check that every point of the path is in bounds and passable.

    An empty path is trivially valid.
    """
    blocked = find_blocked_point(grid=grid, path=path)
    if blocked is not None:
        logger.debug(f"Path rejected at {blocked}")
        return False
    return True
