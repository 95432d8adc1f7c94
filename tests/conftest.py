"""Shared pytest fixtures for gridpath_planner tests.

Provides ScriptedPicker and reusable grids for all gridpath_planner tests.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Grids are written as rows, so rows[y][x] is the code of GridPoint(x, y).
    x grows to the right, y grows downwards. Forward moves are +x and +y.
"""

from typing import Optional, Sequence, TypeVar

import pytest

from gridpath_planner.model.grid import Grid
from gridpath_planner.model.grid_point import GridPoint

T = TypeVar("T")


# =============================================================================
# SCRIPTED PICKER
# =============================================================================


class ScriptedPicker:
    """Picker returning items by a fixed list of indices instead of at random.

    Each pick() consumes the next index of the script. Indices past the end
    of the offered items are clamped to the last item, and once the script
    is used up every pick falls back to default_index.

    Every offered sequence is recorded in calls, so tests can assert which
    candidates the generator considered.
    """

    def __init__(self, script: Optional[Sequence[int]] = None, default_index: int = 0) -> None:
        self.script = list(script or [])
        self.default_index = default_index
        self.calls: list[list] = []

    def pick(self, items: Sequence[T]) -> T:
        """Return the scripted element of items."""
        self.calls.append(list(items))
        index = self.script.pop(0) if self.script else self.default_index
        return items[min(index, len(items) - 1)]


# =============================================================================
# GRID FIXTURES
# =============================================================================


@pytest.fixture
def open_grid_3() -> Grid:
    """3x3 grid, every cell OPEN, from (0,0) to (2,2)."""
    return Grid.open(dimension=3)


@pytest.fixture
def open_grid_4() -> Grid:
    """4x4 grid, every cell OPEN, from (0,0) to (3,3)."""
    return Grid.open(dimension=4)


@pytest.fixture
def forward_blocked_grid() -> Grid:
    """2x2 grid where both forward moves from the start are blocked.

    S #
    # E

    Every attempt fails on its first step.
    """
    return Grid.from_rows(
        rows=[
            [1, 0],
            [0, 1],
        ],
        start=GridPoint(x=0, y=0),
        end=GridPoint(x=1, y=1),
    )


@pytest.fixture
def centre_blocked_grid() -> Grid:
    """4x4 open grid with the centre cell (2,2) blocked.

    The closing line from (1,1) to (3,3) crosses (2,2), so paths must go round.
    """
    return Grid.from_rows(
        rows=[
            [1, 1, 1, 1],
            [1, 1, 1, 1],
            [1, 1, 0, 1],
            [1, 1, 1, 1],
        ],
        start=GridPoint(x=0, y=0),
        end=GridPoint(x=3, y=3),
    )


@pytest.fixture
def dead_end_corridor_grid() -> Grid:
    """3x3 grid with a single corridor that never lines up with the goal.

    S . .
    # # .
    E # .

    Every move is forced: right, right, down, down. The only tail on the
    goal's diagonal is (2,0), whose closing line crosses the blocked (1,1).
    After the step limit the tail (2,2) is not diagonal to the goal (0,2).
    """
    return Grid.from_rows(
        rows=[
            [1, 1, 1],
            [0, 0, 1],
            [1, 0, 1],
        ],
        start=GridPoint(x=0, y=0),
        end=GridPoint(x=0, y=2),
    )


@pytest.fixture
def fallback_blocked_grid() -> Grid:
    """5x5 corridor along the top row and right column, goal isolated at (2,2).

    S . . . .
    # # # # .
    # # E # .
    # # # # .
    # # # # .

    Every move is forced. Tails (4,0) and (4,4) are diagonal to the goal but
    their closing lines cross blocked (3,1) and (3,3). The final tail (4,4)
    lies on the goal's down-right diagonal, which the strict fallback rejects.
    """
    return Grid.from_rows(
        rows=[
            [1, 1, 1, 1, 1],
            [0, 0, 0, 0, 1],
            [0, 0, 1, 0, 1],
            [0, 0, 0, 0, 1],
            [0, 0, 0, 0, 1],
        ],
        start=GridPoint(x=0, y=0),
        end=GridPoint(x=2, y=2),
    )


@pytest.fixture
def mixed_code_grid() -> Grid:
    """3x3 grid mixing OPEN cells with code 2 cells.

    Code 2 is passable for stepping and closing lines, but not for the
    strict diagonal fallback.
    """
    return Grid.from_rows(
        rows=[
            [1, 2, 1],
            [2, 2, 2],
            [1, 2, 1],
        ],
        start=GridPoint(x=0, y=0),
        end=GridPoint(x=2, y=2),
    )
