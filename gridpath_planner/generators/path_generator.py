"""PathGenerator - Randomized path construction between grid start and end.

Builds one valid path per call by repeating cheap randomized attempts:

**Single attempt (attempt):**
    1. Start the path at the grid start cell
    2. Step right or down at random (only onto passable cells)
    3. Optionally slide along the anti-diagonal through the new cell
       (the cell itself is always one of the choices)
    4. If the tail sits on a 45° line with the goal and the Bresenham line
       to the goal is passable, close the path along that line
    5. After 2 * (n - 1) steps, try a strict diagonal fallback where every
       cell between tail and goal must be exactly OPEN

**Retry loop (generate_path):**
    Attempts are independent. The first successful attempt wins; if the
    attempt budget is used up, GenerationExhaustedError is raised.

The result is not a shortest path. It is a random, geometrically valid one.
"""

import logging
from typing import Optional

from gridpath_planner.constants import CellCode, GeneratorConfig
from gridpath_planner.core.line_interpolator import LineInterpolator
from gridpath_planner.core.path_validator import validate_matrix_path
from gridpath_planner.core.random_picker import RandomPicker
from gridpath_planner.model.attempt_outcome import (
    AttemptFailed,
    AttemptOutcome,
    AttemptSucceeded,
    FailureReason,
)
from gridpath_planner.model.grid import Grid
from gridpath_planner.model.grid_path import GridPath
from gridpath_planner.model.grid_point import GridPoint

logger = logging.getLogger(__name__)


class GenerationExhaustedError(Exception):
    """Raised when no attempt within the budget produced a path.

    Attributes:
        attempts: Number of attempts made before giving up
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Unable to generate path after {attempts} attempts")
        self.attempts = attempts


class PathGenerator:
    """Generates random paths from grid start to grid end.

    Example:
        generator = PathGenerator(picker=RandomPicker(seed=7))
        path = generator.generate_path(grid=Grid.open(dimension=5))
        print(path.render(grid))

    Configuration: See GeneratorConfig in constants.py for tunable parameters.
    """

    def __init__(
        self,
        picker: Optional[RandomPicker] = None,
        max_attempts: int = GeneratorConfig.MAX_ATTEMPTS,
    ) -> None:
        """Initialize generator.

        Args:
            picker: Source of uniform random choices (fresh unseeded picker if None)
            max_attempts: Attempts before generate_path gives up
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.picker = picker or RandomPicker()
        self.max_attempts = max_attempts

    def generate_path(self, grid: Grid) -> GridPath:
        """Generate a random valid path from grid.start to grid.end.

        Args:
            grid: Read-only grid with passability codes

        Returns:
            GridPath starting at grid.start and ending at grid.end.

        Raises:
            GenerationExhaustedError: If every attempt in the budget failed.
        """
        logger.info(f"generate_path: {grid}, budget={self.max_attempts} attempts")

        for attempt_number in range(1, self.max_attempts + 1):
            outcome = self.attempt(grid=grid)
            if isinstance(outcome, AttemptSucceeded):
                logger.info(f"generate_path complete after {attempt_number} attempts: {outcome.message}")
                logger.debug(f"Generated path:\n{outcome.path.render(grid)}")
                return outcome.path
            logger.debug(f"Attempt {attempt_number}: {outcome.message}")

        logger.warning(f"generate_path exhausted {self.max_attempts} attempts on {grid}")
        raise GenerationExhaustedError(attempts=self.max_attempts)

    def attempt(self, grid: Grid) -> AttemptOutcome:
        """Run one randomized attempt to build a path.

        Returns:
            AttemptSucceeded with the path, or AttemptFailed with the reason.
        """
        path = GridPath(points=[grid.start])
        goal = grid.end
        max_steps = 2 * (grid.dimension - 1)

        for step in range(max_steps):
            forward = self._forward_moves(grid=grid, current=path.last())
            if not forward:
                return AttemptFailed(reason=FailureReason.FORWARD_BLOCKED, steps_taken=step)
            path.append(self.picker.pick(forward))

            candidates = self._diagonal_run_candidates(grid=grid, point=path.last())
            self._append_diagonal_run(path=path, target=self.picker.pick(candidates))

            tail = path.last()
            if tail.is_diagonal_to(goal):
                closing = LineInterpolator.create_path(from_point=tail, to_point=goal)
                if validate_matrix_path(grid=grid, path=closing):
                    path.extend(closing.points[1:])
                    return AttemptSucceeded(path=path)

        tail = path.last()
        if not tail.is_diagonal_to(goal):
            return AttemptFailed(reason=FailureReason.GOAL_NOT_DIAGONAL, steps_taken=max_steps)
        if not self.possible_to_move(from_point=tail, to_point=goal, grid=grid):
            return AttemptFailed(reason=FailureReason.FALLBACK_BLOCKED, steps_taken=max_steps)

        self._append_diagonal_run(path=path, target=goal)
        return AttemptSucceeded(path=path)

    @staticmethod
    def possible_to_move(from_point: GridPoint, to_point: GridPoint, grid: Grid) -> bool:
        """Check the strict diagonal move between two points.

        Only the up-right / down-left diagonal qualifies, in either order.
        Every cell strictly between the endpoints must be exactly OPEN;
        other passable codes do not count here.

        Args:
            from_point, to_point: Endpoints of the move (order-independent)
            grid: Grid to read cell codes from

        Returns:
            True if the endpoints are equal, or they share that diagonal and
            all intermediate cells are OPEN.
        """
        if from_point == to_point:
            return True
        if from_point.x > to_point.x:
            from_point, to_point = to_point, from_point

        distance = to_point.x - from_point.x
        if distance <= 0 or from_point.y - to_point.y != distance:
            return False

        for i in range(1, distance):
            if grid.get(x=from_point.x + i, y=from_point.y - i) != CellCode.OPEN:
                return False
        return True

    @staticmethod
    def _forward_moves(grid: Grid, current: GridPoint) -> list[GridPoint]:
        """Passable cells one step right or one step down."""
        moves = [current.offset(dx=dx, dy=dy) for dx, dy in GeneratorConfig.FORWARD_STEPS]
        return [p for p in moves if grid.is_passable(p)]

    @staticmethod
    def _diagonal_run_candidates(grid: Grid, point: GridPoint) -> list[GridPoint]:
        """The point itself plus every passable cell reachable along its anti-diagonal.

        Each direction stops at the first blocked or out-of-bounds cell.
        """
        candidates = [point]
        for dx, dy in GeneratorConfig.DIAGONAL_RUN_STEPS:
            next_point = point.offset(dx=dx, dy=dy)
            while grid.is_passable(next_point):
                candidates.append(next_point)
                next_point = next_point.offset(dx=dx, dy=dy)
        return candidates

    @staticmethod
    def _append_diagonal_run(path: GridPath, target: GridPoint) -> None:
        """Append every cell of the 45° run from the path tail to target.

        Raises:
            RuntimeError: If target is not on a diagonal through the tail.
        """
        last = path.last()
        if last == target:
            return
        if not last.is_diagonal_to(target):
            raise RuntimeError(f"Diagonal run from {last} to {target} is not a 45° line")

        inc_x = 1 if target.x > last.x else -1
        inc_y = 1 if target.y > last.y else -1
        for i in range(1, abs(target.x - last.x) + 1):
            path.append(GridPoint(x=last.x + inc_x * i, y=last.y + inc_y * i))
