"""AttemptOutcome - Result of a single randomized path generation attempt.

An attempt either produces a complete path or stops at a dead end:
- AttemptSucceeded carries the finished GridPath
- AttemptFailed carries the reason and how far the search got

Failed attempts are expected and cheap; the generator discards them and
starts over until its attempt budget runs out.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from gridpath_planner.model.grid_path import GridPath


class FailureReason(Enum):
    """Why an attempt stopped without reaching the goal."""

    FORWARD_BLOCKED = "forward_blocked"  # Neither right nor down is enterable
    GOAL_NOT_DIAGONAL = "goal_not_diagonal"  # Step limit hit off the goal's diagonal
    FALLBACK_BLOCKED = "fallback_blocked"  # Diagonal to goal crosses a non-open cell


@dataclass(frozen=True)
class AttemptOutcome(ABC):
    """Abstract base class for attempt results.

    Use the succeeded property or isinstance() to tell the variants apart.
    """

    @property
    @abstractmethod
    def succeeded(self) -> bool:
        """True if the attempt produced a path."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable summary for logging."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class AttemptSucceeded(AttemptOutcome):
    """Attempt reached the goal.

    Attributes:
        path: Complete path from grid start to grid end
    """

    path: GridPath

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Path found with {len(self.path)} points ({self.path.diagonal_step_count} diagonal steps)"


@dataclass(frozen=True)
class AttemptFailed(AttemptOutcome):
    """Attempt hit a dead end.

    Attributes:
        reason: Which check stopped the attempt
        steps_taken: Forward steps completed before stopping
    """

    reason: FailureReason
    steps_taken: int

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Attempt failed after {self.steps_taken} steps: {self.reason.value}"
