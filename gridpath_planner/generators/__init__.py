"""Path generation algorithms for grid levels.

Provides the PathGenerator for building random start-to-end paths:
- Forward steps (right/down) with random anti-diagonal slides
- Early closing along a passable 45° line to the goal
- Strict diagonal fallback after the step limit
- Bounded retries ending in GenerationExhaustedError
"""

from gridpath_planner.generators.path_generator import (
    GenerationExhaustedError,
    PathGenerator,
)

__all__ = [
    "PathGenerator",
    "GenerationExhaustedError",
]
