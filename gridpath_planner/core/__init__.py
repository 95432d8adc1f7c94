"""Core building blocks for grid path generation.

- LineInterpolator: Bresenham rasterization between two cells
- validate_matrix_path: Passability check for a sequence of cells
- RandomPicker: Seedable uniform selection used for every random choice
"""

from gridpath_planner.core.line_interpolator import LineInterpolator
from gridpath_planner.core.path_validator import (
    find_blocked_point,
    validate_matrix_path,
)
from gridpath_planner.core.random_picker import RandomPicker

__all__ = [
    # Line interpolator
    "LineInterpolator",
    # Path validator
    "validate_matrix_path",
    "find_blocked_point",
    # Random picker
    "RandomPicker",
]
