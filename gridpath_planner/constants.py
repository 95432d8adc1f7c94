"""Configuration constants for Grid Path Planner.

All configurable parameters are centralized here for easy tuning.

Classes:
    CellCode: Passability codes stored in grid cells
    GeneratorConfig: Randomized path search parameters
    RenderConfig: Text overlay symbols for debugging output
"""


class CellCode:
    """Passability codes stored in grid cells."""

    BLOCKED = 0  # Never enterable
    OPEN = 1  # Free cell; the only code accepted by the strict diagonal fallback
    # Any other positive code is passable for stepping and closing lines


class GeneratorConfig:
    """Randomized path search parameters."""

    # Independent attempts before giving up on a grid
    MAX_ATTEMPTS = 10_000

    # Forward moves: one step right or one step down
    FORWARD_STEPS = ((1, 0), (0, 1))

    # Diagonal run directions, explored in this order from the new point
    DIAGONAL_RUN_STEPS = ((-1, 1), (1, -1))


class RenderConfig:
    """Symbols used by GridPath.render for text overlays."""

    BLOCKED = "#"
    OPEN = "."
    PATH = "*"
    START = "S"
    END = "E"
    HIGH_CODE = "+"  # Codes with more than one digit


assert GeneratorConfig.MAX_ATTEMPTS > 0, "Attempt budget must be positive"
