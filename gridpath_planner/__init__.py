"""Grid Path Planner - Random start-to-end paths for grid-based levels.

Generates a single randomized, geometrically valid path across a square grid
of passability codes, for puzzle and maze-style level content:
- Right/down stepping with random anti-diagonal slides
- Bresenham closing lines validated against cell passability
- Bounded retries with seedable randomness

Modules:
    core: Building blocks (line interpolation, path validation, random picking)
    model: Data structures (GridPoint, Grid, GridPath, AttemptOutcome)
    generators: Path generation algorithm (PathGenerator)

Example:
    from gridpath_planner.core import RandomPicker
    from gridpath_planner.generators import PathGenerator
    from gridpath_planner.model import Grid

    grid = Grid.open(dimension=6)
    path = PathGenerator(picker=RandomPicker(seed=1)).generate_path(grid=grid)
"""
