"""Line rasterization on integer grids.

Provides the Bresenham line used to close a generated path to its goal:
- Integer-only arithmetic, any slope
- One cell per step along the dominant axis, 8-connected, no duplicates
- Symmetric: the line from b to a is the reverse of the line from a to b

Path generation only asks for exact 45° lines, but the rasterizer is general.
"""

from gridpath_planner.model.grid_path import GridPath
from gridpath_planner.model.grid_point import GridPoint


class LineInterpolator:
    """Static methods for rasterizing straight lines between grid cells."""

    @staticmethod
    def create_path(from_point: GridPoint, to_point: GridPoint) -> GridPath:
        """Rasterize the straight line between two cells.

        The line is always traced from the lexicographically smaller endpoint
        and reversed if needed, so both directions cover the same cells.

        Args:
            from_point: First cell of the line
            to_point: Last cell of the line

        Returns:
            GridPath from from_point to to_point, both endpoints included.
            Equal endpoints yield a single-point path.
        """
        if (to_point.x, to_point.y) < (from_point.x, from_point.y):
            reverse = LineInterpolator.create_path(from_point=to_point, to_point=from_point)
            return GridPath(points=reverse.points[::-1])

        dx = abs(to_point.x - from_point.x)
        dy = abs(to_point.y - from_point.y)
        sx = 1 if to_point.x >= from_point.x else -1
        sy = 1 if to_point.y >= from_point.y else -1
        err = dx - dy

        x, y = from_point.x, from_point.y
        points = [GridPoint(x=x, y=y)]
        while x != to_point.x or y != to_point.y:
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy
            points.append(GridPoint(x=x, y=y))

        return GridPath(points=points)
