"""GridPoint - The fundamental coordinate atom for grid path planning.

A GridPoint is an immutable integer (x, y) pair. It is the single source of
truth for location throughout the system.

Used by:
- Grid (start/end cells)
- GridPath (ordered list of GridPoints)
- LineInterpolator (rasterized line cells)
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GridPoint:
    """A cell coordinate on a square grid.

    Attributes:
        x: Column index (grows to the right)
        y: Row index (grows downwards)

    Example:
        point = GridPoint(x=1, y=2)
        point.offset(dx=1, dy=-1)  # GridPoint(2, 1)
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "GridPoint":
        """Return the point shifted by (dx, dy)."""
        return GridPoint(x=self.x + dx, y=self.y + dy)

    def is_diagonal_to(self, other: "GridPoint") -> bool:
        """True if both points lie on a common 45° line (equal points included)."""
        return abs(self.x - other.x) == abs(self.y - other.y)

    def manhattan_distance_to(self, other: "GridPoint") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridPoint":
        """Create GridPoint from dictionary."""
        return cls(x=int(data["x"]), y=int(data["y"]))

    def __repr__(self) -> str:
        return f"GridPoint({self.x}, {self.y})"
