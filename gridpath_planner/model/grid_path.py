"""GridPath - Ordered sequence of grid cells produced by path generation.

Provides shared functionality for generated paths and rasterized lines:
- Points storage with list-like access
- Computed step metrics (step count, diagonal steps, contiguity)
- Serialization and a text overlay for inspecting a path on its grid
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional

from gridpath_planner.constants import CellCode, RenderConfig
from gridpath_planner.model.grid_point import GridPoint

if TYPE_CHECKING:
    from gridpath_planner.model.grid import Grid


@dataclass
class GridPath:
    """An ordered sequence of GridPoints.

    A successfully generated path starts at the grid start, ends at the grid
    end, and every consecutive pair is either a unit orthogonal step or a
    unit diagonal step.

    Attributes:
        points: Path points in travel order

    Computed Properties:
        start: First point
        end: Last point
        step_count: Number of moves between consecutive points
        diagonal_step_count: Moves changing both coordinates
        is_contiguous: Every move is a unit orthogonal or diagonal step
    """

    points: list[GridPoint] = field(default_factory=list)

    @property
    def start(self) -> Optional[GridPoint]:
        """First point of the path."""
        return self.points[0] if self.points else None

    @property
    def end(self) -> Optional[GridPoint]:
        """Last point of the path."""
        return self.points[-1] if self.points else None

    def last(self) -> GridPoint:
        """Last point of a non-empty path."""
        if not self.points:
            raise IndexError("last() called on an empty GridPath")
        return self.points[-1]

    def append(self, point: GridPoint) -> None:
        self.points.append(point)

    def extend(self, points: Iterable[GridPoint]) -> None:
        self.points.extend(points)

    @property
    def step_count(self) -> int:
        return max(len(self.points) - 1, 0)

    @property
    def diagonal_step_count(self) -> int:
        return sum(1 for a, b in self._pairs() if a.x != b.x and a.y != b.y)

    @property
    def is_contiguous(self) -> bool:
        """True if every move changes each coordinate by at most one and the point moves."""
        return all(max(abs(a.x - b.x), abs(a.y - b.y)) == 1 for a, b in self._pairs())

    def _pairs(self) -> Iterator[tuple[GridPoint, GridPoint]]:
        return zip(self.points, self.points[1:])

    def render(self, grid: "Grid") -> str:
        """Draw the path over the grid as text, one line per row.

        Blocked cells are '#', open cells '.', other codes their digit,
        path cells '*', and the path endpoints 'S' and 'E'.
        """
        on_path = set(self.points)
        lines = []
        for y in range(grid.dimension):
            row = []
            for x in range(grid.dimension):
                point = GridPoint(x=x, y=y)
                code = grid.get(x=x, y=y)
                if point == self.start:
                    row.append(RenderConfig.START)
                elif point == self.end:
                    row.append(RenderConfig.END)
                elif point in on_path:
                    row.append(RenderConfig.PATH)
                elif code == CellCode.BLOCKED:
                    row.append(RenderConfig.BLOCKED)
                elif code == CellCode.OPEN:
                    row.append(RenderConfig.OPEN)
                else:
                    row.append(str(code) if code < 10 else RenderConfig.HIGH_CODE)
            lines.append("".join(row))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridPath":
        """Create GridPath from dictionary."""
        if "points" not in data:
            raise ValueError("GridPath data must contain 'points'")
        return cls(points=[GridPoint.from_dict(p) for p in data["points"]])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[GridPoint]:
        return iter(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.points

    def __getitem__(self, index: int) -> GridPoint:
        return self.points[index]

    def __repr__(self) -> str:
        return f"GridPath({len(self.points)} points, start={self.start}, end={self.end})"
