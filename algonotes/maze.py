"""Finding a path through a walled maze by depth-first and breadth-first search."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

UNVISITED = "0"
VISITED = "V"

DEFAULT_MAZE = (
    "*******",
    "*0*000*",
    "*0*0*0*",
    "*000*0*",
    "*******",
)


@dataclass(frozen=True)
class Point:
    """A cell of the maze given by row and column."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


# East, south, west, north.
DIRECTIONS = (Point(0, 1), Point(1, 0), Point(0, -1), Point(-1, 0))

PointLike = Union[Point, Tuple[int, int]]


class _Grid:
    def __init__(self, maze: Sequence[str]) -> None:
        if not maze or not maze[0]:
            raise ValueError("maze is empty")
        self.cells = [list(row) for row in maze]

    def is_open(self, p: Point) -> bool:
        return (
            0 <= p.x < len(self.cells)
            and 0 <= p.y < len(self.cells[p.x])
            and self.cells[p.x][p.y] == UNVISITED
        )

    def mark(self, p: Point) -> None:
        if 0 <= p.x < len(self.cells) and 0 <= p.y < len(self.cells[p.x]):
            self.cells[p.x][p.y] = VISITED


def _prepare(
    maze: Sequence[str], source: Optional[PointLike], destination: Optional[PointLike]
) -> tuple[_Grid, Point, Point]:
    grid = _Grid(maze)
    start = Point(1, 1) if source is None else Point(*source) if not isinstance(source, Point) else source
    if destination is None:
        end = Point(len(maze) - 2, len(maze[0]) - 2)
    elif isinstance(destination, Point):
        end = destination
    else:
        end = Point(*destination)
    return grid, start, end


def solve_with_stack(
    maze: Sequence[str] = DEFAULT_MAZE,
    source: Optional[PointLike] = None,
    destination: Optional[PointLike] = None,
) -> list[Point]:
    """Depth-first search trying one direction per step; return the path or []."""
    grid, source, destination = _prepare(maze, source, destination)
    if source == destination:
        return [source]
    grid.mark(source)
    stack: list[tuple[Point, Iterator[Point]]] = [(source, iter(DIRECTIONS))]
    while stack:
        point, directions = stack[-1]
        delta = next(directions, None)
        if delta is None:
            stack.pop()
            continue
        following = point + delta
        if grid.is_open(following):
            grid.mark(following)
            stack.append((following, iter(DIRECTIONS)))
            if following == destination:
                break
    return [point for point, _ in stack]


def solve_with_stack_alternative(
    maze: Sequence[str] = DEFAULT_MAZE,
    source: Optional[PointLike] = None,
    destination: Optional[PointLike] = None,
) -> list[Point]:
    """Depth-first search scanning directions until one opens; return the path or []."""
    grid, source, destination = _prepare(maze, source, destination)
    if source == destination:
        return [source]
    grid.mark(source)
    stack: list[tuple[Point, Iterator[Point]]] = [(source, iter(DIRECTIONS))]
    while stack:
        point, directions = stack[-1]
        for delta in directions:
            following = point + delta
            if grid.is_open(following):
                grid.mark(following)
                stack.append((following, iter(DIRECTIONS)))
                break
        else:
            stack.pop()
            continue
        if stack[-1][0] == destination:
            break
    return [point for point, _ in stack]


def solve_with_queue(
    maze: Sequence[str] = DEFAULT_MAZE,
    source: Optional[PointLike] = None,
    destination: Optional[PointLike] = None,
) -> list[Point]:
    """Breadth-first search from the destination; return a shortest path or []."""
    grid, source, destination = _prepare(maze, source, destination)
    if source == destination:
        return [source]
    parent: dict[Point, Point] = {}
    grid.mark(destination)
    queue = deque([destination])
    while queue:
        current = queue.popleft()
        for delta in DIRECTIONS:
            neighbour = current + delta
            if not grid.is_open(neighbour):
                continue
            parent[neighbour] = current
            if neighbour == source:
                path = [source]
                while path[-1] != destination:
                    path.append(parent[path[-1]])
                return path
            grid.mark(neighbour)
            queue.append(neighbour)
    return []