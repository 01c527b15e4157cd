"""Grid geometry for the Battlesnake board.

Coordinates are integer (x, y) tuples with the origin in the bottom-left
corner, so "up" increases y.
"""

from typing import Dict, List, Tuple

Coord = Tuple[int, int]

# Enumeration order doubles as the tie-break order for move selection
DIRECTIONS: Dict[str, Coord] = {
    "up": (0, 1),
    "down": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
}


def next_position(pos: Coord, direction: str) -> Coord:
    """Cell reached by stepping once from pos in direction."""
    dx, dy = DIRECTIONS[direction]
    return (pos[0] + dx, pos[1] + dy)


def neighbors(pos: Coord) -> List[Coord]:
    """4-neighborhood of pos in direction order."""
    return [next_position(pos, direction) for direction in DIRECTIONS]


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def in_bounds(pos: Coord, width: int, height: int) -> bool:
    return 0 <= pos[0] < width and 0 <= pos[1] < height
