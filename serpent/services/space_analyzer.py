"""Space Analyzer - bounded reachability and trap detection.

All queries run against the projected board (tails that will move are
already free). Recursion depth never exceeds SPACE_DEPTH.
"""

from typing import Optional, Set

from .board import BoardState, is_valid_move
from .geometry import Coord, neighbors

SPACE_DEPTH = 5
TRAP_DEPTH = 3


def flood_fill(
    pos: Coord,
    board: BoardState,
    depth: int,
    visited: Optional[Set[Coord]] = None,
) -> int:
    """Count cells reachable from pos within depth steps.

    Depth-first over the 4-neighborhood (up, down, left, right). A cell is
    counted once; the visited set is shared across branches, so a cell
    first reached on a long branch is not revisited from a shorter one.

    Args:
        pos: Starting cell
        board: Board view used for the legality test
        depth: Remaining steps; 0 counts nothing
        visited: Cells already counted in this query

    Returns:
        Number of distinct legal cells counted
    """
    if depth == 0:
        return 0
    if visited is None:
        visited = set()
    if pos in visited:
        return 0
    if not is_valid_move(pos, board):
        return 0

    visited.add(pos)
    count = 1
    for neighbor in neighbors(pos):
        count += flood_fill(neighbor, board, depth - 1, visited)
    return count


def evaluate_available_space(pos: Coord, board: BoardState, depth: int = SPACE_DEPTH) -> int:
    """Fresh flood fill used for space scoring."""
    return flood_fill(pos, board, depth, set())


def is_trapped(pos: Coord, board: BoardState, depth: int = TRAP_DEPTH) -> bool:
    """Heuristic trap test: fewer than 2*depth + 1 cells reachable.

    Not a proof that no escape route exists.
    """
    return flood_fill(pos, board, depth, set()) < depth * 2 + 1
