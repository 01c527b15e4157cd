"""
Move Evaluator - Weighted Scoring Heuristic

Scores a single candidate cell for the self snake. Higher is better.

1. CRITICAL SAFETY (short-circuit)
   - Larger-or-equal head adjacent to the cell: -1000
   - Cell leads into a trap: -800

2. WEIGHTED FEATURES
   - Hazards and nearby threats scale a safety multiplier down
   - Food is sought or avoided depending on health and optimal length
   - Reachable space is rewarded, more heavily once long enough
   - Staying near our own tail is rewarded when healthy and long enough
   - Sitting two cells from a much shorter head is rewarded

Final score = (base + features + food) * safety multiplier
"""

from typing import Optional

from .board import BoardState, project_board
from .geometry import Coord, manhattan_distance
from .space_analyzer import SPACE_DEPTH, TRAP_DEPTH, evaluate_available_space, is_trapped

DEATH_SCORE = -1000.0
TRAPPED_SCORE = -800.0
BASE_SCORE = 100.0

DEFAULT_OPTIMAL_LENGTH = 3
MAX_OPTIMAL_LENGTH = 8

URGENT_HEALTH = 25
HUNGRY_HEALTH = 50

URGENT_FOOD_WEIGHT = 300.0
FOOD_WEIGHT = 150.0
OVERSIZED_FOOD_PENALTY = -20.0

SPACE_WEIGHT_LONG = 75
SPACE_WEIGHT_SHORT = 50

TAIL_CHASE_RANGE = 2
TAIL_CHASE_WEIGHT = 100.0

HAZARD_MULTIPLIER = 0.5
THREAT_MULTIPLIER = 0.7
AGGRESSION_BONUS = 50.0
THREAT_RANGE = 2


def calculate_optimal_length(board: BoardState) -> int:
    """Target body length derived from opponents' lengths.

    Average opponent length plus one, kept above the shortest opponent and
    at most the longest opponent (capped at 8). Defaults to 3 with no
    opponents.
    """
    lengths = [opponent.length for opponent in board.opponents()]
    if not lengths:
        return DEFAULT_OPTIMAL_LENGTH

    optimal_length = int(sum(lengths) / len(lengths)) + 1
    min_desired = min(lengths) + 1
    max_desired = min(max(lengths), MAX_OPTIMAL_LENGTH)

    if optimal_length < min_desired:
        optimal_length = min_desired
    if optimal_length > max_desired:
        optimal_length = max_desired
    return optimal_length


def score_food(
    candidate: Coord,
    board: BoardState,
    health: int,
    length: int,
    optimal_length: Optional[int] = None,
) -> float:
    """Food component of the score, before the safety multiplier."""
    if not board.food:
        return 0.0
    if optimal_length is None:
        optimal_length = calculate_optimal_length(board)

    closest_food = min(board.food, key=lambda food: manhattan_distance(candidate, food))
    food_dist = manhattan_distance(candidate, closest_food)

    # Eating is only unsafe if a larger-or-equal head can take the same cell
    food_safe = True
    if food_dist == 0:
        for opponent in board.opponents():
            if (manhattan_distance(opponent.head, closest_food) == 1
                    and opponent.length >= length):
                food_safe = False
                break

    urgent = False
    seek = False
    if health < URGENT_HEALTH:
        urgent = True
        seek = True
    elif health < HUNGRY_HEALTH:
        seek = length < optimal_length
    else:
        seek = length < optimal_length - 2

    if seek and food_safe:
        weight = URGENT_FOOD_WEIGHT if urgent else FOOD_WEIGHT
        return weight / (food_dist + 1)
    if length > optimal_length:
        return OVERSIZED_FOOD_PENALTY / (food_dist + 1)
    return 0.0


def evaluate_move(
    candidate: Coord,
    board: BoardState,
    health: int,
    length: int,
    projected: Optional[BoardState] = None,
) -> float:
    """Score a candidate cell for the self snake.

    Args:
        candidate: Cell the self head would move into
        board: Raw board for this turn
        health: Self health
        length: Self length
        projected: Next-turn projection of board; built here if omitted

    Returns:
        Desirability score (higher is better)
    """
    if projected is None:
        projected = project_board(board)
    opponents = board.opponents()

    for opponent in opponents:
        if manhattan_distance(candidate, opponent.head) == 1 and opponent.length >= length:
            return DEATH_SCORE

    if is_trapped(candidate, projected, TRAP_DEPTH):
        return TRAPPED_SCORE

    score = BASE_SCORE
    safety_multiplier = 1.0

    if candidate in board.hazards:
        safety_multiplier *= HAZARD_MULTIPLIER

    optimal_length = calculate_optimal_length(board)
    food_score = score_food(candidate, board, health, length, optimal_length)

    space_score = evaluate_available_space(candidate, projected, SPACE_DEPTH)
    if length >= optimal_length:
        score += space_score * SPACE_WEIGHT_LONG
    else:
        score += space_score * SPACE_WEIGHT_SHORT

    if length >= optimal_length and health > HUNGRY_HEALTH:
        tail_dist = manhattan_distance(candidate, board.you.tail)
        if tail_dist <= TAIL_CHASE_RANGE:
            score += TAIL_CHASE_WEIGHT / (tail_dist + 1)

    for opponent in opponents:
        head_dist = manhattan_distance(candidate, opponent.head)
        if length > opponent.length + 1:
            if head_dist == THREAT_RANGE:
                score += AGGRESSION_BONUS
        elif head_dist <= THREAT_RANGE:
            safety_multiplier *= THREAT_MULTIPLIER

    return (score + food_score) * safety_multiplier
