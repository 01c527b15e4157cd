"""
Opponent Predictor - Intent Inference and Move Distributions

Every opponent gets a probability distribution over its legal next cells.
The distribution is shaped by an inferred intent:

1. SEEKING FOOD (health < 30)
   - Cells closer to food weigh more: x 10 / (d_food + 1)

2. AGGRESSIVE (a shorter snake's head within 2 cells)
   - Cells closer to every shorter snake's head weigh more: x 5 / (d + 1)

3. TRAPPED (2 or fewer legal moves)
   - Cells with more exits weigh more: x exits / 4

Intent flags are independent; all applicable factors multiply. Weights
are normalized per opponent. Predictions live for a single decision.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .board import Agent, BoardState, is_valid_move
from .geometry import Coord, manhattan_distance, neighbors

logger = logging.getLogger(__name__)

HUNGRY_HEALTH = 30
AGGRESSION_RANGE = 2
TRAPPED_MAX_MOVES = 2

FOOD_WEIGHT = 10.0
AGGRESSION_WEIGHT = 5.0

# Collision risk multipliers
LARGER_OR_EQUAL_THREAT = 1.5
SMALLER_THREAT = 0.5
AGGRESSIVE_THREAT = 1.3
TRAPPED_THREAT = 0.7


@dataclass
class MovementIntent:
    """Inferred behavior of an opponent for one decision."""
    seeking_food: bool = False
    aggressive: bool = False
    trapped: bool = False


@dataclass
class OpponentPrediction:
    """Where an opponent is expected to move next turn."""
    agent_id: str
    length: int
    intent: MovementIntent
    distribution: Dict[Coord, float] = field(default_factory=dict)

    def probability(self, pos: Coord) -> float:
        return self.distribution.get(pos, 0.0)


def legal_moves(pos: Coord, board: BoardState) -> List[Coord]:
    """Raw-board legal neighbors of pos."""
    return [n for n in neighbors(pos) if is_valid_move(n, board)]


def nearest_food_distance(pos: Coord, board: BoardState) -> Optional[int]:
    if not board.food:
        return None
    return min(manhattan_distance(pos, food) for food in board.food)


def infer_intent(opponent: Agent, board: BoardState) -> MovementIntent:
    """Derive seeking/aggressive/trapped flags for one opponent."""
    aggressive = any(
        other.id != opponent.id
        and manhattan_distance(opponent.head, other.head) <= AGGRESSION_RANGE
        and opponent.length > other.length
        for other in board.agents
    )
    return MovementIntent(
        seeking_food=opponent.health < HUNGRY_HEALTH,
        aggressive=aggressive,
        trapped=len(legal_moves(opponent.head, board)) <= TRAPPED_MAX_MOVES,
    )


def predict_moves(opponent: Agent, board: BoardState) -> OpponentPrediction:
    """Build the normalized move distribution for one opponent.

    Args:
        opponent: The snake to predict
        board: Raw board; legality is checked without tail projection

    Returns:
        OpponentPrediction, with an empty distribution if the opponent has
        no legal move
    """
    intent = infer_intent(opponent, board)
    candidates = legal_moves(opponent.head, board)
    prediction = OpponentPrediction(
        agent_id=opponent.id,
        length=opponent.length,
        intent=intent,
    )
    if not candidates:
        return prediction

    shorter_heads = [
        other.head for other in board.agents
        if other.id != opponent.id and other.length < opponent.length
    ]

    weights: Dict[Coord, float] = {}
    for candidate in candidates:
        weight = 1.0

        if intent.seeking_food:
            food_dist = nearest_food_distance(candidate, board)
            if food_dist is not None:
                weight *= FOOD_WEIGHT / (food_dist + 1)

        if intent.aggressive:
            for head in shorter_heads:
                weight *= AGGRESSION_WEIGHT / (manhattan_distance(candidate, head) + 1)

        if intent.trapped:
            weight *= len(legal_moves(candidate, board)) / 4

        weights[candidate] = weight

    total = sum(weights.values())
    if total > 0:
        prediction.distribution = {pos: w / total for pos, w in weights.items()}
    else:
        # Every exit is a dead end; no basis to prefer one
        uniform = 1.0 / len(candidates)
        prediction.distribution = {pos: uniform for pos in candidates}

    return prediction


def predict_opponents(board: BoardState) -> Dict[str, OpponentPrediction]:
    """One prediction per opponent, keyed by snake id."""
    predictions = {}
    for opponent in board.opponents():
        if not opponent.body:
            continue
        predictions[opponent.id] = predict_moves(opponent, board)
        logger.debug(
            f"Predicted {opponent.id}: intent={predictions[opponent.id].intent} "
            f"distribution={predictions[opponent.id].distribution}"
        )
    return predictions


def collision_risk(
    candidate: Coord,
    predictions: Dict[str, OpponentPrediction],
    self_length: int,
) -> float:
    """Worst single-opponent threat that candidate is contested next turn.

    Risk is the maximum over opponents, not a sum.
    """
    risk = 0.0
    for prediction in predictions.values():
        probability = prediction.probability(candidate)
        if probability == 0.0:
            continue

        if prediction.length >= self_length:
            threat = probability * LARGER_OR_EQUAL_THREAT
        else:
            threat = probability * SMALLER_THREAT
        if prediction.intent.aggressive:
            threat *= AGGRESSIVE_THREAT
        if prediction.intent.trapped:
            threat *= TRAPPED_THREAT

        risk = max(risk, threat)
    return risk
