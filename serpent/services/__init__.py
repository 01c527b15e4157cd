# Core engine modules (pure, no I/O)
from .board import Agent, BoardState, is_valid_move, project_board
from .space_analyzer import flood_fill, is_trapped, evaluate_available_space
from .opponent_predictor import (
    MovementIntent, OpponentPrediction, predict_opponents, collision_risk
)
from .move_evaluator import evaluate_move, score_food, calculate_optimal_length
from .decision_engine import (
    DecisionEngine, DecisionContext, MoveDecision, calculate_next_move
)

__all__ = [
    "Agent",
    "BoardState",
    "is_valid_move",
    "project_board",
    "flood_fill",
    "is_trapped",
    "evaluate_available_space",
    "MovementIntent",
    "OpponentPrediction",
    "predict_opponents",
    "collision_risk",
    "evaluate_move",
    "score_food",
    "calculate_optimal_length",
    "DecisionEngine",
    "DecisionContext",
    "MoveDecision",
    "calculate_next_move",
]
