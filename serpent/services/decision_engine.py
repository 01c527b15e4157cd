"""
Decision Engine - Candidate Generation, Risk Filtering and Selection

Flow for one turn:

    CandidateGeneration -> RiskFiltering -> Scoring -> Selection
                                                 \\-> Fallback -> Selection

1. The four neighbors of the self head are candidates.
2. Candidates illegal on the raw board are dropped.
3. Opponent predictions are computed once into a DecisionContext.
4. Candidates with collision risk >= RISK_THRESHOLD are dropped.
5. Survivors are scored and discounted by (1 - risk).
6. If nothing survives, every legal candidate is re-scored the same way
   with a flat FALLBACK_PENALTY.
7. With no legal candidate at all, DEFAULT_MOVE is returned.

The engine always answers: one move per turn regardless of outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .board import BoardState, is_valid_move, project_board
from .geometry import DIRECTIONS, Coord, next_position
from .move_evaluator import evaluate_move
from .opponent_predictor import OpponentPrediction, collision_risk, predict_opponents

logger = logging.getLogger(__name__)


@dataclass
class DecisionContext:
    """Everything derived from the snapshot for a single decision."""
    board: BoardState
    projected: BoardState
    predictions: Dict[str, OpponentPrediction]

    @classmethod
    def build(cls, board: BoardState) -> "DecisionContext":
        return cls(
            board=board,
            projected=project_board(board),
            predictions=predict_opponents(board),
        )


@dataclass
class CandidateScore:
    """Score breakdown for one direction."""
    direction: str
    position: Coord
    risk: float
    score: float


@dataclass
class MoveDecision:
    """Result of one decision."""
    move: str
    score: Optional[float] = None
    candidates: List[CandidateScore] = field(default_factory=list)
    fallback: bool = False
    reasoning: str = ""


class DecisionEngine:
    """Chooses the self snake's move for one snapshot.

    Stateless: every call builds its own DecisionContext and shares
    nothing with other calls.
    """

    RISK_THRESHOLD = 0.8
    FALLBACK_PENALTY = 200.0
    DEFAULT_MOVE = "up"

    def decide(self, board: BoardState) -> MoveDecision:
        you = board.you

        legal: Dict[str, Coord] = {}
        for direction in DIRECTIONS:
            pos = next_position(you.head, direction)
            if is_valid_move(pos, board):
                legal[direction] = pos

        if not legal:
            logger.warning(f"No legal move for {you.id}, defaulting to {self.DEFAULT_MOVE}")
            return MoveDecision(
                move=self.DEFAULT_MOVE,
                reasoning="no legal move",
            )

        ctx = DecisionContext.build(board)
        risks = {
            direction: collision_risk(pos, ctx.predictions, you.length)
            for direction, pos in legal.items()
        }

        safe = {d: pos for d, pos in legal.items() if risks[d] < self.RISK_THRESHOLD}
        fallback = not safe
        if fallback:
            logger.debug(f"All candidates above risk {self.RISK_THRESHOLD}, relaxing filter")
            safe = legal

        candidates = [
            self._score_candidate(ctx, direction, pos, risks[direction], fallback)
            for direction, pos in safe.items()
        ]

        # Strictly greater wins; ties keep the earlier direction
        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate.score > best.score:
                best = candidate

        for candidate in candidates:
            logger.debug(
                f"{candidate.direction}: pos={candidate.position} "
                f"risk={candidate.risk:.3f} score={candidate.score:.2f}"
            )

        if fallback:
            reasoning = "forced: every legal move above risk threshold"
        else:
            reasoning = f"best of {len(candidates)} safe moves"

        return MoveDecision(
            move=best.direction,
            score=best.score,
            candidates=candidates,
            fallback=fallback,
            reasoning=reasoning,
        )

    def _score_candidate(
        self,
        ctx: DecisionContext,
        direction: str,
        pos: Coord,
        risk: float,
        fallback: bool,
    ) -> CandidateScore:
        you = ctx.board.you
        score = evaluate_move(pos, ctx.board, you.health, you.length, ctx.projected)
        score *= (1 - risk)
        if fallback:
            score -= self.FALLBACK_PENALTY
        return CandidateScore(direction=direction, position=pos, risk=risk, score=score)


def calculate_next_move(board: BoardState) -> str:
    """Direction token for the self snake on this board."""
    return DecisionEngine().decide(board).move
