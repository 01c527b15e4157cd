import logging

from fastapi import APIRouter

from ...config import get_settings
from ...schemas.game import GameState, InfoResponse, MoveResponse
from ...services.decision_engine import DecisionEngine

logger = logging.getLogger(__name__)

router = APIRouter()

engine = DecisionEngine()


def _describe_self(state: GameState) -> str:
    you = state.you
    body = [(c.x, c.y) for c in you.body]
    return (
        f"[{you.name or you.id}] Head position: ({you.head.x},{you.head.y}), "
        f"Body: {body}, Health: {you.health}, Length: {you.length}"
    )


@router.get("/", response_model=InfoResponse)
async def info():
    """Battlesnake appearance and API version."""
    settings = get_settings()
    return InfoResponse(
        apiversion="1",
        author=settings.snake_author,
        color=settings.snake_color,
        head=settings.snake_head,
        tail=settings.snake_tail,
        version=settings.snake_version,
    )


@router.post("/start")
async def start(state: GameState):
    """Game start notification. Nothing to respond with."""
    logger.info(f"[{state.you.name or state.you.id}] Starting new game {state.game.id if state.game else ''}")
    logger.info(_describe_self(state))
    return {}


@router.post("/move", response_model=MoveResponse)
def move(state: GameState):
    """Choose this turn's move."""
    logger.info(_describe_self(state))

    decision = engine.decide(state.to_board_state())

    logger.info(f"[{state.you.name or state.you.id}] Turn {state.turn}: moving {decision.move} ({decision.reasoning})")
    return MoveResponse(move=decision.move, shout=f"Going {decision.move}!")


@router.post("/end")
async def end(state: GameState):
    """Game end notification."""
    logger.info(f"[{state.you.name or state.you.id}] Game over after turn {state.turn}")
    return {}
