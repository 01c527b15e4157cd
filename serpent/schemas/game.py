from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from ..services.board import Agent, BoardState

# Largest board side accepted; the engine allocates a height x width grid
MAX_BOARD_SIZE = 256


class Coord(BaseModel):
    x: int
    y: int

    def as_tuple(self):
        return (self.x, self.y)


class RulesetSettings(BaseModel):
    foodSpawnChance: int = 0
    minimumFood: int = 0
    hazardDamagePerTurn: int = 0


class Ruleset(BaseModel):
    name: str = "standard"
    version: str = ""
    settings: Optional[RulesetSettings] = None


class Game(BaseModel):
    id: str = ""
    ruleset: Optional[Ruleset] = None
    map: Optional[str] = None
    source: Optional[str] = None
    timeout: int = 500


class Customizations(BaseModel):
    color: Optional[str] = None
    head: Optional[str] = None
    tail: Optional[str] = None


class Battlesnake(BaseModel):
    id: str
    name: str = ""
    health: int = Field(ge=0, le=100)
    body: List[Coord] = Field(min_length=1)  # head first
    head: Optional[Coord] = None
    length: Optional[int] = None
    latency: Optional[str] = None
    shout: Optional[str] = None
    customizations: Optional[Customizations] = None

    @model_validator(mode="after")
    def fill_head_and_length(self):
        # The engine always derives both from body
        if self.head is None:
            self.head = self.body[0]
        if self.length is None:
            self.length = len(self.body)
        return self

    def to_agent(self) -> Agent:
        return Agent(
            id=self.id,
            health=self.health,
            body=tuple(segment.as_tuple() for segment in self.body),
            name=self.name,
        )


class Board(BaseModel):
    height: int = Field(gt=0, le=MAX_BOARD_SIZE)
    width: int = Field(gt=0, le=MAX_BOARD_SIZE)
    food: List[Coord] = []
    hazards: List[Coord] = []
    snakes: List[Battlesnake] = []


class GameState(BaseModel):
    """Snapshot sent with every start/move/end request."""
    game: Optional[Game] = None
    turn: int = 0
    board: Board
    you: Battlesnake

    def to_board_state(self) -> BoardState:
        """Build the engine's immutable board; self is added if missing."""
        agents = [snake.to_agent() for snake in self.board.snakes]
        if not any(agent.id == self.you.id for agent in agents):
            agents.append(self.you.to_agent())

        return BoardState(
            width=self.board.width,
            height=self.board.height,
            food=frozenset(f.as_tuple() for f in self.board.food),
            hazards=frozenset(h.as_tuple() for h in self.board.hazards),
            agents=tuple(agents),
            you_id=self.you.id,
        )


class InfoResponse(BaseModel):
    apiversion: str = "1"
    author: str
    color: str
    head: str
    tail: str
    version: str


class MoveResponse(BaseModel):
    move: str  # 'up', 'down', 'left', 'right'
    shout: Optional[str] = None
