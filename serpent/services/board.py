"""Board state and next-turn projection.

A BoardState is an immutable snapshot of one turn. Occupancy is kept in a
height x width numpy grid where:
- 0 = free
- 1 = occupied by a snake segment

Two views of the same turn are used by the engine:
- the raw board, exactly as received (candidate legality)
- the projected board, where every snake that is not about to grow has
  already vacated its tail cell (reachability and trap analysis)
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .geometry import Coord, in_bounds


@dataclass(frozen=True)
class Agent:
    """A snake on the board. Body is head first."""
    id: str
    health: int
    body: Tuple[Coord, ...]
    name: str = ""

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)


@dataclass(frozen=True)
class BoardState:
    """Immutable snapshot of the board for a single decision."""
    width: int
    height: int
    food: FrozenSet[Coord]
    hazards: FrozenSet[Coord]
    agents: Tuple[Agent, ...]
    you_id: str

    occupancy: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        grid = np.zeros((self.height, self.width), dtype=np.uint8)
        for agent in self.agents:
            for x, y in agent.body:
                if in_bounds((x, y), self.width, self.height):
                    grid[y, x] = 1
        grid.setflags(write=False)
        object.__setattr__(self, "occupancy", grid)

    @property
    def you(self) -> Agent:
        for agent in self.agents:
            if agent.id == self.you_id:
                return agent
        raise KeyError(f"Self agent {self.you_id} not on board")

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        for agent in self.agents:
            if agent.id == agent_id:
                return agent
        return None

    def opponents(self) -> List[Agent]:
        """All snakes other than self."""
        return [agent for agent in self.agents if agent.id != self.you_id]

    def is_occupied(self, pos: Coord) -> bool:
        """Check if an in-bounds cell holds a snake segment."""
        return bool(self.occupancy[pos[1], pos[0]])


def is_valid_move(pos: Coord, board: BoardState) -> bool:
    """Check if pos is inside the board and free of every segment in this view."""
    if not in_bounds(pos, board.width, board.height):
        return False
    return not board.is_occupied(pos)


def is_growing(agent: Agent, food: FrozenSet[Coord]) -> bool:
    """A snake whose head sits on food keeps its tail this turn."""
    return len(agent.body) > 0 and agent.head in food


def project_board(board: BoardState) -> BoardState:
    """Return the next-turn occupancy view with non-growing tails vacated.

    The result shares no mutable data with the input: bodies are fresh
    tuples and the occupancy grid is rebuilt.
    """
    projected_agents = []
    for agent in board.agents:
        if is_growing(agent, board.food):
            body = tuple(agent.body)
        else:
            body = tuple(agent.body[:-1])
        projected_agents.append(
            Agent(id=agent.id, health=agent.health, body=body, name=agent.name)
        )

    return BoardState(
        width=board.width,
        height=board.height,
        food=board.food,
        hazards=board.hazards,
        agents=tuple(projected_agents),
        you_id=board.you_id,
    )
