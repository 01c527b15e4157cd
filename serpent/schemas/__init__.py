from .game import (
    Coord, Ruleset, RulesetSettings, Game, Customizations,
    Battlesnake, Board, GameState, InfoResponse, MoveResponse
)

__all__ = [
    "Coord", "Ruleset", "RulesetSettings", "Game", "Customizations",
    "Battlesnake", "Board", "GameState", "InfoResponse", "MoveResponse",
]
