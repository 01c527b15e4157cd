"""Tests for geometry.py and board.py"""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from serpent.services.geometry import (
    DIRECTIONS, next_position, neighbors, manhattan_distance, in_bounds
)
from serpent.services.board import (
    Agent, BoardState, is_valid_move, is_growing, project_board
)


def make_board(snakes, width=11, height=11, food=(), hazards=(), you_id="you"):
    return BoardState(
        width=width,
        height=height,
        food=frozenset(food),
        hazards=frozenset(hazards),
        agents=tuple(snakes),
        you_id=you_id,
    )


class TestGeometry:
    """Tests for coordinate arithmetic."""

    def test_direction_order(self):
        """Test directions enumerate up, down, left, right."""
        assert list(DIRECTIONS) == ["up", "down", "left", "right"]

    def test_up_increases_y(self):
        assert next_position((3, 3), "up") == (3, 4)
        assert next_position((3, 3), "down") == (3, 2)
        assert next_position((3, 3), "left") == (2, 3)
        assert next_position((3, 3), "right") == (4, 3)

    def test_neighbors(self):
        assert neighbors((0, 0)) == [(0, 1), (0, -1), (-1, 0), (1, 0)]

    def test_manhattan_distance(self):
        assert manhattan_distance((0, 0), (3, 4)) == 7
        assert manhattan_distance((2, 2), (2, 2)) == 0

    def test_in_bounds(self):
        assert in_bounds((0, 0), 11, 11)
        assert in_bounds((10, 10), 11, 11)
        assert not in_bounds((11, 0), 11, 11)
        assert not in_bounds((0, -1), 11, 11)


class TestBoardState:
    """Tests for BoardState construction."""

    def test_agent_properties(self):
        snake = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        assert snake.head == (2, 2)
        assert snake.tail == (2, 0)
        assert snake.length == 3

    def test_you_and_opponents(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1)))
        other = Agent(id="other", health=90, body=((8, 8), (8, 7)))
        board = make_board([you, other])
        assert board.you is you
        assert board.opponents() == [other]
        assert board.get_agent("other") is other
        assert board.get_agent("missing") is None

    def test_occupancy_grid(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        board = make_board([you])
        assert board.occupancy.shape == (11, 11)
        assert board.is_occupied((2, 1))
        assert not board.is_occupied((1, 2))

    def test_occupancy_is_read_only(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1)))
        board = make_board([you])
        with pytest.raises(ValueError):
            board.occupancy[0, 0] = 1


class TestLegality:
    """Tests for is_valid_move."""

    def test_left_of_origin_is_illegal(self):
        """Test stepping left from (0,0) leaves the board."""
        you = Agent(id="you", health=90, body=((0, 0), (0, 1), (0, 2)))
        board = make_board([you], width=1, height=5)
        assert not is_valid_move(next_position((0, 0), "left"), board)

    def test_out_of_bounds(self):
        board = make_board([Agent(id="you", health=90, body=((5, 5),))])
        assert not is_valid_move((11, 5), board)
        assert not is_valid_move((5, -1), board)

    def test_body_segments_block(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        board = make_board([you])
        assert not is_valid_move((2, 1), board)
        # Raw board keeps the tail
        assert not is_valid_move((2, 0), board)
        assert is_valid_move((3, 2), board)


class TestProjection:
    """Tests for project_board."""

    def test_tail_vacated(self):
        """Test a snake not on food frees its tail cell."""
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        board = make_board([you])
        projected = project_board(board)

        assert projected.you.body == ((2, 2), (2, 1))
        assert is_valid_move((2, 0), projected)
        assert not is_valid_move((2, 0), board)

    def test_growing_snake_keeps_tail(self):
        """Test a snake whose head is on food keeps its body."""
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        board = make_board([you], food=[(2, 2)])
        assert is_growing(you, board.food)

        projected = project_board(board)
        assert projected.you.body == you.body
        assert not is_valid_move((2, 0), projected)

    def test_every_snake_projected(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        other = Agent(id="other", health=50, body=((8, 8), (8, 7), (8, 6)))
        projected = project_board(make_board([you, other]))
        assert projected.get_agent("other").body == ((8, 8), (8, 7))

    def test_projection_is_independent_copy(self):
        """Test projection shares no mutable data with the input."""
        you = Agent(id="you", health=90, body=((2, 2), (2, 1), (2, 0)))
        board = make_board([you])
        projected = project_board(board)

        assert projected is not board
        assert projected.occupancy is not board.occupancy
        assert board.is_occupied((2, 0))
        assert board.you.body == ((2, 2), (2, 1), (2, 0))

    def test_projection_keeps_board_fields(self):
        you = Agent(id="you", health=90, body=((2, 2), (2, 1)))
        board = make_board([you], food=[(5, 5)], hazards=[(0, 0)])
        projected = project_board(board)
        assert projected.width == board.width
        assert projected.height == board.height
        assert projected.food == board.food
        assert projected.hazards == board.hazards
        assert projected.you_id == board.you_id


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
