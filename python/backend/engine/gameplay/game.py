"""Replays moves on a puzzle and checks the win condition."""

from __future__ import annotations

from backend.engine.gamestate import BoardState
from backend.models.puzzle import Color, PuzzleDefinition


class GamePlay:
    """Orchestrates a single replay of a puzzle."""

    def __init__(self, puzzle: PuzzleDefinition) -> None:
        self.puzzle = puzzle
        self.state = BoardState.initial(puzzle)

    # -- movement -------------------------------------------------------------

    def move(self, color: Color) -> bool:
        """Move the block of *color*.

        Returns False, leaving the board untouched, if the puzzle has no
        such block.
        """
        if color not in self.state.blocks:
            return False
        self.state = self.state.move(color)
        return True

    def play(self, colors: list[Color]) -> bool:
        """Apply *colors* in order; stops at the first invalid one."""
        return all(self.move(color) for color in colors)

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return self.state.cost()

    @property
    def is_won(self) -> bool:
        return self.state.is_goal()
