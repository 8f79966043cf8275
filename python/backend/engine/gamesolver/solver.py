"""Arrow-blocks puzzle solver."""

from __future__ import annotations

import logging

from backend.engine.gamestate import BoardState
from backend.engine.search import SearchEngine
from backend.models.puzzle import Color, PuzzleDefinition

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 50


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        puzzle: PuzzleDefinition, max_moves: int = DEFAULT_MAX_MOVES
    ) -> list[Color] | None:
        """Return the colors to move, in order, or ``None`` if no solution
        of at most *max_moves* moves was found."""
        engine: SearchEngine[BoardState, Color] = SearchEngine()
        moves = engine.solve(BoardState.initial(puzzle), max_moves)
        logger.info(
            "Searched %d states (%d expanded) with a budget of %d moves: %s.",
            len(engine.nodes),
            engine.expanded,
            max_moves,
            "no solution" if moves is None else f"{len(moves)} moves",
        )
        return moves

    @staticmethod
    def hint(puzzle: PuzzleDefinition, max_moves: int = DEFAULT_MAX_MOVES) -> Color | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(puzzle, max_moves)
        return moves[0] if moves else None
