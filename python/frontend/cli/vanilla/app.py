"""Vanilla terminal frontend — plain ``print`` output, no dependencies."""

from __future__ import annotations

from backend.models.puzzle import Color, PuzzleDefinition


def run(puzzle: PuzzleDefinition, moves: list[Color] | None, max_moves: int) -> None:
    """Report the solver outcome for *puzzle*."""
    if moves is None:
        print(f"No solution found within {max_moves} moves")
        return
    print(f"Solution found with {len(moves)} moves")
    print(f"Moves: {moves}")
