"""Block configurations and the rules for moving blocks."""

from __future__ import annotations

from typing import Iterator, Mapping

from backend.engine.gamestate.heuristics import manhattan_distance
from backend.models.puzzle import Block, Color, Direction, Position, PuzzleDefinition


class BoardState:
    """One configuration of every block in a puzzle, plus its move count.

    Instances are never mutated after construction; ``move`` returns a new
    state built on a copy of the block map.
    """

    __slots__ = ("puzzle", "blocks", "_cost")

    def __init__(
        self, puzzle: PuzzleDefinition, blocks: Mapping[Color, Block], cost: int = 0
    ) -> None:
        self.puzzle = puzzle
        self.blocks: dict[Color, Block] = dict(blocks)
        self._cost = cost

    @classmethod
    def initial(cls, puzzle: PuzzleDefinition) -> BoardState:
        return cls(puzzle, puzzle.blocks)

    # -- moves ----------------------------------------------------------------

    def move(self, color: Color) -> BoardState:
        """Push *color* one cell along its facing direction.

        Any block standing on the destination is pushed along the same
        displacement, and so on down the line.  Arrows only change the
        direction a block will use on its own next move.
        """
        blocks = dict(self.blocks)
        offset = blocks[color].direction.offset
        current: Color | None = color

        while current is not None:
            block = blocks[current].shifted(offset)
            arrow = self.puzzle.arrows.get(block.position)
            if arrow is not None:
                block = Block(position=block.position, direction=arrow)
            blocks[current] = block
            current = self._occupant(blocks, block.position, exclude=current)

        return BoardState(self.puzzle, blocks, self._cost + 1)

    def _occupant(
        self, blocks: Mapping[Color, Block], position: Position, exclude: Color
    ) -> Color | None:
        for other in self.puzzle.colors:
            if other != exclude and blocks[other].position == position:
                return other
        return None

    # -- search protocol ------------------------------------------------------

    def successors(self) -> Iterator[tuple[Color, BoardState]]:
        for color in self.puzzle.colors:
            yield color, self.move(color)

    def distance_to_goal(self) -> int:
        return sum(
            manhattan_distance(self.blocks[color].position, goal)
            for color, goal in self.puzzle.goals.items()
        )

    def is_goal(self) -> bool:
        return self.distance_to_goal() == 0

    def cost(self) -> int:
        return self._cost

    def identity(self) -> tuple[tuple[Color, int, int, str], ...]:
        return tuple(
            (color, block.position[0], block.position[1], block.direction.value)
            for color, block in sorted(self.blocks.items())
        )

    # -- queries --------------------------------------------------------------

    def position_of(self, color: Color) -> Position:
        return self.blocks[color].position

    def direction_of(self, color: Color) -> Direction:
        return self.blocks[color].direction

    def __repr__(self) -> str:
        cells = ", ".join(
            f"{color}@{block.position}:{block.direction.value}"
            for color, block in self.blocks.items()
        )
        return f"BoardState(cost={self._cost}, {cells})"
