"""Puzzle model for the arrow-blocks game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

Color = str
Position = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Position:
        """Unit displacement ``(dx, dy)``; ``UP`` increases ``y``."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Block:
    position: Position
    direction: Direction

    def shifted(self, offset: Position) -> Block:
        return Block(
            position=(self.position[0] + offset[0], self.position[1] + offset[1]),
            direction=self.direction,
        )


@dataclass(frozen=True)
class PuzzleDefinition:
    """Static description of a puzzle, shared by every search state.

    ``colors`` fixes the order in which blocks are tried as moves.  Colors
    without an entry in ``goals`` are plain movable obstacles.
    """

    colors: tuple[Color, ...]
    blocks: Mapping[Color, Block]
    goals: Mapping[Color, Position] = field(default_factory=dict)
    arrows: Mapping[Position, Direction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if set(self.colors) != set(self.blocks) or len(self.colors) != len(self.blocks):
            raise ValueError(
                f"Block colors {sorted(self.blocks)} do not match "
                f"declared colors {list(self.colors)}."
            )
        unknown = set(self.goals) - set(self.blocks)
        if unknown:
            raise ValueError(f"Goals given for undeclared colors: {sorted(unknown)}.")
        # Freeze the mappings so the definition can be shared safely.
        object.__setattr__(self, "blocks", MappingProxyType(dict(self.blocks)))
        object.__setattr__(self, "goals", MappingProxyType(dict(self.goals)))
        object.__setattr__(self, "arrows", MappingProxyType(dict(self.arrows)))

    def goal_of(self, color: Color) -> Position | None:
        return self.goals.get(color)


class PuzzleBuilder:
    """Accumulates block and arrow declarations into a ``PuzzleDefinition``.

    Example::

        builder = PuzzleBuilder()
        builder.add_block("red", Direction.RIGHT, (0, 0), goal=(3, 0))
        builder.add_arrow(Direction.UP, (2, 0))
        puzzle = builder.build()
    """

    def __init__(self) -> None:
        self._blocks: dict[Color, Block] = {}
        self._goals: dict[Color, Position] = {}
        self._arrows: dict[Position, Direction] = {}

    def add_block(
        self,
        color: Color,
        direction: Direction,
        position: Position,
        goal: Position | None = None,
    ) -> PuzzleBuilder:
        """Declare a block; re-declaring *color* replaces it entirely."""
        self._blocks[color] = Block(position=tuple(position), direction=Direction(direction))
        if goal is None:
            self._goals.pop(color, None)
        else:
            self._goals[color] = tuple(goal)
        return self

    def add_arrow(self, direction: Direction, position: Position) -> PuzzleBuilder:
        self._arrows[tuple(position)] = Direction(direction)
        return self

    def build(self) -> PuzzleDefinition:
        return PuzzleDefinition(
            colors=tuple(self._blocks),
            blocks=self._blocks,
            goals=self._goals,
            arrows=self._arrows,
        )
