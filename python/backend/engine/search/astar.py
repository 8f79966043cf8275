"""Generic best-first (A*-shaped) search.

The engine only sees states through the ``SearchState`` protocol and knows
nothing about the puzzle being solved.  Duplicates are detected when a
successor is *generated*: once an identity has been pushed on the frontier,
every later copy is dropped, even a cheaper one.  Returned paths are therefore
not guaranteed to be the shortest ones.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Protocol, TypeVar

logger = logging.getLogger(__name__)

Move = TypeVar("Move")
S = TypeVar("S", bound="SearchState")


class SearchState(Protocol[Move]):
    """What the engine needs from a state."""

    def successors(self) -> Iterable[tuple[Move, SearchState[Move]]]:
        """Yield ``(move, next_state)`` pairs; must be finite."""
        ...

    def is_goal(self) -> bool: ...

    def distance_to_goal(self) -> int: ...

    def cost(self) -> int: ...

    def identity(self) -> Hashable:
        """Key used for deduplication; must ignore cost and history."""
        ...


@dataclass(slots=True)
class SearchNode(Generic[S, Move]):
    """Arena entry: a state plus the link back to the state it came from."""

    state: S
    parent: int | None = None
    move: Move | None = None


class SearchEngine(Generic[S, Move]):
    """Best-first search with generation-time deduplication.

    Each call to ``solve`` starts from an empty arena; the arena, ``seen``
    set and counters of the latest run stay available for inspection.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.nodes: list[SearchNode[S, Move]] = []
        self.seen: set[Hashable] = set()
        self.expanded = 0
        self.generated = 0
        self.discarded = 0

    # -- public API -----------------------------------------------------------

    def solve(self, initial_state: S, max_moves: int) -> list[Move] | None:
        """Return the moves leading from *initial_state* to a goal, or ``None``.

        States whose cost reached *max_moves* are popped but never expanded.
        """
        self._reset()
        counter = itertools.count()
        frontier: list[tuple[int, int, int]] = []

        def push(node: SearchNode[S, Move]) -> None:
            index = len(self.nodes)
            self.nodes.append(node)
            self.seen.add(node.state.identity())
            f = node.state.cost() + node.state.distance_to_goal()
            heapq.heappush(frontier, (f, next(counter), index))

        push(SearchNode(initial_state))

        while frontier:
            _, _, index = heapq.heappop(frontier)
            state = self.nodes[index].state

            if state.is_goal():
                path = self.path_to(index)
                logger.debug(
                    "Goal reached after %d expansions (%d generated, %d duplicates): "
                    "%d moves.",
                    self.expanded, self.generated, self.discarded, len(path),
                )
                return path

            if state.cost() >= max_moves:
                continue

            self.expanded += 1
            for move, successor in state.successors():
                self.generated += 1
                if successor.identity() in self.seen:
                    self.discarded += 1
                    continue
                push(SearchNode(successor, parent=index, move=move))

        logger.debug(
            "Frontier exhausted after %d expansions (%d generated, %d duplicates).",
            self.expanded, self.generated, self.discarded,
        )
        return None

    def path_to(self, index: int) -> list[Move]:
        """Collect the moves from the root of the arena down to *index*."""
        moves: list[Move] = []
        node = self.nodes[index]
        while node.parent is not None:
            moves.append(node.move)
            node = self.nodes[node.parent]
        moves.reverse()
        return moves


def astar(initial_state: S, max_moves: int) -> list[Move] | None:
    """Run a fresh ``SearchEngine`` from *initial_state*."""
    return SearchEngine().solve(initial_state, max_moves)
