"""Rich terminal frontend — tables, colours, and panels.

Shows the starting board, the move list, and the board reached by replaying
the moves through the game engine.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import BoardState
from backend.models.puzzle import Color, Direction, PuzzleDefinition

console = Console()

# Boards wider or taller than this are summarised instead of drawn.
MAX_RENDER_SPAN = 24

_ARROW_GLYPHS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _bounds(state: BoardState) -> tuple[int, int, int, int]:
    puzzle = state.puzzle
    cells = [b.position for b in state.blocks.values()]
    cells += list(puzzle.goals.values())
    cells += list(puzzle.arrows)
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return min(xs), max(xs), min(ys), max(ys)


def _label(color: Color, width: int) -> str:
    return escape(color[:width].ljust(width))


def _render_board(state: BoardState) -> Table | Text:
    """Return a Rich Table of the grid; ``y`` grows upwards."""
    if not state.blocks:
        return Text("(empty board)", style="dim")

    min_x, max_x, min_y, max_y = _bounds(state)
    if max_x - min_x >= MAX_RENDER_SPAN or max_y - min_y >= MAX_RENDER_SPAN:
        return Text("(board too large to draw)", style="dim")

    puzzle = state.puzzle
    width = max(len(c) for c in puzzle.colors)
    width = min(max(width, 1), 6)
    occupants = {b.position: c for c, b in state.blocks.items()}
    goal_cells = {pos: c for c, pos in puzzle.goals.items()}

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(min_x, max_x + 1):
        table.add_column(width=width + 2, justify="center")

    for y in range(max_y, min_y - 1, -1):
        cells: list[str] = []
        for x in range(min_x, max_x + 1):
            pos = (x, y)
            color = occupants.get(pos)
            if color is not None:
                text = color[:width].ljust(width) + _ARROW_GLYPHS[state.blocks[color].direction]
                style = "bold green" if puzzle.goal_of(color) == pos else "bold white"
                cells.append(f"[{style}]{escape(text)}[/{style}]")
            elif pos in goal_cells:
                cells.append(f"[dim green]{_label(goal_cells[pos], width)}[/dim green]")
            elif pos in puzzle.arrows:
                cells.append(f"[yellow]{_ARROW_GLYPHS[puzzle.arrows[pos]]}[/yellow]")
            else:
                cells.append("[dim]·[/dim]")
        table.add_row(*cells)

    return table


def _render_moves(moves: list[Color]) -> Table:
    table = Table(box=rich.box.SIMPLE, border_style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Block", style="bold")
    for i, color in enumerate(moves, 1):
        table.add_row(str(i), Text(color))
    return table


# -- public entry point -------------------------------------------------------


def run(puzzle: PuzzleDefinition, moves: list[Color] | None, max_moves: int) -> None:
    """Report the solver outcome for *puzzle*."""
    start = BoardState.initial(puzzle)

    if moves is None:
        body = Group(
            Align.center(_render_board(start)),
            Text(""),
            Align.center(Text(f"No solution found within {max_moves} moves", style="bold red")),
        )
        console.print(Panel(body, title="[bold]A R R O W   B L O C K S[/bold]", border_style="red"))
        return

    game = GamePlay(puzzle)
    game.play(moves)

    summary = Text()
    summary.append("Solution found with ", style="dim")
    summary.append(str(len(moves)), style="bold yellow")
    summary.append(" moves", style="dim")

    body = Group(
        Align.center(Text("Start", style="bold cyan")),
        Align.center(_render_board(start)),
        Align.center(
            _render_moves(moves) if moves else Text("Already solved!", style="green")
        ),
        Align.center(Text("Finish", style="bold cyan")),
        Align.center(_render_board(game.state)),
        Text(""),
        Align.center(summary),
    )
    console.print(
        Panel(
            body,
            title="[bold]A R R O W   B L O C K S[/bold]",
            border_style="bright_blue" if game.is_won else "red",
            padding=(1, 2),
        )
    )
