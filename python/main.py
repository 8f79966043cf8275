#!/usr/bin/env python3
"""Arrow Blocks puzzle solver.

Usage::

    python main.py puzzle.yaml                 # solve, Rich report
    python main.py puzzle.yaml -f vanilla      # plain-text report
    python main.py puzzle.yaml -m 20 -v        # 20-move budget, debug logs
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from backend.engine.gamesolver import DEFAULT_MAX_MOVES, Solver
from backend.models.loader import PuzzleFormatError, load_puzzle


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle document (YAML).",
    ),
    max_moves: int = typer.Option(
        DEFAULT_MAX_MOVES, "-m", "--max-moves",
        min=0,
        envvar="ARROW_BLOCKS_MAX_MOVES",
        help="Largest number of moves a solution may use.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to report the result.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Arrow Blocks puzzle solver."""
    _setup_logging(verbose)

    try:
        puzzle = load_puzzle(path)
    except OSError as exc:
        typer.echo(f"Error: could not read {path}: {exc}", err=True)
        raise typer.Exit(code=1)
    except PuzzleFormatError as exc:
        typer.echo(f"Error: could not parse {path}: {exc}", err=True)
        raise typer.Exit(code=1)

    moves = Solver.solve(puzzle, max_moves)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(puzzle, moves, max_moves)


if __name__ == "__main__":
    app()
