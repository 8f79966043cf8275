"""Loads puzzle definitions from YAML documents.

A document looks like::

    blocks:
      - color: red
        direction: right
        position: [0, 0]
        goal: [3, 0]
      - color: blue
        direction: Up
        position: [1, 0]
    arrows:
      - direction: up
        position: [2, 0]

Both top-level fields are optional; any other top-level field is an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from backend.models.puzzle import Direction, Position, PuzzleBuilder, PuzzleDefinition

FIELDS = ("blocks", "arrows")


class PuzzleFormatError(ValueError):
    """Raised when a puzzle document is malformed."""


# -- field parsers ------------------------------------------------------------


def _parse_direction(raw: Any, where: str) -> Direction:
    if not isinstance(raw, str):
        raise PuzzleFormatError(f"{where}: direction must be a string, got {raw!r}.")
    try:
        return Direction(raw.lower())
    except ValueError:
        choices = ", ".join(d.value for d in Direction)
        raise PuzzleFormatError(
            f"{where}: unknown direction {raw!r} (expected one of {choices})."
        ) from None


def _parse_position(raw: Any, where: str) -> Position:
    if (
        not isinstance(raw, (list, tuple))
        or len(raw) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
    ):
        raise PuzzleFormatError(f"{where}: expected [x, y] integers, got {raw!r}.")
    return (raw[0], raw[1])


def _require(entry: dict, key: str, where: str) -> Any:
    if key not in entry:
        raise PuzzleFormatError(f"{where}: missing field {key!r}.")
    return entry[key]


def _entries(raw: Any, name: str) -> list[dict]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PuzzleFormatError(f"{name!r} must be a list, got {type(raw).__name__}.")
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise PuzzleFormatError(f"{name}[{i}]: expected a mapping, got {entry!r}.")
    return raw


# -- public API ---------------------------------------------------------------


def parse_puzzle(document: Any) -> PuzzleDefinition:
    """Build a ``PuzzleDefinition`` from a decoded document."""
    if not isinstance(document, dict):
        raise PuzzleFormatError(
            f"Puzzle document must be a mapping with fields {list(FIELDS)}."
        )

    builder = PuzzleBuilder()
    for key, value in document.items():
        if key == "blocks":
            for i, entry in enumerate(_entries(value, "blocks")):
                where = f"blocks[{i}]"
                color = _require(entry, "color", where)
                if not isinstance(color, str):
                    raise PuzzleFormatError(f"{where}: color must be a string, got {color!r}.")
                goal = entry.get("goal")
                builder.add_block(
                    color,
                    _parse_direction(_require(entry, "direction", where), where),
                    _parse_position(_require(entry, "position", where), where),
                    None if goal is None else _parse_position(goal, f"{where}.goal"),
                )
        elif key == "arrows":
            for i, entry in enumerate(_entries(value, "arrows")):
                where = f"arrows[{i}]"
                builder.add_arrow(
                    _parse_direction(_require(entry, "direction", where), where),
                    _parse_position(_require(entry, "position", where), where),
                )
        else:
            raise PuzzleFormatError(
                f"Unknown field {key!r}, expected one of {list(FIELDS)}."
            )
    return builder.build()


def loads_puzzle(text: str) -> PuzzleDefinition:
    """Parse a puzzle from YAML text."""
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PuzzleFormatError(f"Invalid YAML: {exc}") from exc
    return parse_puzzle(document)


def load_puzzle(path: Path | str) -> PuzzleDefinition:
    """Read and parse the puzzle stored at *path*.

    Raises ``OSError`` if the file cannot be read and ``PuzzleFormatError``
    if its content is not a valid puzzle.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle file is not UTF-8 text: {exc}") from exc
    return loads_puzzle(text)
