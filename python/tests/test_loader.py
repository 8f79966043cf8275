"""Tests for the YAML puzzle loader and the puzzle model."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from backend.models.loader import PuzzleFormatError, load_puzzle, loads_puzzle, parse_puzzle
from backend.models.puzzle import Block, Direction, PuzzleBuilder, PuzzleDefinition


# -- happy path ---------------------------------------------------------------


def test_loads_blocks_goals_and_arrows() -> None:
    puzzle = loads_puzzle(
        textwrap.dedent(
            """
        blocks:
          - color: red
            direction: right
            position: [0, 0]
            goal: [3, 0]
          - color: blue
            direction: up
            position: [1, 2]
        arrows:
          - direction: down
            position: [2, 0]
        """
        )
    )
    assert puzzle.colors == ("red", "blue")
    assert puzzle.blocks["red"] == Block((0, 0), Direction.RIGHT)
    assert puzzle.blocks["blue"] == Block((1, 2), Direction.UP)
    assert dict(puzzle.goals) == {"red": (3, 0)}
    assert dict(puzzle.arrows) == {(2, 0): Direction.DOWN}


@pytest.mark.parametrize("raw", ["up", "UP", "Up", "uP"])
def test_direction_is_case_insensitive(raw: str) -> None:
    puzzle = parse_puzzle(
        {"blocks": [{"color": "red", "direction": raw, "position": [0, 0]}]}
    )
    assert puzzle.blocks["red"].direction is Direction.UP
    assert puzzle.blocks["red"].direction.value == "up"


def test_fields_are_optional() -> None:
    puzzle = parse_puzzle({})
    assert puzzle.colors == ()
    assert not puzzle.arrows

    puzzle = parse_puzzle({"arrows": [{"direction": "left", "position": [1, 1]}]})
    assert puzzle.colors == ()
    assert dict(puzzle.arrows) == {(1, 1): Direction.LEFT}


def test_last_color_declaration_wins() -> None:
    puzzle = parse_puzzle(
        {
            "blocks": [
                {"color": "red", "direction": "up", "position": [0, 0], "goal": [0, 5]},
                {"color": "blue", "direction": "up", "position": [1, 0]},
                {"color": "red", "direction": "left", "position": [7, 7]},
            ]
        }
    )
    assert puzzle.colors == ("red", "blue")
    assert puzzle.blocks["red"] == Block((7, 7), Direction.LEFT)
    assert puzzle.goal_of("red") is None


def test_last_arrow_wins() -> None:
    puzzle = parse_puzzle(
        {
            "arrows": [
                {"direction": "up", "position": [1, 1]},
                {"direction": "right", "position": [1, 1]},
            ]
        }
    )
    assert dict(puzzle.arrows) == {(1, 1): Direction.RIGHT}


def test_load_puzzle_from_file(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.yaml"
    path.write_text(
        "blocks:\n"
        "  - {color: red, direction: down, position: [0, 0], goal: [0, -2]}\n"
    )
    puzzle = load_puzzle(path)
    assert puzzle.goal_of("red") == (0, -2)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_puzzle(tmp_path / "missing.yaml")


# -- errors -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ({"blocks": [], "walls": []}, "Unknown field 'walls'"),
        ([1, 2], "must be a mapping"),
        (None, "must be a mapping"),
        ({"blocks": {"color": "red"}}, "must be a list"),
        ({"blocks": ["red"]}, "expected a mapping"),
        ({"blocks": [{"direction": "up", "position": [0, 0]}]}, "missing field 'color'"),
        ({"blocks": [{"color": "red", "position": [0, 0]}]}, "missing field 'direction'"),
        ({"blocks": [{"color": "red", "direction": "up"}]}, "missing field 'position'"),
        ({"blocks": [{"color": 7, "direction": "up", "position": [0, 0]}]}, "color must be a string"),
        ({"blocks": [{"color": "red", "direction": "north", "position": [0, 0]}]}, "unknown direction"),
        ({"blocks": [{"color": "red", "direction": 1, "position": [0, 0]}]}, "direction must be a string"),
        ({"blocks": [{"color": "red", "direction": "up", "position": [0]}]}, "expected [x, y]"),
        ({"blocks": [{"color": "red", "direction": "up", "position": [0, 1.5]}]}, "expected [x, y]"),
        ({"blocks": [{"color": "red", "direction": "up", "position": [True, 0]}]}, "expected [x, y]"),
        ({"blocks": [{"color": "red", "direction": "up", "position": [0, 0], "goal": "home"}]}, "blocks[0].goal"),
        ({"arrows": [{"direction": "up"}]}, "arrows[0]: missing field 'position'"),
    ],
)
def test_malformed_documents(document: object, message: str) -> None:
    with pytest.raises(PuzzleFormatError) as excinfo:
        parse_puzzle(document)
    assert message in str(excinfo.value)


def test_invalid_yaml() -> None:
    with pytest.raises(PuzzleFormatError, match="Invalid YAML"):
        loads_puzzle("blocks: [unclosed")


def test_format_error_is_a_value_error() -> None:
    assert issubclass(PuzzleFormatError, ValueError)


# -- model --------------------------------------------------------------------


def test_direction_offsets() -> None:
    assert Direction.UP.offset == (0, 1)
    assert Direction.DOWN.offset == (0, -1)
    assert Direction.LEFT.offset == (-1, 0)
    assert Direction.RIGHT.offset == (1, 0)


def test_puzzle_definition_is_read_only() -> None:
    puzzle = PuzzleBuilder().add_block("red", Direction.UP, (0, 0), goal=(0, 1)).build()
    with pytest.raises(TypeError):
        puzzle.blocks["blue"] = Block((1, 1), Direction.UP)  # type: ignore[index]
    with pytest.raises(AttributeError):
        puzzle.colors = ("blue",)  # type: ignore[misc]


def test_builder_output_is_detached() -> None:
    builder = PuzzleBuilder().add_block("red", Direction.UP, (0, 0))
    puzzle = builder.build()
    builder.add_block("blue", Direction.UP, (1, 0))
    assert puzzle.colors == ("red",)
    assert "blue" not in puzzle.blocks


def test_goal_for_undeclared_color_is_rejected() -> None:
    with pytest.raises(ValueError, match="undeclared"):
        PuzzleDefinition(
            colors=("red",),
            blocks={"red": Block((0, 0), Direction.UP)},
            goals={"blue": (1, 1)},
        )
