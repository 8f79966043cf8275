from backend.models.loader import PuzzleFormatError, load_puzzle, loads_puzzle, parse_puzzle
from backend.models.puzzle import (
    Block,
    Color,
    Direction,
    Position,
    PuzzleBuilder,
    PuzzleDefinition,
)

__all__ = [
    "Block",
    "Color",
    "Direction",
    "Position",
    "PuzzleBuilder",
    "PuzzleDefinition",
    "PuzzleFormatError",
    "load_puzzle",
    "loads_puzzle",
    "parse_puzzle",
]
