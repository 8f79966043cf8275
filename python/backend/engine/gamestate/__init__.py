from backend.engine.gamestate.heuristics import manhattan_distance
from backend.engine.gamestate.state import BoardState

__all__ = ["BoardState", "manhattan_distance"]
