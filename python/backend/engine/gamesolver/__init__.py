from backend.engine.gamesolver.solver import DEFAULT_MAX_MOVES, Solver

__all__ = ["DEFAULT_MAX_MOVES", "Solver"]
