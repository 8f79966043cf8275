from backend.engine.search.astar import SearchEngine, SearchNode, SearchState, astar

__all__ = ["SearchEngine", "SearchNode", "SearchState", "astar"]
