"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraShortestPathSolver: Single-source shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraShortestPathSolver

__all__ = ["DijkstraShortestPathSolver"]
