"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Shortest-path routing (Dijkstra)
- Name-ordered station indexes (binary search tree, sorted list)
"""
