"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (adjacency matrix, adjacency lists)
- Route finding (breadth-first search)
- Scheduling (breadth-first 2-coloring)
"""
