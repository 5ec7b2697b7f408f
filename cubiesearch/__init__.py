"""Cubie-level Rubik's cube model, move notation, simplification and brute-force search."""

__version__ = "0.1.0"
__all__ = ["moves", "cube", "simplify", "search"]