"""The 2048 sliding-tile puzzle: grid logic and a terminal game."""

__version__ = "1.0.0"
__all__ = ["__version__"]