"""The fifteen sliding-tile puzzle for the terminal."""

__version__ = "0.1.0"
__all__ = ["game", "keys", "moves", "randomizer", "terminal"]