"""A tile-map maze game: map loading and checks, game state, and a pygame window."""

__version__ = "1.0.0"
__all__ = ["maploader", "mapcheck", "game", "app"]