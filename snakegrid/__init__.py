"""Grid-based snake game with a Tk window, several maps, difficulty levels and per-map high scores."""

__version__ = "0.2.0"