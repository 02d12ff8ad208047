"""Two-player tic-tac-toe: game rules, session state and a pygame window."""

__version__ = "0.1.0"
__all__ = ["model", "layout", "session", "app"]