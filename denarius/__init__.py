"""A terminal kingdom-management game with provinces, taxes and a game calendar."""

__version__ = "0.1.0"