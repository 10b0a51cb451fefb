"""The 7 colours board game: rules, computer players, console arena and pygame interface."""

__version__ = "0.1.0"