"""Game data catalogues, gear evaluation and fight simulation."""

__version__ = "0.1.0"