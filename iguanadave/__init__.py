"""Space Iguana Dave, a branching text adventure for the terminal."""

__version__ = "0.1.0"