"""Robot cleaner grid simulation."""

__version__ = "0.1.0"
