"""wordler: a Wordle puzzle oracle and solver."""

__version__ = "0.1.0"
