"""Count the open pull requests of a GitHub repository."""

__version__ = "0.1.0"
