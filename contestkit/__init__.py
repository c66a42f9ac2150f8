"""Solutions to competitive programming tasks, as functions and commands."""

__version__ = "0.1.0"