"""Solutions to classic competitive-programming problems and supporting data structures."""

__version__ = "0.1.0"