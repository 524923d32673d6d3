"""Solutions to CSES introductory, sorting and searching, and dynamic programming problems."""

__version__ = "0.1.0"