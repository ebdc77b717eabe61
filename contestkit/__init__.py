"""Solutions to classic contest problems: graphs, combinatorics, strings and sequences."""

__version__ = "0.1.0"
__all__ = ["__version__"]