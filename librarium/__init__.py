"""Library management: books indexed by title and publication year, with lending and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]