"""Contest algorithms: multiplicative functions, number theory, search, offline range queries and string structures."""

__version__ = "0.1.0"