"""Tagged-union model of an asynchronous data retrieval."""

__version__ = "0.1.0"
