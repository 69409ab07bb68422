"""Title-word indexing and search of movie data files, with TCP query servers and a client."""

__version__ = "0.1.0"