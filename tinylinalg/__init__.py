"""Small dense linear algebra: vectors, matrices, pseudo-inverse solving and regression helpers."""

__version__ = "0.1.0"