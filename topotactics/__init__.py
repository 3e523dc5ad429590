"""A two-player networked seating-arrangement board game played on a graph."""

__version__ = "0.1.0"