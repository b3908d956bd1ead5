"""Algorithms and data structures for competitive programming: graphs, strings,
transforms, number theory, data structures and plane geometry."""

__version__ = "0.1.0"