"""Parsing, rank compression, LIS search and a ring deque for the push_swap puzzle."""

__version__ = "0.1.0"

__all__ = [
    "algorithms",
    "chars",
    "cli",
    "linkedlist",
    "memory",
    "output",
    "parsing",
    "ringdeque",
    "strings",
]