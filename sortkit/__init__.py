"""Searching and sorting algorithms with step-by-step traces, a singly linked list, and a command line."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "comparison_sorts",
    "distribution_sorts",
    "divide_sorts",
    "linked_list",
    "searching",
]