"""Classic algorithms on arrays, matrices, strings, linked lists, trees and graphs."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "graphs",
    "linked",
    "matrix",
    "numeric",
    "partition",
    "strings",
    "trees",
]