"""Classic data structures and algorithms: expressions, sorting, queues, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "adapters",
    "avl",
    "binary_tree",
    "bplus_tree",
    "btree",
    "circular_queue",
    "expressions",
    "graphs",
    "red_black",
    "sorting",
]