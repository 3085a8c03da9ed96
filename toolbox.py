"""
Linked Toolbox
Public entry point re-exporting every algorithm.

Self-contained operations over singly/doubly linked lists, FIFO queues,
bracket strings and score mappings. All structures are owned by the caller.
"""

from structures.nodes import SingleNode, DoubleNode
from structures.fifo_queue import FifoQueue
from algorithms.errors import InvalidArgumentError
from algorithms.singly_linked import (
    length,
    find_tail,
    count_occurrences,
    find_nth_element,
    insert_node,
    remove_giants,
)
from algorithms.doubly_linked import find_head, remove_node
from algorithms.queues import triple_values, rotate_queue_left
from algorithms.brackets import has_balanced_parentheses
from algorithms.scores import top_scorer
from utils.logger import configure_logger, get_logger


__all__ = [
    "SingleNode",
    "DoubleNode",
    "FifoQueue",
    "InvalidArgumentError",
    "length",
    "find_tail",
    "count_occurrences",
    "find_nth_element",
    "insert_node",
    "remove_giants",
    "find_head",
    "remove_node",
    "triple_values",
    "rotate_queue_left",
    "has_balanced_parentheses",
    "top_scorer",
    "configure_logger",
    "get_logger",
]
