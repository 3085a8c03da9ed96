"""
Singly Linked List Algorithms for the Linked Toolbox.

Traversal queries and in-place relinking over a chain identified by its
head node. Every operation validates its arguments before touching a link.
"""

from typing import Dict, Optional

from structures.nodes import SingleNode
from algorithms.errors import reject
from utils.logger import get_logger
from utils.chains import format_chain


def length(head: SingleNode) -> int:
    """
    Count the nodes of a singly linked list.

    Time Complexity: O(n)

    Args:
        head: First node of the list

    Returns:
        Number of nodes

    Raises:
        InvalidArgumentError: If head is None
    """
    if head is None:
        raise reject("length", "Head cannot be None.")

    size = 0
    current = head
    while current is not None:
        size += 1
        current = current.next
    return size


def find_tail(head: SingleNode) -> SingleNode:
    """
    Find the last node of a singly linked list.

    Args:
        head: First node of the list

    Returns:
        The node whose next is None

    Raises:
        InvalidArgumentError: If head is None
    """
    if head is None:
        raise reject("find_tail", "Head cannot be None.")

    current = head
    while current.next is not None:
        current = current.next
    return current


def count_occurrences(head: SingleNode) -> Dict[int, int]:
    """
    Count how many nodes carry each value.

    Args:
        head: First node of the list

    Returns:
        Dict mapping each distinct data value to its number of nodes

    Raises:
        InvalidArgumentError: If head is None
    """
    if head is None:
        raise reject("count_occurrences", "Head cannot be None.")

    counts = {}
    current = head
    while current is not None:
        counts[current.data] = counts.get(current.data, 0) + 1
        current = current.next
    return counts


def find_nth_element(head: SingleNode, n: int) -> Optional[SingleNode]:
    """
    Find the node n forward steps from head.

    Args:
        head: First node of the list
        n: 0-based index of the wanted node

    Returns:
        The nth node, or None if the list is shorter than n + 1 nodes

    Raises:
        InvalidArgumentError: If head is None or n is negative
    """
    if head is None or n < 0:
        raise reject("find_nth_element", "Head cannot be None and n cannot be negative.")

    current = head
    for _ in range(n):
        current = current.next
        if current is None:
            return None
    return current


def insert_node(node: SingleNode, new_node: SingleNode) -> None:
    """
    Splice new_node into the list immediately after node.

    Args:
        node: Node already in the list
        new_node: Node to insert

    Raises:
        InvalidArgumentError: If either node is None
    """
    if node is None or new_node is None:
        raise reject("insert_node", "Node and new_node cannot be None.")

    new_node.next = node.next
    node.next = new_node


def remove_giants(head: SingleNode) -> None:
    """
    Remove every node strictly larger than its successor, except the head.

    Single forward pass starting at the second node. When a giant is
    unlinked its successor becomes the node under evaluation, so a run of
    descending values is removed in the same pass. The tail has no successor
    and always stays.

    Example:
        5 -> 7 -> 6 -> 20 -> 4 -> 4  becomes  5 -> 6 -> 4 -> 4

    Args:
        head: First node of the list (never removed)

    Raises:
        InvalidArgumentError: If head is None
    """
    if head is None:
        raise reject("remove_giants", "Head cannot be None.")

    logger = get_logger()
    prev = head
    current = head.next
    while current is not None and current.next is not None:
        if current.data > current.next.data:
            logger.log_operation(
                "remove_giants",
                f"removed {current.data} ({current.data} > {current.next.data})"
            )
            # Unlink and evaluate the exposed successor next; prev stays put
            prev.next = current.next
            current.next = None
            current = prev.next
        else:
            prev = current
            current = current.next

    if logger.verbose:
        logger.log_operation("remove_giants", f"result {format_chain(head)}")
