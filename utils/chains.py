"""
Chain inspection helpers for the Linked Toolbox.

Builds node chains from plain values and snapshots them into numpy arrays
for assertions and debug output. The algorithms never depend on these for
correctness.
"""

import numpy as np
from typing import Iterable, Optional, Tuple, Union

from structures.nodes import SingleNode, DoubleNode


def build_single_list(values: Iterable[int]) -> Optional[SingleNode]:
    """
    Build a singly linked list.
    
    Args:
        values: Node payloads in forward order
        
    Returns:
        Head node, or None if values is empty
    """
    head = None
    tail = None
    for value in values:
        node = SingleNode(value)
        if head is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def build_double_list(values: Iterable[int]) -> Tuple[Optional[DoubleNode], Optional[DoubleNode]]:
    """
    Build a doubly linked list with consistent back references.
    
    Args:
        values: Node payloads in forward order
        
    Returns:
        Tuple of (head, tail), both None if values is empty
    """
    head = None
    tail = None
    for value in values:
        node = DoubleNode(value, prev=tail)
        if head is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head, tail


def _forward_values(head) -> list:
    values = []
    current = head
    while current is not None:
        values.append(current.data)
        current = current.next
    return values


def single_values(head: Optional[SingleNode]) -> np.ndarray:
    """Snapshot a singly linked list's payloads in forward order."""
    return np.array(_forward_values(head), dtype=int)


def double_values(head: Optional[DoubleNode]) -> np.ndarray:
    """Snapshot a doubly linked list's payloads in forward order."""
    return np.array(_forward_values(head), dtype=int)


def format_chain(head: Optional[Union[SingleNode, DoubleNode]]) -> str:
    """
    Render a chain for log output.
    
    Returns:
        "5 -> 6 -> 4", or "(empty)" for None
    """
    if head is None:
        return "(empty)"
    return " -> ".join(str(value) for value in _forward_values(head))


def assert_double_links(head: Optional[DoubleNode], context: str = "") -> None:
    """Verify back references mirror the forward chain: A.next is B implies B.prev is A.
    
    Args:
        head: First node of the list
        context: Description of when this check is being run (for error messages)
    
    Raises:
        AssertionError: If a back reference is inconsistent
    """
    if head is None:
        return

    assert head.prev is None, (
        f"Head {head.data} has a predecessor {head.prev.data} {context}"
    )

    position = 0
    current = head
    while current.next is not None:
        following = current.next
        assert following.prev is current, (
            f"Broken back reference at position {position + 1} {context}\n"
            f"  {current.data}.next is {following.data}, "
            f"but {following.data}.prev is {following.prev!r}"
        )
        current = following
        position += 1
