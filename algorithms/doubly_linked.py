"""
Doubly Linked List Algorithms for the Linked Toolbox.

Backward traversal and node removal that keeps the forward chain and the
back references consistent.
"""

from structures.nodes import DoubleNode
from algorithms.errors import reject
from utils.logger import get_logger


def find_head(tail: DoubleNode) -> DoubleNode:
    """
    Find the first node of a doubly linked list from any later node.

    Args:
        tail: Last (or any) node of the list

    Returns:
        The node whose prev is None

    Raises:
        InvalidArgumentError: If tail is None
    """
    if tail is None:
        raise reject("find_head", "Tail cannot be None.")

    current = tail
    while current.prev is not None:
        current = current.prev
    return current


def remove_node(node: DoubleNode) -> None:
    """
    Detach node from its list and relink its neighbors to each other.

    Cases:
    - Sole node (no neighbors): nothing to relink
    - Head: successor becomes the new head (its prev is cleared)
    - Tail: predecessor becomes the new tail (its next is cleared)
    - Interior: predecessor and successor are linked directly

    The caller must update any head/tail reference it held to node.

    Args:
        node: Node to remove

    Raises:
        InvalidArgumentError: If node is None
    """
    if node is None:
        raise reject("remove_node", "Node cannot be None.")

    before = node.prev
    after = node.next

    if before is None and after is None:
        get_logger().log_operation("remove_node", f"{node.data} is isolated, nothing to relink")
        return

    if before is not None:
        before.next = after
    if after is not None:
        after.prev = before

    node.prev = None
    node.next = None

    get_logger().log_operation(
        "remove_node",
        f"removed {node.data} (prev={before.data if before else None}, "
        f"next={after.data if after else None})"
    )
