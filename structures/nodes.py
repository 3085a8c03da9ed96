"""
Node models for the Linked Toolbox.

Represents the links of singly and doubly linked lists. A list is identified
only by a reference to its head (or tail) node, owned by the caller.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class SingleNode:
    """
    A node in a singly linked list.
    
    Attributes:
        data: Integer payload
        next: Owning link to the following node (None at the tail)
    """
    data: int
    next: Optional["SingleNode"] = None

    def __repr__(self) -> str:
        """String representation for debugging (does not follow the chain)."""
        following = self.next.data if self.next is not None else None
        return f"SingleNode(data={self.data}, next={following})"


@dataclass(eq=False)
class DoubleNode:
    """
    A node in a doubly linked list.
    
    Attributes:
        data: Integer payload
        next: Owning link to the following node (None at the tail)
        prev: Back reference to the preceding node (None at the head)
        
    Invariant:
        For adjacent nodes A and B: A.next is B and B.prev is A
    """
    data: int
    next: Optional["DoubleNode"] = None
    prev: Optional["DoubleNode"] = None

    def is_isolated(self) -> bool:
        """True when the node has neither neighbor."""
        return self.prev is None and self.next is None

    def __repr__(self) -> str:
        """String representation for debugging (does not follow the chain)."""
        before = self.prev.data if self.prev is not None else None
        after = self.next.data if self.next is not None else None
        return f"DoubleNode(data={self.data}, prev={before}, next={after})"
