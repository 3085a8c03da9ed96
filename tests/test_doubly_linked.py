"""
Doubly Linked List Tests

Tests find_head and every remove_node case, checking back references after
each mutation.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np

from structures.nodes import DoubleNode
from algorithms.doubly_linked import find_head, remove_node
from utils.chains import build_double_list, double_values, assert_double_links


def test_find_head():
    """Test find_head walks back references to the first node."""
    print("\n" + "="*60)
    print("TEST 1: find_head")
    print("="*60)

    head, tail = build_double_list([1, 2, 3, 4])
    assert find_head(tail) is head, "Should reach the head from the tail"
    assert find_head(tail.prev) is head, "Should reach the head from an interior node"
    assert find_head(head) is head, "Head is its own head"

    lone = DoubleNode(7)
    assert find_head(lone) is lone
    print("  ✓ Head found")


def test_remove_interior_node():
    """Test removing the middle of three nodes links first and third both ways."""
    print("\n" + "="*60)
    print("TEST 2: remove_node (interior)")
    print("="*60)

    head, tail = build_double_list([1, 2, 3])
    middle = head.next

    remove_node(middle)
    print(f"  List after removal: {double_values(head)}")
    assert head.next is tail, "First should link forward to third"
    assert tail.prev is head, "Third should link back to first"
    assert middle.is_isolated(), "Removed node should have no links"
    assert_double_links(head, "after interior removal")
    print("  ✓ Interior removal correct")


def test_remove_head_node():
    """Test removing the head makes its successor the new head."""
    print("\n" + "="*60)
    print("TEST 3: remove_node (head)")
    print("="*60)

    head, tail = build_double_list([1, 2, 3])
    new_head = head.next

    remove_node(head)
    assert head.is_isolated(), "Old head should be detached"
    assert new_head.prev is None, "Successor should become the head"
    assert find_head(tail) is new_head
    assert np.array_equal(double_values(new_head), [2, 3])
    assert_double_links(new_head, "after head removal")
    print("  ✓ Head removal correct")


def test_remove_tail_node():
    """Test removing the tail makes its predecessor the new tail."""
    print("\n" + "="*60)
    print("TEST 4: remove_node (tail)")
    print("="*60)

    head, tail = build_double_list([1, 2, 3])
    new_tail = tail.prev

    remove_node(tail)
    assert tail.is_isolated(), "Old tail should be detached"
    assert new_tail.next is None, "Predecessor should become the tail"
    assert np.array_equal(double_values(head), [1, 2])
    assert_double_links(head, "after tail removal")
    print("  ✓ Tail removal correct")


def test_remove_sole_node():
    """Test removing the only node leaves it isolated."""
    lone = DoubleNode(5)
    remove_node(lone)
    assert lone.is_isolated(), "Sole node stays isolated"
    assert lone.data == 5


def test_remove_until_empty():
    """Test repeatedly removing the head drains the list consistently."""
    head, tail = build_double_list([1, 2, 3, 4, 5])
    remaining = [1, 2, 3, 4, 5]

    while head is not tail:
        following = head.next
        remove_node(head)
        head = following
        remaining.pop(0)
        assert np.array_equal(double_values(head), remaining)
        assert_double_links(head, f"with {len(remaining)} remaining")

    remove_node(head)
    assert head.is_isolated()


def test_link_check_detects_broken_back_reference():
    """Test assert_double_links reports an inconsistent prev link."""
    head, tail = build_double_list([1, 2, 3])
    tail.prev = head

    try:
        assert_double_links(head, "on purpose")
        assert False, "Should have detected the broken back reference"
    except AssertionError as e:
        assert "Broken back reference" in str(e)
        print(f"  ✓ Correctly detected: {str(e).splitlines()[0]}")


def main():
    """Run all doubly linked list tests."""
    print("\n" + "="*70)
    print(" "*15 + "DOUBLY LINKED LIST TESTS")
    print("="*70)

    try:
        test_find_head()
        test_remove_interior_node()
        test_remove_head_node()
        test_remove_tail_node()
        test_remove_sole_node()
        test_remove_until_empty()
        test_link_check_detects_broken_back_reference()

        print("\n✅ ALL DOUBLY LINKED LIST TESTS PASSED\n")
        return 0

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
