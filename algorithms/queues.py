"""
Queue Algorithms for the Linked Toolbox.

In-place transforms using only front-removal and back-insertion. Auxiliary
space is a fixed number of counters; the queue is never copied.
"""

from structures.fifo_queue import FifoQueue
from algorithms.errors import reject
from utils.logger import get_logger


def triple_values(queue: FifoQueue) -> None:
    """
    Multiply every element by 3, keeping order and size.

    Each element is cycled from front to back exactly once; the loop count
    is fixed to the size before the first removal.

    Example:
        [5, 3, 2, 7]  becomes  [15, 9, 6, 21]

    Args:
        queue: Queue to modify

    Raises:
        InvalidArgumentError: If queue is None
    """
    if queue is None:
        raise reject("triple_values", "Queue cannot be None.")

    original_size = queue.size()
    for _ in range(original_size):
        queue.insert_back(queue.remove_front() * 3)

    get_logger().log_operation("triple_values", f"tripled {original_size} elements")


def rotate_queue_left(queue: FifoQueue, k: int) -> None:
    """
    Move the first k elements, in order, to the back of the queue.

    Rotating by k and by k mod size has the same effect, so only the
    remainder is cycled. An empty queue is left unchanged.

    Example:
        [1, 2, 3, 4, 5], k=2  becomes  [3, 4, 5, 1, 2]

    Args:
        queue: Queue to rotate
        k: Number of positions to rotate left

    Raises:
        InvalidArgumentError: If queue is None or k is negative
    """
    if queue is None or k < 0:
        raise reject("rotate_queue_left", "Queue cannot be None and k cannot be negative.")

    size = queue.size()
    if size == 0:
        return

    steps = k % size
    for _ in range(steps):
        queue.insert_back(queue.remove_front())

    get_logger().log_operation("rotate_queue_left", f"k={k}, size={size}, cycled {steps}")
