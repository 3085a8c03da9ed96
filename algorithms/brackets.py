"""
Bracket Balance Validator for the Linked Toolbox.

Stack-based check over three bracket kinds: (), [] and {}.
"""

from algorithms.errors import reject
from utils.logger import get_logger


CLOSER_FOR = {
    '(': ')',
    '[': ']',
    '{': '}',
}


def has_balanced_parentheses(text: str) -> bool:
    """
    Check whether every opener is closed by the matching closer, correctly nested.

    Algorithm:
    1. An empty string is balanced
    2. A string that does not start with an opener is rejected immediately
    3. Each opener pushes its closer on the stack
    4. Any other character must equal the closer on top of the stack
    5. Balanced iff the stack is empty after the scan

    Characters other than brackets count as closers and therefore unbalance
    the string.

    Example:
    - "(()())" -> True
    - "(()"    -> False
    - "([)]"   -> False

    Args:
        text: String to check

    Returns:
        True if the brackets are balanced

    Raises:
        InvalidArgumentError: If text is None
    """
    if text is None:
        raise reject("has_balanced_parentheses", "Input string cannot be None.")

    if text == "":
        return True

    logger = get_logger()

    if text[0] not in CLOSER_FOR:
        logger.log_operation("has_balanced_parentheses", f"{text[0]!r} cannot open the string")
        return False

    expected = []
    for position, symbol in enumerate(text):
        if symbol in CLOSER_FOR:
            expected.append(CLOSER_FOR[symbol])
            continue

        # stray closer
        if not expected:
            logger.log_operation("has_balanced_parentheses", f"stray {symbol!r} at {position}")
            return False

        if expected.pop() != symbol:
            logger.log_operation("has_balanced_parentheses", f"mismatched {symbol!r} at {position}")
            return False

    return not expected
