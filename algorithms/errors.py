"""
Error types for the Linked Toolbox algorithms.
"""

from utils.logger import get_logger


class InvalidArgumentError(ValueError):
    """Exception raised when an operation's precondition is violated."""
    pass


def reject(operation: str, message: str) -> InvalidArgumentError:
    """
    Log a rejected call and build the error to raise.
    
    Args:
        operation: Name of the rejecting operation
        message: Human-readable reason
        
    Returns:
        InvalidArgumentError carrying message
    """
    get_logger().log_rejection(operation, message)
    return InvalidArgumentError(message)
