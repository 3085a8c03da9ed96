"""
Logger utility for the Linked Toolbox.

Provides operation-level logging with verbosity levels. Algorithms only emit
debug lines, so nothing is printed unless the shared logger is made verbose.
"""

from typing import Optional
from datetime import datetime


class ToolboxLogger:
    """
    Logger for algorithm decisions and rejected calls.

    Format: "[DEBUG] remove_giants: removed 7 (7 > 6)"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger.

        Args:
            verbose: Enable debug output
            log_file: Optional file path for logging
        """
        self.verbose = verbose
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Toolbox Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        print(formatted)

        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_operation(self, operation: str, message: str) -> None:
        """Log a decision taken inside an operation (debug level)."""
        self.log(f"{operation}: {message}", "debug")

    def log_rejection(self, operation: str, reason: str) -> None:
        """
        Log a call rejected by an operation's guard clause.

        Args:
            operation: Name of the operation
            reason: Error message raised to the caller
        """
        self.log(f"{operation}: REJECTED ({reason})", "debug")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()


_logger = ToolboxLogger()


def get_logger() -> ToolboxLogger:
    """Return the logger shared by all algorithms."""
    return _logger


def configure_logger(verbose: bool = False, log_file: Optional[str] = None) -> ToolboxLogger:
    """
    Replace the shared logger.

    Args:
        verbose: Enable debug output
        log_file: Optional file path for logging

    Returns:
        The new shared logger
    """
    global _logger
    _logger.close()
    _logger = ToolboxLogger(verbose=verbose, log_file=log_file)
    return _logger
