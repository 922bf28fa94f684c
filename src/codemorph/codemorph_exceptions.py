"""Custom exceptions for building screencast documents."""

from typing import Any


class CodeMorphError(Exception):
    """Base exception for document building."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DocValidationError(CodeMorphError):
    """Raised when a raw document cannot be built (e.g., it has no snapshots)."""


class TokenizationError(CodeMorphError):
    """Raised when code cannot be tokenized and the tokenizer is in strict mode."""
