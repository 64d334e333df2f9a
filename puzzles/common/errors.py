"""
Errors raised while reading puzzle descriptions.
"""

from typing import Optional


class PuzzleFormatError(ValueError):
    """Raised when a puzzle description cannot be turned into a board."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
