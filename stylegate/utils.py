"""
Shared utilities for the stylegate CLI.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


# =============================================================================
# Constants
# =============================================================================

PASS_MARK = "✓"
FAIL_MARK = "✗"
RULE_CHAR = "─"
RULE_WIDTH = 50


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Simple colored console writer with --no-color support."""

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "dim": "\033[2m",
    }

    def __init__(
        self,
        use_color: Optional[bool] = None,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
    ):
        self._stream = stream
        self._err_stream = err_stream
        if use_color is None:
            self._use_color = self.stream.isatty()
        else:
            self._use_color = use_color

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def set_color(self, use_color: bool) -> None:
        """Set whether to use color output."""
        self._use_color = use_color

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def _write(self, message: str) -> None:
        print(message, file=self.stream)

    def info(self, message: str = "") -> None:
        """Print a plain message."""
        self._write(message)

    def success(self, message: str) -> None:
        """Print a message prefixed with a green check mark."""
        self._write(f"{self._color(PASS_MARK, 'green')} {message}")

    def failure(self, message: str) -> None:
        """Print a message prefixed with a red cross."""
        self._write(f"{self._color(FAIL_MARK, 'red')} {message}")

    def detail(self, message: str, indent: int = 2) -> None:
        """Print an indented detail line."""
        self._write(f"{' ' * indent}{message}")

    def dim(self, message: str, indent: int = 4) -> None:
        """Print a dim/secondary indented line."""
        self._write(f"{' ' * indent}{self._color(message, 'dim')}")

    def rule(self) -> None:
        """Print a horizontal separator."""
        self._write(RULE_CHAR * RULE_WIDTH)

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"{self._color('ERROR:', 'red')} {message}", file=self.err_stream)


# Global logger instance
log = Logger()
