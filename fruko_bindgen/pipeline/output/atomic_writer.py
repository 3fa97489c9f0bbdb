"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import FrukoBindgenError

logger = logging.getLogger(__name__)

BRACKET_PAIRS = {"{": "}", "(": ")", "[": "]"}

LINE_COMMENT_PREFIX = "//"


class OutputWriteError(FrukoBindgenError):
    """Raised when generated code fails validation before being written."""

    pass


def validate_brackets(content: str) -> None:
    """Check that braces, parentheses and square brackets are balanced.

    Line comments are skipped, they hold free text such as user supplied
    preamble lines and the source file name.

    Args:
        content: Generated code to validate

    Raises:
        OutputWriteError: If a bracket is unbalanced
    """
    closing_to_opening = {close: open_ for open_, close in BRACKET_PAIRS.items()}
    stack: list[str] = []

    for line_number, line in enumerate(content.split("\n"), start=1):
        if line.lstrip().startswith(LINE_COMMENT_PREFIX):
            continue

        for column, char in enumerate(line, start=1):
            if char in BRACKET_PAIRS:
                stack.append(char)
            elif char in closing_to_opening:
                if not stack or stack[-1] != closing_to_opening[char]:
                    raise OutputWriteError(f"Generated code has an unbalanced '{char}' at {line_number}:{column}")
                stack.pop()

    if stack:
        raise OutputWriteError(f"Generated code has {len(stack)} unclosed bracket(s), last one '{stack[-1]}'")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate: Callable[[str], None] | None = None, atomic: bool = True):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the generated code
            atomic: Whether to go through a temporary file (plain write otherwise)
        """
        self._validate = validate or validate_brackets
        self._atomic = atomic

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        if validate:
            self._validate(content)

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            path.write_text(content, encoding="utf-8")
            logger.debug("Wrote %d characters to %s", len(content), path)
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

        logger.debug("Atomically wrote %d characters to %s", len(content), path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Returns:
            True if file was written

        Raises:
            FileExistsError: If the file already exists
            OutputWriteError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
        return True
