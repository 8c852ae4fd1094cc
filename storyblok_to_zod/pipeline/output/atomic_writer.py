"""
Atomic file writer for the generated module.

Ensures that an interrupted run never leaves a half-written schema file
behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import FileOperationError, OutputValidationError

_CLOSING = {")": "(", "]": "[", "}": "{"}


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the generated text
        """
        self._validate = validate or validate_typescript

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            FileOperationError: If file operations fail
        """
        path = Path(path)
        if validate:
            self._validate(content)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise FileOperationError(f"Cannot create output directory ({e})", str(path), "write") from e

        temp_path = Path(temp_path_str)
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise FileOperationError(f"Cannot write output ({e})", str(path), "write") from e


def write_plain(path: Path, content: str) -> None:
    """Write content directly, without a temporary file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileOperationError(f"Cannot write output ({e})", str(path), "write") from e


def validate_typescript(content: str) -> None:
    """Basic structural checks on generated TypeScript.

    Raises:
        OutputValidationError: If the text is empty or its brackets do not balance
    """
    if not content.strip():
        raise OutputValidationError("Generated output is empty")

    # Comments and string literals are skipped
    stack = []
    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        if content.startswith("//", i):
            newline = content.find("\n", i)
            i = length if newline == -1 else newline
            continue
        if content.startswith("/*", i):
            end = content.find("*/", i + 2)
            i = length if end == -1 else end + 2
            continue
        if char in "'\"`":
            i += 1
            while i < length and content[i] != char:
                i += 2 if content[i] == "\\" else 1
        elif char in "([{":
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                line = content.count("\n", 0, i) + 1
                raise OutputValidationError(f"Generated output has an unmatched '{char}' on line {line}")
        i += 1

    if stack:
        raise OutputValidationError(f"Generated output has {len(stack)} unclosed bracket(s)")
