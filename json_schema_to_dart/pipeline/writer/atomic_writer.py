"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import CodeValidationError

# String literals and line comments, removed before counting braces
_DART_NON_CODE = re.compile(r'"""[\s\S]*?"""|\'(?:\\.|[^\'\\\n])*\'|//[^\n]*')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_dart: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_dart: Optional validation function for Dart code
        """
        self._validate_dart = validate_dart or self._default_validate_dart

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically, replacing any existing file.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            CodeValidationError: If validation fails
            OSError: If file operations fail
        """
        # Validate before touching the file system
        if validate:
            self._validate_dart(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except BaseException:
            # Clean up temp file on any error
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_dart(self, content: str) -> None:
        """Default Dart validation.

        Args:
            content: Dart code to validate

        Raises:
            CodeValidationError: If validation fails
        """
        # Basic structural checks (no full parsing)
        if "class " not in content and "enum " not in content:
            raise CodeValidationError("Generated Dart code has no type definitions")

        code = _DART_NON_CODE.sub("", content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise CodeValidationError(f"Generated Dart code has unbalanced braces: {open_braces} open, {close_braces} close")

        open_parens = code.count("(")
        close_parens = code.count(")")
        if open_parens != close_parens:
            raise CodeValidationError(f"Generated Dart code has unbalanced parentheses: {open_parens} open, {close_parens} close")
