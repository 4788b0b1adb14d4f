"""
Errors raised by the generation pipeline.
"""

from __future__ import annotations

from pathlib import Path


class SchemaGenerationError(Exception):
    """Base class for errors that abort a generation run."""

    pass


class InputParseError(SchemaGenerationError):
    """Raised when the schema text is empty or is not valid JSON."""

    pass


class MissingDefinitionsError(SchemaGenerationError):
    """Raised when a well-formed document has no ``definitions`` table."""

    def __init__(self, message: str = "No definitions found in JSON schema."):
        super().__init__(message)


class FileWriteError(SchemaGenerationError):
    """Raised when a generated file cannot be written.

    Files written before the failure are kept and listed in ``written_files``.
    """

    def __init__(self, path: Path, written_files: list[Path], reason: str = ""):
        self.path = path
        self.written_files = list(written_files)
        message = f"Cannot write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CodeValidationError(SchemaGenerationError):
    """Raised when rendered Dart code fails the structural check before writing."""

    pass


class UnresolvedReferenceWarning(UserWarning):
    """A ``$ref`` points to a definition that is not in the schema."""

    pass
