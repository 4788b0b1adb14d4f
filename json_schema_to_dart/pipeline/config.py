"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Definitions that are not written (references to them still resolve)
    ignore_classes: list[str] = field(default_factory=list)

    # Properties to ignore globally across all classes
    global_ignore_fields: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Shared folder for enum files, next to the model folders
    enums_dir_name: str = "enums"

    # Extension of generated files
    file_extension: str = "dart"

    # Compare and hash list/map fields by content (package:collection)
    deep_collection_equality: bool = True

    # Enum toMap() returns the original schema literal instead of the member name
    enum_wire_values: bool = False

    # Run the structural check on generated code before writing
    validate_before_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_classes": self.ignore_classes,
            "global_ignore_fields": self.global_ignore_fields,
            "add_generation_comment": self.add_generation_comment,
            "enums_dir_name": self.enums_dir_name,
            "file_extension": self.file_extension,
            "deep_collection_equality": self.deep_collection_equality,
            "enum_wire_values": self.enum_wire_values,
            "validate_before_write": self.validate_before_write,
        }
