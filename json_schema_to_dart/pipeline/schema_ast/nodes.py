"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent the parsed structure of a JSON Schema before
any reference resolution or language-specific processing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for error messages)
    source_path: str = ""


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, boolean, object, ...)."""

    type_name: str | None = None  # None when the schema has no usable "type"


@dataclass
class EnumNode(SchemaNode):
    """Represents an inline enum."""

    # JSON scalars, as written in the schema
    values: list[Any] = field(default_factory=list)

    # The schema also declares type "array": a list of enum values
    is_array: bool = False


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str = ""  # e.g., "#/definitions/Address"


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | None = None


@dataclass
class PropertyDef(SchemaNode):
    """Represents a property of a definition."""

    name: str = ""
    type_node: SchemaNode | None = None


@dataclass
class DefinitionNode(SchemaNode):
    """Represents an entry of the definitions table."""

    name: str = ""
    properties: list[PropertyDef] = field(default_factory=list)


@dataclass
class SchemaDocument:
    """Root of the parsed schema AST."""

    # Definition name -> node, in schema order
    definitions: dict[str, DefinitionNode] = field(default_factory=dict)

    # Raw schema for reference
    raw_schema: dict[str, Any] = field(default_factory=dict)

    def has_definition(self, name: str) -> bool:
        return name in self.definitions
