"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    DefinitionNode,
    EnumNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaDocument,
    SchemaNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "PrimitiveNode",
    "EnumNode",
    "RefNode",
    "ArrayNode",
    "PropertyDef",
    "DefinitionNode",
    "SchemaDocument",
    "SchemaParser",
]
