"""
Analyzer module.

Contains reference resolution, type resolution, and IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .ir_nodes import (
    ENUM_SENTINEL,
    ClassDef,
    EnumDef,
    EnumMember,
    FieldDef,
    GeneratedFile,
    ModelSource,
    TypeKind,
    TypeRef,
)
from .reference_resolver import ReferenceResolver, ResolvedRef
from .type_resolver import TypeResolver

__all__ = [
    "ClassDef",
    "FieldDef",
    "TypeRef",
    "TypeKind",
    "EnumDef",
    "EnumMember",
    "ENUM_SENTINEL",
    "GeneratedFile",
    "ModelSource",
    "ReferenceResolver",
    "ResolvedRef",
    "TypeResolver",
    "SchemaAnalyzer",
]
