"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed and resolved schema, ready for
code generation. All references are resolved and types are determined.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

ENUM_SENTINEL = "unknown"


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # int, String, bool, Map<String, dynamic>
    CLASS = "class"  # A generated model
    ARRAY = "array"  # List<T>
    ENUM = "enum"  # A generated enum
    DYNAMIC = "dynamic"  # Untyped


@dataclass
class EnumMember:
    """One enum member and the schema literal it decodes from."""

    literal: Any = ""  # JSON scalar from the schema
    name: str = ""


@dataclass
class EnumDef:
    """An enum definition, owned by the property that declared it."""

    name: str = ""
    original_name: str = ""  # Property name
    file_stem: str = ""
    members: list[EnumMember] = field(default_factory=list)


@dataclass
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.DYNAMIC
    name: str = ""  # Schema type for primitives, class/enum name otherwise

    # For ARRAY: the element type
    type_args: list[TypeRef] = field(default_factory=list)

    # For ENUM
    enum_def: EnumDef | None = None

    # For CLASS and ENUM: import path relative to the model folder
    import_path: str = ""

    @property
    def item(self) -> TypeRef | None:
        return self.type_args[0] if self.type_args else None

    @property
    def is_convertible(self) -> bool:
        """Whether values go through fromMap/toMap."""
        return self.kind in (TypeKind.CLASS, TypeKind.ENUM)

    def walk(self) -> Iterator[TypeRef]:
        """Yield this type and every nested type argument."""
        yield self
        for arg in self.type_args:
            yield from arg.walk()


@dataclass
class FieldDef:
    """A field definition in a class."""

    name: str = ""
    original_name: str = ""  # Original JSON property name
    type_ref: TypeRef | None = None
    is_nullable: bool = True


@dataclass
class ClassDef:
    """A model definition."""

    name: str = ""
    original_name: str = ""  # Original definition key
    file_stem: str = ""
    fields: list[FieldDef] = field(default_factory=list)

    # Import paths of referenced models and owned enums, sorted
    imports: list[str] = field(default_factory=list)

    # Enums declared inline by this class's properties, in property order
    enums: list[EnumDef] = field(default_factory=list)


@dataclass
class ModelSource:
    """Rendered model together with what it depends on."""

    content: str = ""
    imports: list[str] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)


@dataclass
class GeneratedFile:
    """A rendered file, relative to the output root."""

    relative_path: PurePosixPath = field(default_factory=PurePosixPath)
    content: str = ""
