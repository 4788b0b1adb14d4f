"""
Type resolver: maps a property schema to an IR type.
"""

from __future__ import annotations

import warnings

from ...utils import ENUM_MEMBER_NAMES, literal_text, to_class_name, to_dart_identifier, to_directory_name, to_enum_member_name
from ..config import CodeGeneratorConfig
from ..errors import UnresolvedReferenceWarning
from ..schema_ast.nodes import ArrayNode, EnumNode, PrimitiveNode, RefNode, SchemaDocument, SchemaNode
from .ir_nodes import ENUM_SENTINEL, EnumDef, EnumMember, TypeKind, TypeRef
from .reference_resolver import ReferenceResolver


class TypeResolver:
    """Resolves property schemas to TypeRefs.

    Inline enums come back inside the returned TypeRef (``enum_def``), so the
    caller decides what to do with them.
    """

    # Schema types with a direct target-language equivalent
    PRIMITIVE_TYPES = frozenset({"integer", "string", "boolean", "object"})

    # Enum member names taken by Dart or by the generated enum itself
    RESERVED_ENUM_MEMBERS = frozenset(ENUM_MEMBER_NAMES | {ENUM_SENTINEL})

    def __init__(self, document: SchemaDocument, config: CodeGeneratorConfig | None = None):
        self.document = document
        self.config = config or CodeGeneratorConfig()
        self.ref_resolver = ReferenceResolver(document)

    def resolve(self, property_name: str, node: SchemaNode | None) -> TypeRef:
        """
        Resolve the type of a property.

        Args:
            property_name: Name of the property (names inline enums)
            node: The parsed property schema

        Returns:
            The resolved TypeRef
        """
        if isinstance(node, EnumNode):
            enum_ref = TypeRef(
                kind=TypeKind.ENUM,
                name=to_class_name(property_name),
                enum_def=self._build_enum(property_name, node),
                import_path=self._enum_import_path(property_name),
            )
            if node.is_array:
                return TypeRef(kind=TypeKind.ARRAY, name="list", type_args=[enum_ref])
            return enum_ref

        if isinstance(node, RefNode):
            return self._resolve_ref(node)

        if isinstance(node, ArrayNode):
            item = self.resolve(property_name, node.items) if node.items is not None else TypeRef(kind=TypeKind.DYNAMIC)
            return TypeRef(kind=TypeKind.ARRAY, name="list", type_args=[item])

        if isinstance(node, PrimitiveNode) and node.type_name in self.PRIMITIVE_TYPES:
            return TypeRef(kind=TypeKind.PRIMITIVE, name=node.type_name)

        return TypeRef(kind=TypeKind.DYNAMIC)

    def _resolve_ref(self, node: RefNode) -> TypeRef:
        resolved = self.ref_resolver.resolve(node)
        if not resolved.is_resolved:
            warnings.warn(
                f"Unresolved $ref {node.ref_path!r} at {node.source_path}: field degrades to dynamic",
                UnresolvedReferenceWarning,
                stacklevel=2,
            )
            return TypeRef(kind=TypeKind.DYNAMIC)

        stem = to_directory_name(resolved.target_name)
        return TypeRef(
            kind=TypeKind.CLASS,
            name=to_class_name(resolved.target_name),
            import_path=f"../{stem}/{stem}.{self.config.file_extension}",
        )

    def _build_enum(self, property_name: str, node: EnumNode) -> EnumDef:
        members = [
            EnumMember(
                literal=literal,
                name=to_dart_identifier(to_enum_member_name(literal_text(literal)), "value", self.RESERVED_ENUM_MEMBERS),
            )
            for literal in node.values
        ]
        return EnumDef(
            name=to_class_name(property_name),
            original_name=property_name,
            file_stem=to_directory_name(property_name),
            members=members,
        )

    def _enum_import_path(self, property_name: str) -> str:
        return f"../{self.config.enums_dir_name}/{to_directory_name(property_name)}.{self.config.file_extension}"
