"""
Dart code generation backend.

Generates Dart model classes and enums from IR.
"""

from __future__ import annotations

from typing import Any

import jinja2

from ...utils import dart_literal, dart_string
from ..analyzer.ir_nodes import ENUM_SENTINEL, ClassDef, EnumDef, FieldDef, ModelSource, TypeKind, TypeRef
from .base import CodeBackend

DART_CONVERT_IMPORT = "dart:convert"
COLLECTION_IMPORT = "package:collection/collection.dart"


class DartBackend(CodeBackend):
    """Dart code generation backend."""

    TEMPLATE_LANG = "dart"
    FILE_EXTENSION = "dart"

    TYPE_MAP = {
        "integer": "int",
        "string": "String",
        "boolean": "bool",
        "object": "Map<String, dynamic>",
    }

    def _register_filters(self, env: jinja2.Environment) -> None:
        env.filters["dart_string"] = dart_string
        env.filters["dart_literal"] = dart_literal

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Dart type string."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            return self.TYPE_MAP.get(type_ref.name, "dynamic")

        if type_ref.kind in (TypeKind.CLASS, TypeKind.ENUM):
            return type_ref.name

        if type_ref.kind == TypeKind.ARRAY:
            item = type_ref.item
            item_type = self.translate_type(item) if item is not None else "dynamic"
            return f"List<{item_type}>"

        return "dynamic"

    def field_type(self, field: FieldDef) -> str:
        """Field type with its nullability marker (dynamic is already nullable)."""
        type_str = self.translate_type(field.type_ref)
        if field.is_nullable and type_str != "dynamic":
            return f"{type_str}?"
        return type_str

    def render_class(self, class_def: ClassDef, generation_comment: str = "") -> ModelSource:
        """Render a model class with its imports."""
        fields = [self._prepare_field_context(field) for field in class_def.fields]
        uses_collection = any(field["deep"] for field in fields)

        imports = [DART_CONVERT_IMPORT]
        import_lines = [f"import '{DART_CONVERT_IMPORT}';"]
        if uses_collection:
            imports.append(COLLECTION_IMPORT)
            import_lines.extend(["", f"import '{COLLECTION_IMPORT}';"])
        if class_def.imports:
            imports.extend(class_def.imports)
            import_lines.append("")
            import_lines.extend(f"import '{path}';" for path in class_def.imports)

        body = self.class_template.render(
            CLASS_NAME=class_def.name,
            fields=fields,
            HASH_EXPRESSION=" ^\n        ".join(field["hash"] for field in fields) or "runtimeType.hashCode",
        )
        return ModelSource(
            content=self._assemble(generation_comment, import_lines, body),
            imports=imports,
            enums=list(class_def.enums),
        )

    def render_enum(self, enum_def: EnumDef, generation_comment: str = "") -> str:
        """Render a self-contained enum with toMap/fromMap."""
        wire_values = self.config.enum_wire_values
        # Non-string literals on the wire make toMap return them unquoted
        all_strings = all(isinstance(member.literal, str) for member in enum_def.members)
        body = self.enum_template.render(
            ENUM_NAME=enum_def.name,
            members=enum_def.members,
            SENTINEL=ENUM_SENTINEL,
            WIRE_VALUES=wire_values,
            TO_MAP_TYPE="String" if all_strings or not wire_values else "dynamic",
        )
        return self._assemble(generation_comment, [], body)

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            field: The field definition

        Returns:
            Dictionary of template variables
        """
        type_ref = field.type_ref
        name = field.name
        key = dart_string(field.original_name)
        deep = self.config.deep_collection_equality and self._is_collection(type_ref)

        to_map = self._to_map_expression(type_ref, f"{name}!")
        if to_map == f"{name}!":
            to_map = name

        if deep:
            equality = f"const DeepCollectionEquality().equals(other.{name}, {name})"
            hash_expr = f"const DeepCollectionEquality().hash({name})"
        else:
            equality = f"other.{name} == {name}"
            hash_expr = f"{name}.hashCode"

        return {
            "name": name,
            "key": key,
            "type": self.field_type(field),
            "from_map": self._from_map_expression(type_ref, f"json[{key}]", nullable=field.is_nullable),
            "to_map": to_map,
            "equality": equality,
            "hash": hash_expr,
            "deep": deep,
        }

    def _is_collection(self, type_ref: TypeRef) -> bool:
        return type_ref.kind == TypeKind.ARRAY or (type_ref.kind == TypeKind.PRIMITIVE and type_ref.name == "object")

    def _is_raw(self, type_ref: TypeRef | None) -> bool:
        return type_ref is None or type_ref.kind in (TypeKind.PRIMITIVE, TypeKind.DYNAMIC)

    def _from_map_expression(self, type_ref: TypeRef, source: str, nullable: bool) -> str:
        """Dart expression decoding ``source`` into a value of ``type_ref``."""
        if type_ref.kind == TypeKind.ARRAY:
            item = type_ref.item
            if self._is_raw(item):
                expr = f"{self.translate_type(type_ref)}.from({source})"
                return f"{source} == null ? null : {expr}" if nullable else expr
            inner = self._from_map_expression(item, "item", nullable=False)
            q = "?" if nullable else ""
            return f"({source} as List{q}){q}.map((item) => {inner}).toList()"

        if type_ref.is_convertible:
            expr = f"{type_ref.name}.fromMap({source})"
            return f"{source} == null ? null : {expr}" if nullable else expr

        return source

    def _to_map_expression(self, type_ref: TypeRef, value: str) -> str:
        """Dart expression encoding ``value`` for the map representation."""
        if type_ref.kind == TypeKind.ARRAY:
            item = type_ref.item
            if self._is_raw(item):
                return value
            return f"{value}.map((item) => {self._to_map_expression(item, 'item')}).toList()"

        if type_ref.is_convertible:
            return f"{value}.toMap()"

        return value
