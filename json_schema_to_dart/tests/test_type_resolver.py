"""
Tests for reference and type resolution.
"""

import pytest

from json_schema_to_dart.pipeline import CodeGeneratorConfig, UnresolvedReferenceWarning
from json_schema_to_dart.pipeline.analyzer import ReferenceResolver, TypeKind, TypeResolver
from json_schema_to_dart.pipeline.schema_ast import ArrayNode, EnumNode, PrimitiveNode, RefNode, SchemaParser


@pytest.fixture
def document():
    return SchemaParser().parse(
        {
            "definitions": {
                "Address": {"properties": {"city": {"type": "string"}}},
                "invoice_line": {"properties": {"amount": {"type": "integer"}}},
            }
        }
    )


@pytest.fixture
def resolver(document):
    return TypeResolver(document)


class TestReferenceResolver:
    def test_local_definition(self, document):
        resolved = ReferenceResolver(document).resolve(RefNode(ref_path="#/definitions/Address"))
        assert resolved.is_resolved
        assert resolved.target_name == "Address"
        assert resolved.target_node is document.definitions["Address"]
        assert not resolved.is_external

    def test_defs_pointer(self, document):
        resolved = ReferenceResolver(document).resolve(RefNode(ref_path="#/$defs/Address"))
        assert resolved.is_resolved

    def test_missing_definition(self, document):
        resolved = ReferenceResolver(document).resolve(RefNode(ref_path="#/definitions/Card"))
        assert not resolved.is_resolved
        assert resolved.target_name == "Card"

    def test_external_reference(self, document):
        resolved = ReferenceResolver(document).resolve(RefNode(ref_path="common.json#/definitions/Address"))
        assert resolved.is_external
        assert resolved.target_name == "Address"
        assert not resolved.is_resolved

    def test_external_file_reference(self, document):
        resolved = ReferenceResolver(document).resolve(RefNode(ref_path="schemas/money.json"))
        assert resolved.target_name == "money"


class TestPrimitiveTypes:
    @pytest.mark.parametrize("type_name", ["integer", "string", "boolean", "object"])
    def test_mapped_primitives(self, resolver, type_name):
        type_ref = resolver.resolve("field", PrimitiveNode(type_name=type_name))
        assert type_ref.kind == TypeKind.PRIMITIVE
        assert type_ref.name == type_name

    @pytest.mark.parametrize("type_name", ["number", "null", None, "unknown"])
    def test_other_types_are_dynamic(self, resolver, type_name):
        type_ref = resolver.resolve("field", PrimitiveNode(type_name=type_name))
        assert type_ref.kind == TypeKind.DYNAMIC

    def test_missing_node_is_dynamic(self, resolver):
        assert resolver.resolve("field", None).kind == TypeKind.DYNAMIC


class TestReferences:
    def test_resolved_reference(self, resolver):
        type_ref = resolver.resolve("address", RefNode(ref_path="#/definitions/Address"))
        assert type_ref.kind == TypeKind.CLASS
        assert type_ref.name == "Address"
        assert type_ref.import_path == "../address/address.dart"

    def test_reference_name_is_type_cased(self, resolver):
        type_ref = resolver.resolve("line", RefNode(ref_path="#/definitions/invoice_line"))
        assert type_ref.name == "InvoiceLine"
        assert type_ref.import_path == "../invoice_line/invoice_line.dart"

    def test_unresolved_reference_warns(self, resolver):
        with pytest.warns(UnresolvedReferenceWarning, match="#/definitions/Card"):
            type_ref = resolver.resolve("card", RefNode(ref_path="#/definitions/Card", source_path="#/definitions/P/properties/card"))
        assert type_ref.kind == TypeKind.DYNAMIC
        assert type_ref.import_path == ""

    def test_external_reference_warns(self, resolver):
        with pytest.warns(UnresolvedReferenceWarning):
            type_ref = resolver.resolve("money", RefNode(ref_path="money.json"))
        assert type_ref.kind == TypeKind.DYNAMIC

    def test_custom_file_extension(self, document):
        resolver = TypeResolver(document, CodeGeneratorConfig(file_extension="g.dart"))
        type_ref = resolver.resolve("address", RefNode(ref_path="#/definitions/Address"))
        assert type_ref.import_path == "../address/address.g.dart"


class TestArrays:
    def test_array_of_references(self, resolver):
        type_ref = resolver.resolve("lines", ArrayNode(items=RefNode(ref_path="#/definitions/invoice_line")))
        assert type_ref.kind == TypeKind.ARRAY
        assert type_ref.item.kind == TypeKind.CLASS
        assert type_ref.item.name == "InvoiceLine"

    def test_array_without_items(self, resolver):
        type_ref = resolver.resolve("anything", ArrayNode())
        assert type_ref.kind == TypeKind.ARRAY
        assert type_ref.item.kind == TypeKind.DYNAMIC

    def test_nested_imports_are_walked(self, resolver):
        type_ref = resolver.resolve("grid", ArrayNode(items=ArrayNode(items=RefNode(ref_path="#/definitions/Address"))))
        assert [t.kind for t in type_ref.walk()] == [TypeKind.ARRAY, TypeKind.ARRAY, TypeKind.CLASS]


class TestEnums:
    def test_inline_enum(self, resolver):
        type_ref = resolver.resolve("user_role", EnumNode(values=["ADMIN_USER", "guest"]))
        assert type_ref.kind == TypeKind.ENUM
        assert type_ref.name == "UserRole"
        assert type_ref.import_path == "../enums/user_role.dart"

        enum_def = type_ref.enum_def
        assert enum_def.file_stem == "user_role"
        assert [(m.literal, m.name) for m in enum_def.members] == [("ADMIN_USER", "adminUser"), ("guest", "guest")]

    def test_enum_array(self, resolver):
        type_ref = resolver.resolve("permissions", EnumNode(values=["read"], is_array=True))
        assert type_ref.kind == TypeKind.ARRAY
        assert type_ref.item.kind == TypeKind.ENUM
        assert type_ref.item.name == "Permissions"

    def test_enum_member_names_are_identifiers(self, resolver):
        type_ref = resolver.resolve("code", EnumNode(values=["404", "default", "values", "a b"]))
        assert [m.name for m in type_ref.enum_def.members] == ["value404", "default_", "values_", "aB"]

    def test_enum_dir_name(self, document):
        resolver = TypeResolver(document, CodeGeneratorConfig(enums_dir_name="types"))
        type_ref = resolver.resolve("status", EnumNode(values=["on"]))
        assert type_ref.import_path == "../types/status.dart"

    @pytest.mark.parametrize("literal", ["unknown", "UNKNOWN", "Unknown"])
    def test_sentinel_name_is_not_reused(self, resolver, literal):
        type_ref = resolver.resolve("state", EnumNode(values=["active", literal]))
        assert [m.name for m in type_ref.enum_def.members] == ["active", "unknown_"]

    def test_enum_helpers_are_not_member_names(self, resolver):
        type_ref = resolver.resolve("op", EnumNode(values=["fromMap", "toString"]))
        assert [m.name for m in type_ref.enum_def.members] == ["fromMap_", "toString_"]

    def test_numeric_literals_keep_their_value(self, resolver):
        type_ref = resolver.resolve("level", EnumNode(values=[1, 2.5, True, None]))
        members = type_ref.enum_def.members
        assert [m.literal for m in members] == [1, 2.5, True, None]
        assert [m.name for m in members] == ["value1", "value25", "true_", "null_"]
