"""
Tests for the schema parser (schema text to AST).
"""

import logging

import pytest

from json_schema_to_dart.pipeline.errors import InputParseError, MissingDefinitionsError
from json_schema_to_dart.pipeline.schema_ast import (
    ArrayNode,
    EnumNode,
    PrimitiveNode,
    RefNode,
    SchemaParser,
)


def _property_node(prop_schema):
    schema = {"definitions": {"Model": {"properties": {"field": prop_schema}}}}
    document = SchemaParser().parse(schema)
    return document.definitions["Model"].properties[0].type_node


class TestParseErrors:
    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty_input(self, text):
        with pytest.raises(InputParseError, match="empty"):
            SchemaParser().parse_text(text)

    def test_malformed_json(self):
        with pytest.raises(InputParseError, match="Error parsing JSON"):
            SchemaParser().parse_text('{"definitions": {')

    @pytest.mark.parametrize("text", ["{}", '{"definitions": null}', "[1, 2]", '"definitions"'])
    def test_missing_definitions(self, text):
        with pytest.raises(MissingDefinitionsError, match="No definitions found in JSON schema."):
            SchemaParser().parse_text(text)

    def test_defs_keyword_is_not_definitions(self):
        with pytest.raises(MissingDefinitionsError):
            SchemaParser().parse_text('{"$defs": {"A": {}}}')

    def test_definitions_must_be_object(self):
        with pytest.raises(InputParseError, match="must be a JSON object"):
            SchemaParser().parse_text('{"definitions": []}')

    def test_bytes_input(self):
        document = SchemaParser().parse_text('{"definitions": {"Caf\u00e9": {}}}'.encode("utf-8"))
        assert list(document.definitions) == ["Caf\u00e9"]

    def test_bytes_with_bom(self):
        document = SchemaParser().parse_text(b"\xef\xbb\xbf{\"definitions\": {}}")
        assert document.definitions == {}

    def test_invalid_utf8(self):
        with pytest.raises(InputParseError, match="Error parsing JSON"):
            SchemaParser().parse_text(b'{"definitions": {"A\xff": {}}}')


class TestDefinitions:
    def test_empty_definitions(self):
        document = SchemaParser().parse_text('{"definitions": {}}')
        assert document.definitions == {}

    def test_definition_order_is_kept(self):
        document = SchemaParser().parse({"definitions": {"B": {}, "A": {}, "C": {}}})
        assert list(document.definitions) == ["B", "A", "C"]

    def test_properties_in_order(self):
        document = SchemaParser().parse(
            {"definitions": {"User": {"properties": {"name": {"type": "string"}, "age": {"type": "integer"}}}}}
        )
        user = document.definitions["User"]
        assert [prop.name for prop in user.properties] == ["name", "age"]
        assert user.source_path == "#/definitions/User"
        assert user.properties[1].source_path == "#/definitions/User/properties/age"

    def test_definition_without_properties(self):
        document = SchemaParser().parse({"definitions": {"Empty": {"type": "object"}}})
        assert document.definitions["Empty"].properties == []

    def test_non_object_entries_are_skipped(self):
        document = SchemaParser().parse({"definitions": {"_comment": "notes", "Flag": True, "Real": {}}})
        assert list(document.definitions) == ["Real"]
        assert document.has_definition("Real")
        assert not document.has_definition("Flag")

    def test_comment_entries_are_not_reported_as_invalid(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="json_schema_to_dart.pipeline.schema_ast.parser"):
            document = SchemaParser().parse({"definitions": {"_comment_models": {"text": "notes"}, "Flag": True}})

        assert list(document.definitions) == []
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == ["Skipping definition entry 'Flag': not an object schema"]
        assert "Skipping comment entry '_comment_models'" in caplog.text


class TestPropertyNodes:
    def test_primitive(self):
        node = _property_node({"type": "string"})
        assert isinstance(node, PrimitiveNode)
        assert node.type_name == "string"

    def test_null_is_dropped_from_type_list(self):
        node = _property_node({"type": ["null", "integer"]})
        assert isinstance(node, PrimitiveNode)
        assert node.type_name == "integer"

    def test_union_type_has_no_single_type(self):
        node = _property_node({"type": ["string", "integer"]})
        assert isinstance(node, PrimitiveNode)
        assert node.type_name is None

    def test_no_type(self):
        node = _property_node({"description": "anything"})
        assert isinstance(node, PrimitiveNode)
        assert node.type_name is None

    def test_ref(self):
        node = _property_node({"$ref": "#/definitions/Address"})
        assert isinstance(node, RefNode)
        assert node.ref_path == "#/definitions/Address"

    def test_ref_wins_over_type(self):
        node = _property_node({"type": "object", "$ref": "#/definitions/Address"})
        assert isinstance(node, RefNode)

    def test_enum_wins_over_ref(self):
        node = _property_node({"$ref": "#/definitions/Kind", "enum": ["a", "b"]})
        assert isinstance(node, EnumNode)
        assert node.values == ["a", "b"]
        assert not node.is_array

    def test_enum_on_array(self):
        node = _property_node({"type": "array", "enum": ["read", "write"]})
        assert isinstance(node, EnumNode)
        assert node.is_array

    def test_enum_literals_keep_json_types(self):
        node = _property_node({"enum": [1, True, None, "x"]})
        assert node.values == [1, True, None, "x"]

    def test_array_items(self):
        node = _property_node({"type": "array", "items": {"$ref": "#/definitions/Item"}})
        assert isinstance(node, ArrayNode)
        assert isinstance(node.items, RefNode)
        assert node.items.source_path.endswith("/items")

    def test_array_without_items(self):
        node = _property_node({"type": "array"})
        assert isinstance(node, ArrayNode)
        assert node.items is None

    def test_tuple_array(self):
        node = _property_node({"type": "array", "items": [{"type": "string"}, {"type": "integer"}]})
        assert isinstance(node, ArrayNode)
        assert isinstance(node.items, PrimitiveNode)
        assert node.items.type_name is None
