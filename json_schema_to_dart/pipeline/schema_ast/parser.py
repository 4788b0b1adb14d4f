"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: Parse JSON Schema into an AST without
resolving references or doing language-specific processing.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..errors import InputParseError, MissingDefinitionsError
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

log = logging.getLogger(__name__)


class SchemaParser:
    """Parses JSON Schema into an AST."""

    def parse_text(self, text: str | bytes) -> SchemaDocument:
        """
        Parse schema text into an AST.

        Args:
            text: The raw JSON text, or its UTF-8 bytes

        Returns:
            SchemaDocument with parsed definitions

        Raises:
            InputParseError: If the text is empty, not UTF-8 or not valid JSON
            MissingDefinitionsError: If the document has no definitions table
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise InputParseError(f"Error parsing JSON: {e}") from e

        if not text or not text.strip():
            raise InputParseError("Schema input is empty")

        try:
            schema = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputParseError(f"Error parsing JSON: {e}") from e

        return self.parse(schema)

    def parse(self, schema: Any) -> SchemaDocument:
        """
        Parse a decoded JSON Schema into an AST.

        Args:
            schema: The decoded JSON document

        Returns:
            SchemaDocument with parsed definitions
        """
        if not isinstance(schema, dict) or schema.get("definitions") is None:
            raise MissingDefinitionsError()

        definitions = schema["definitions"]
        if not isinstance(definitions, dict):
            raise InputParseError("'definitions' must be a JSON object")

        document = SchemaDocument(raw_schema=schema)
        for name, def_schema in definitions.items():
            if name.startswith("_comment"):
                log.debug("Skipping comment entry %r", name)
                continue
            if not isinstance(def_schema, dict):
                log.warning("Skipping definition entry %r: not an object schema", name)
                continue

            document.definitions[name] = self._parse_definition(name, def_schema)

        return document

    def _parse_definition(self, name: str, schema: dict[str, Any]) -> DefinitionNode:
        path = f"#/definitions/{name}"
        properties = []

        raw_properties = schema.get("properties")
        if not isinstance(raw_properties, dict):
            raw_properties = {}
        for prop_name, prop_schema in raw_properties.items():
            prop_path = f"{path}/properties/{prop_name}"
            properties.append(
                PropertyDef(
                    name=prop_name,
                    type_node=self._parse_schema_node(prop_schema, prop_path),
                    source_path=prop_path,
                )
            )

        return DefinitionNode(name=name, properties=properties, source_path=path)

    def _parse_schema_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a property schema.

        Precedence: enum, then $ref, then type.

        Args:
            schema: The schema dictionary
            path: Current path in schema (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict):
            return PrimitiveNode(source_path=path)

        types = self._declared_types(schema)

        if isinstance(schema.get("enum"), list):
            return EnumNode(
                values=list(schema["enum"]),
                is_array="array" in types,
                source_path=path,
            )

        if isinstance(schema.get("$ref"), str):
            return RefNode(ref_path=schema["$ref"], source_path=path)

        if "array" in types:
            items_schema = schema.get("items")
            items = None
            if isinstance(items_schema, dict):
                items = self._parse_schema_node(items_schema, f"{path}/items")
            elif isinstance(items_schema, list):
                # Tuple arrays have no single element type
                items = PrimitiveNode(source_path=f"{path}/items")
            return ArrayNode(items=items, source_path=path)

        type_name = types[0] if len(types) == 1 else None
        return PrimitiveNode(type_name=type_name, source_path=path)

    def _declared_types(self, schema: dict[str, Any]) -> list[str]:
        """Return the declared types, without "null"."""
        type_value = schema.get("type")
        if isinstance(type_value, str):
            type_value = [type_value]
        if not isinstance(type_value, list):
            return []
        return [t for t in type_value if isinstance(t, str) and t != "null"]
