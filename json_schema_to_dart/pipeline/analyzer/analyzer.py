"""
Schema analyzer that transforms AST to IR.

Phase 2 of the pipeline: resolve every property type and build the
model definition ready for code generation.
"""

from __future__ import annotations

import logging
from collections import Counter

from ...utils import MODEL_MEMBER_NAMES, to_class_name, to_dart_identifier, to_directory_name, to_field_case
from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import DefinitionNode, SchemaDocument
from .ir_nodes import ENUM_SENTINEL, ClassDef, EnumDef, FieldDef, TypeKind
from .type_resolver import TypeResolver

log = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes schema AST and builds IR, one definition at a time."""

    def __init__(self, document: SchemaDocument, config: CodeGeneratorConfig | None = None):
        """
        Initialize the analyzer.

        Args:
            document: The parsed schema, used read-only as the definitions table
            config: Code generation configuration
        """
        self.document = document
        self.config = config or CodeGeneratorConfig()
        self.type_resolver = TypeResolver(document, self.config)

    def analyze_definition(self, definition: DefinitionNode) -> ClassDef:
        """
        Build the ClassDef for one definition.

        Args:
            definition: The definition to analyze

        Returns:
            ClassDef with fields, imports and owned enums
        """
        file_stem = to_directory_name(definition.name)
        own_import = f"../{file_stem}/{file_stem}.{self.config.file_extension}"
        class_def = ClassDef(
            name=to_class_name(definition.name),
            original_name=definition.name,
            file_stem=file_stem,
        )

        imports = set()
        for prop in definition.properties:
            if prop.name in self.config.global_ignore_fields:
                continue

            type_ref = self.type_resolver.resolve(prop.name, prop.type_node)
            class_def.fields.append(
                FieldDef(
                    name=to_dart_identifier(to_field_case(prop.name), "field", MODEL_MEMBER_NAMES),
                    original_name=prop.name,
                    type_ref=type_ref,
                )
            )

            for nested in type_ref.walk():
                if nested.kind == TypeKind.ENUM and nested.enum_def is not None:
                    self._check_enum_members(nested.enum_def)
                    class_def.enums.append(nested.enum_def)
                if nested.import_path and nested.import_path != own_import:
                    imports.add(nested.import_path)

        self._check_field_names(class_def)
        class_def.imports = sorted(imports)
        return class_def

    def _check_field_names(self, class_def: ClassDef) -> None:
        counts = Counter(field.name for field in class_def.fields)
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            log.warning("Class %s has properties mapping to the same field: %s", class_def.name, ", ".join(duplicates))

    def _check_enum_members(self, enum_def: EnumDef) -> None:
        counts = Counter(member.name for member in enum_def.members)
        counts[ENUM_SENTINEL] += 1
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            log.warning("Enum %s has duplicate members: %s", enum_def.name, ", ".join(duplicates))
