"""
Model set generator.

Runs the pipeline over every definition of a schema and writes one model
file per definition plus one enum file per enum-typed property:

    <output>/<definition>/<definition>.dart
    <output>/enums/<property>.dart
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer import ClassDef, GeneratedFile, ModelSource, SchemaAnalyzer
from .backends import DartBackend
from .config import CodeGeneratorConfig
from .errors import FileWriteError, SchemaGenerationError, UnresolvedReferenceWarning
from .schema_ast import DefinitionNode, SchemaDocument, SchemaParser
from .writer import AtomicWriter

log = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a generation run, as reported to the caller."""

    success: bool = True
    written_files: list[Path] = field(default_factory=list)
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


class ModelSetGenerator:
    """Generates Dart models for all definitions of a schema."""

    def __init__(self, config: CodeGeneratorConfig | None = None, writer: AtomicWriter | None = None):
        self.config = config or CodeGeneratorConfig()
        self.backend = DartBackend(self.config)
        self.writer = writer or AtomicWriter()

    def emit_class(self, definition: DefinitionNode, document: SchemaDocument) -> ModelSource:
        """Render the model for one definition, using ``document`` as the definitions table."""
        class_def = SchemaAnalyzer(document, self.config).analyze_definition(definition)
        return self.backend.render_class(class_def, self._generation_comment())

    def build(self, document: SchemaDocument) -> list[GeneratedFile]:
        """
        Render every file for the document without writing anything.

        Enum files come before the model file that imports them.

        Args:
            document: The parsed schema

        Returns:
            Generated files with paths relative to the output root
        """
        files = []
        for definition in self._definitions(document):
            files.extend(self._build_definition(definition, document))
        return files

    def generate(self, document: SchemaDocument, output_root: Path) -> list[Path]:
        """
        Generate and write the models for every definition.

        Existing files are overwritten. A write failure stops the run; files
        already written are kept.

        Args:
            document: The parsed schema
            output_root: Folder holding the model folders

        Returns:
            Written paths, in write order, without duplicates

        Raises:
            FileWriteError: If a file cannot be written
        """
        output_root = Path(output_root)
        written: list[Path] = []

        for definition in self._definitions(document):
            for generated in self._build_definition(definition, document):
                path = output_root / generated.relative_path
                try:
                    self.writer.write(path, generated.content, validate=self.config.validate_before_write)
                except OSError as e:
                    raise FileWriteError(path, written, e.strerror or str(e)) from e

                log.debug("Wrote %s", path)
                if path not in written:
                    written.append(path)

        log.info("Generated %d files into %s", len(written), output_root)
        return written

    def _definitions(self, document: SchemaDocument) -> list[DefinitionNode]:
        return [definition for name, definition in document.definitions.items() if name not in self.config.ignore_classes]

    def _build_definition(self, definition: DefinitionNode, document: SchemaDocument) -> list[GeneratedFile]:
        class_def = SchemaAnalyzer(document, self.config).analyze_definition(definition)
        comment = self._generation_comment()

        files = [
            GeneratedFile(
                relative_path=self._enum_path(enum_def.file_stem),
                content=self.backend.render_enum(enum_def, comment),
            )
            for enum_def in class_def.enums
        ]
        files.append(
            GeneratedFile(
                relative_path=self._model_path(class_def),
                content=self.backend.render_class(class_def, comment).content,
            )
        )
        return files

    def _model_path(self, class_def: ClassDef) -> PurePosixPath:
        return PurePosixPath(class_def.file_stem) / f"{class_def.file_stem}.{self.config.file_extension}"

    def _enum_path(self, file_stem: str) -> PurePosixPath:
        return PurePosixPath(self.config.enums_dir_name) / f"{file_stem}.{self.config.file_extension}"

    def _generation_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        try:
            from ..json_schema_to_dart import json_schema_to_dart as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "json_schema_to_dart"

        return f"{self.backend.get_comment_prefix()} Generated by json_schema_to_dart v{__version__} : {command_line}"


def generate_models(schema_text: str | bytes, output_dir: Path | str, config: CodeGeneratorConfig | None = None) -> GenerationResult:
    """
    Generate Dart models from schema text into ``output_dir``.

    This is the entry point for outer surfaces (CLI, editor integrations):
    errors are reported in the result instead of raised.

    Args:
        schema_text: JSON Schema document as text or UTF-8 bytes
        output_dir: Folder receiving one sub-folder per definition
        config: Code generation configuration

    Returns:
        GenerationResult with written paths, or the error that stopped the run
    """
    result = GenerationResult()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", UnresolvedReferenceWarning)
        try:
            document = SchemaParser().parse_text(schema_text)
            result.written_files = ModelSetGenerator(config).generate(document, Path(output_dir))
        except FileWriteError as e:
            result.success = False
            result.error = str(e)
            result.written_files = e.written_files
        except SchemaGenerationError as e:
            result.success = False
            result.error = str(e)

    for warning in caught:
        if issubclass(warning.category, UnresolvedReferenceWarning):
            log.warning("%s", warning.message)
            result.warnings.append(str(warning.message))
        else:
            warnings.warn_explicit(warning.message, warning.category, warning.filename, warning.lineno)

    if not result.success:
        log.error("Generation failed: %s", result.error)
    return result
