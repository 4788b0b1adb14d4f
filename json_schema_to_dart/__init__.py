"""JSON Schema to Dart Generator

A Python package for generating Dart data models from JSON Schema
definitions: one model class per definition, one enum per inline enum.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .pipeline import (
    CodeGeneratorConfig,
    FileWriteError,
    GenerationResult,
    InputParseError,
    MissingDefinitionsError,
    ModelSetGenerator,
    SchemaGenerationError,
    UnresolvedReferenceWarning,
    generate_models,
)

__all__ = [
    "generate_models",
    "GenerationResult",
    "ModelSetGenerator",
    "CodeGeneratorConfig",
    "SchemaGenerationError",
    "InputParseError",
    "MissingDefinitionsError",
    "FileWriteError",
    "UnresolvedReferenceWarning",
]
