"""
Pipeline - JSON Schema to Dart model generator.

Phases:

1. Parser: Parse JSON Schema into Schema AST
2. Analyzer: Resolve references and types, build IR
3. Backend: Render Dart source from IR through Jinja2 templates
4. Writer: Atomically write one file per model and per inline enum
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import (
    CodeValidationError,
    FileWriteError,
    InputParseError,
    MissingDefinitionsError,
    SchemaGenerationError,
    UnresolvedReferenceWarning,
)
from .generator import GenerationResult, ModelSetGenerator, generate_models
from .writer import AtomicWriter

__all__ = [
    "ModelSetGenerator",
    "GenerationResult",
    "generate_models",
    "CodeGeneratorConfig",
    "AtomicWriter",
    "SchemaGenerationError",
    "InputParseError",
    "MissingDefinitionsError",
    "FileWriteError",
    "CodeValidationError",
    "UnresolvedReferenceWarning",
]
