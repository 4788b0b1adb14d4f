"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import ClassDef, EnumDef, ModelSource, TypeRef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from schema types to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Line comment marker
    COMMENT_PREFIX: str = "//"

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self._register_filters(self.jinja_env)

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def _register_filters(self, env: jinja2.Environment) -> None:
        """Add language-specific template filters."""

    @abstractmethod
    def render_class(self, class_def: ClassDef, generation_comment: str = "") -> ModelSource:
        """
        Render one model file.

        Args:
            class_def: The model definition
            generation_comment: Header comment, empty for none

        Returns:
            The rendered source with its imports
        """

    @abstractmethod
    def render_enum(self, enum_def: EnumDef, generation_comment: str = "") -> str:
        """
        Render one enum file.

        Args:
            enum_def: The enum definition
            generation_comment: Header comment, empty for none

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    def get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return self.COMMENT_PREFIX

    def _assemble(self, generation_comment: str, import_lines: list[str], body: str) -> str:
        """Join the file prefix (comment and imports) with the body."""
        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            required_imports=import_lines,
        )
        if not prefix:
            return body
        return prefix + "\n" + body
