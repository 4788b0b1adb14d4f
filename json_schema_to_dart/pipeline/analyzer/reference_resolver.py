"""
Reference resolver for $ref resolution.

Resolves $ref paths to definition names in the schema. Referenced bodies
are only looked up, never expanded, so cyclic schemas are safe.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..schema_ast.nodes import DefinitionNode, RefNode, SchemaDocument


@dataclass
class ResolvedRef:
    """A resolved $ref."""

    target_name: str = ""  # Definition name the pointer designates
    target_node: DefinitionNode | None = None  # None when not in the table
    is_external: bool = False  # Whether this is an external $ref

    @property
    def is_resolved(self) -> bool:
        return self.target_node is not None


class ReferenceResolver:
    """Resolves $ref to definitions of the document."""

    def __init__(self, document: SchemaDocument):
        self.document = document

    def resolve(self, ref_node: RefNode) -> ResolvedRef:
        """
        Resolve a $ref node to its target.

        Args:
            ref_node: The RefNode to resolve

        Returns:
            ResolvedRef with target information
        """
        ref_path = ref_node.ref_path

        if not ref_path.startswith("#"):
            # External schema: the class name is the last segment of the fragment
            # or of the file name
            fragment = ref_path.split("#", 1)[1] if "#" in ref_path else ref_path
            target_name = fragment.rstrip("/").split("/")[-1].removesuffix(".json")
            return ResolvedRef(target_name=target_name, is_external=True)

        # e.g., "#/definitions/Address" or "#/$defs/Address"
        parts = ref_path.split("/")
        if len(parts) >= 3 and parts[1] in ("definitions", "$defs"):
            def_name = "/".join(parts[2:])
        else:
            def_name = parts[-1]

        return ResolvedRef(
            target_name=def_name,
            target_node=self.document.definitions.get(def_name),
        )
