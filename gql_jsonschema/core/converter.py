"""Convert GraphQL AST definitions into JSON Schema draft-06 documents.

Example usage:
    from graphql import parse
    from gql_jsonschema.core import SchemaConverter, SchemaLayout

    converter = SchemaConverter()
    result = converter.convert_document(parse("mutation A { b }"))
    result.schema
    # {"$schema": "http://json-schema.org/draft-06/schema#",
    #  "definitions": {"A": {...}}}

    for diagnostic in result.diagnostics:
        print(diagnostic)
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from graphql import (
    DefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    OperationDefinitionNode,
)

from .context import DRAFT_06_SCHEMA, BuildContext, ConverterConfig, SchemaLayout
from .diagnostics import Diagnostic, DiagnosticKind
from .errors import UnsupportedDefinitionError
from .object_types import build_enum_entry, build_object_type_entry
from .operations import build_operation_entry

logger = logging.getLogger(__name__)

FIELDED_TYPE_DEFINITIONS = (
    ObjectTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
)
MODELLED_DEFINITIONS = (
    OperationDefinitionNode,
    *FIELDED_TYPE_DEFINITIONS,
    EnumTypeDefinitionNode,
)


@dataclass
class ConversionResult:
    """A generated schema document and what was skipped to produce it."""
    schema: dict[str, Any]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True if nothing in the input was skipped."""
        return not self.diagnostics

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the schema document."""
        return json.dumps(self.schema, indent=indent, allow_nan=False)


class SchemaConverter:
    """Converts operation and type definitions to JSON Schema.

    The converter only holds configuration. All build state lives in a
    BuildContext created per call, so one converter can be shared.
    """

    def __init__(self, config: ConverterConfig | None = None):
        self.config = config or ConverterConfig()

    @property
    def layout(self) -> SchemaLayout:
        return self.config.layout

    def convert(self, node: DefinitionNode) -> ConversionResult:
        """Convert a single top-level definition.

        Raises:
            AnonymousOperationError: If node is an unnamed operation
            UnsupportedDefinitionError: If node is of a kind that is not modelled
        """
        ctx = BuildContext(config=self.config)
        container, name, entry = self._build_entry(node, ctx)
        if container is None:
            raise UnsupportedDefinitionError(
                f"Cannot convert definition of kind {node.kind!r}", node_kind=node.kind
            )

        document = self._new_document()
        document.setdefault(container, {})[name] = entry
        return ConversionResult(schema=document, diagnostics=list(ctx.diagnostics))

    def convert_document(self, document: DocumentNode) -> ConversionResult:
        """Convert every supported definition of a document into one schema.

        Unsupported definitions are skipped with a diagnostic. If two
        definitions share a name, the first one wins.
        """
        ctx = BuildContext(config=self.config)
        output = self._new_document()

        for node in document.definitions:
            if not isinstance(node, MODELLED_DEFINITIONS):
                ctx.diagnostics.report(
                    DiagnosticKind.UNSUPPORTED_DEFINITION,
                    f"definition of kind {node.kind!r} was skipped",
                    _definition_path(node),
                )
                continue

            # Checked before building so a skipped duplicate reports nothing else
            name = _definition_name(node)
            if name is not None and self._is_taken(output, name):
                ctx.diagnostics.report(
                    DiagnosticKind.DUPLICATE_DEFINITION,
                    f"duplicate definition {name!r} was skipped",
                    (name,),
                )
                continue

            container, name, entry = self._build_entry(node, ctx)
            output.setdefault(container, {})[name] = entry

        logger.debug(
            "Converted %d definitions with %d diagnostics",
            len(document.definitions),
            len(ctx.diagnostics),
        )
        return ConversionResult(schema=output, diagnostics=list(ctx.diagnostics))

    def _new_document(self) -> dict[str, Any]:
        return {"$schema": DRAFT_06_SCHEMA, self.layout.container: {}}

    def _build_entry(
        self, node: DefinitionNode, ctx: BuildContext
    ) -> tuple[str | None, str | None, dict[str, Any] | None]:
        """Dispatch on node kind; returns (container, name, entry).

        container is None for kinds that are not modelled.
        """
        if isinstance(node, OperationDefinitionNode):
            name, entry = build_operation_entry(node, ctx)
            return self.layout.container, name, entry
        if isinstance(node, FIELDED_TYPE_DEFINITIONS):
            # Type references always point into "definitions"
            name, entry = build_object_type_entry(node, ctx)
            return "definitions", name, entry
        if isinstance(node, EnumTypeDefinitionNode):
            name, entry = build_enum_entry(node, ctx)
            return "definitions", name, entry
        return None, None, None

    @staticmethod
    def _is_taken(output: dict[str, Any], name: str) -> bool:
        """Check whether a name is already used by an operation or a type."""
        return name in output.get("definitions", {}) or name in output.get("properties", {})


def _definition_name(node: DefinitionNode) -> str | None:
    name = getattr(node, "name", None)
    return name.value if name is not None else None


def _definition_path(node: DefinitionNode) -> tuple[str, ...]:
    name = _definition_name(node)
    return (name,) if name is not None else ()


def convert_definition(
    node: DefinitionNode,
    layout: SchemaLayout = SchemaLayout.DEFINITIONS,
) -> ConversionResult:
    """Convert one definition with a default configuration."""
    return SchemaConverter(ConverterConfig(layout=layout)).convert(node)


def convert_document(
    document: DocumentNode,
    layout: SchemaLayout = SchemaLayout.DEFINITIONS,
) -> ConversionResult:
    """Convert a whole document with a default configuration."""
    return SchemaConverter(ConverterConfig(layout=layout)).convert_document(document)
