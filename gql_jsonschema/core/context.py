"""Configuration and per-call build state for schema conversion."""

from dataclasses import dataclass, field
from enum import Enum

from .diagnostics import DiagnosticCollector
from .scalars import ScalarRegistry

DRAFT_06_SCHEMA = "http://json-schema.org/draft-06/schema#"


class SchemaLayout(Enum):
    """Where operation entries are nested in the output document.

    The layout is fixed per converter: it decides both the top-level map
    that holds operation entries and the prefix of every argument $ref.
    """
    DEFINITIONS = "definitions"  # {"definitions": {"Op": {...}}}
    PROPERTIES = "properties"    # {"properties": {"Op": {...}}}

    @property
    def container(self) -> str:
        """Top-level key that holds operation entries."""
        return self.value

    @property
    def pointer_prefix(self) -> str:
        """JSON Pointer prefix that resolves to the operation entries."""
        return f"#/{self.value}"


@dataclass
class ConverterConfig:
    """Configuration for a SchemaConverter."""
    layout: SchemaLayout = SchemaLayout.DEFINITIONS
    scalars: ScalarRegistry = field(default_factory=ScalarRegistry)


@dataclass
class BuildContext:
    """State threaded through the builders for a single conversion call.

    A new context is created for every top-level call and is never reused.
    """
    config: ConverterConfig
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)
    operation_name: str | None = None
    # Variable property keys ("$id") declared by the current operation
    declared_variables: set[str] = field(default_factory=set)

    @property
    def scalars(self) -> ScalarRegistry:
        return self.config.scalars

    @property
    def layout(self) -> SchemaLayout:
        return self.config.layout

    def for_operation(self, operation_name: str) -> "BuildContext":
        """Return a context scoped to one operation, sharing diagnostics."""
        return BuildContext(
            config=self.config,
            diagnostics=self.diagnostics,
            operation_name=operation_name,
        )

    def variable_pointer(self, variable_name: str) -> str:
        """Build the $ref pointer to a variable of the current operation."""
        return json_pointer(
            self.layout.pointer_prefix,
            self.operation_name,
            "properties",
            "variables",
            "properties",
            f"${variable_name}",
        )


def escape_pointer_token(token: str) -> str:
    """Escape one JSON Pointer reference token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def json_pointer(prefix: str, *tokens: str) -> str:
    """Join escaped tokens onto a pointer prefix such as "#/definitions"."""
    return "/".join([prefix, *(escape_pointer_token(t) for t in tokens)])
