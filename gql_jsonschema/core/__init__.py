"""Core modules for GraphQL to JSON Schema conversion."""

from .arguments import build_arguments_schema
from .context import (
    DRAFT_06_SCHEMA,
    BuildContext,
    ConverterConfig,
    SchemaLayout,
    json_pointer,
)
from .converter import (
    ConversionResult,
    SchemaConverter,
    convert_definition,
    convert_document,
)
from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from .errors import (
    AnonymousOperationError,
    SchemaConversionError,
    UnsupportedDefinitionError,
)
from .loader import DocumentLoader, parse_source
from .object_types import build_enum_entry, build_object_type_entry, build_type_schema
from .operations import build_operation_entry
from .scalars import BUILTIN_SCALARS, ScalarRegistry
from .selections import build_selection_set_schema, build_selection_tree
from .variables import build_variables_schema

__all__ = [
    # Scalars
    "BUILTIN_SCALARS",
    "ScalarRegistry",
    # Configuration
    "DRAFT_06_SCHEMA",
    "BuildContext",
    "ConverterConfig",
    "SchemaLayout",
    "json_pointer",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    # Errors
    "AnonymousOperationError",
    "SchemaConversionError",
    "UnsupportedDefinitionError",
    # Builders
    "build_arguments_schema",
    "build_enum_entry",
    "build_object_type_entry",
    "build_operation_entry",
    "build_selection_set_schema",
    "build_selection_tree",
    "build_type_schema",
    "build_variables_schema",
    # Converter
    "ConversionResult",
    "SchemaConverter",
    "convert_definition",
    "convert_document",
    # Loader
    "DocumentLoader",
    "parse_source",
]
