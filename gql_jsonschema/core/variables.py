"""Variables schema for an operation's variable definitions."""

import math
from collections.abc import Sequence
from typing import Any

from graphql import (
    BooleanValueNode,
    FloatValueNode,
    IntValueNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    StringValueNode,
    ValueNode,
    VariableDefinitionNode,
)

from .context import BuildContext
from .diagnostics import DiagnosticKind

_NO_DEFAULT = object()


def build_variables_schema(
    variable_definitions: Sequence[VariableDefinitionNode],
    ctx: BuildContext,
) -> dict[str, Any] | bool:
    """Build the variables schema for an operation.

    Args:
        variable_definitions: The operation's variable definitions, in
            declaration order
        ctx: Build context of the enclosing operation

    Returns:
        False when no variables are declared, otherwise a closed object
        schema keyed by "$<name>" with the non-null variables in "required"
    """
    if not variable_definitions:
        return False

    properties: dict[str, Any] = {}
    required: list[str] = []

    for definition in variable_definitions:
        name = definition.variable.name.value
        key = f"${name}"
        type_node = definition.type
        path = (ctx.operation_name or "", "variables", key)

        if isinstance(type_node, NonNullTypeNode):
            inner = type_node.type
            if isinstance(inner, NamedTypeNode):
                properties[key] = _variable_property(inner, definition, ctx, path)
                required.append(key)
            else:
                _report_list_variable(ctx, key, path)
        elif isinstance(type_node, NamedTypeNode):
            properties[key] = _variable_property(type_node, definition, ctx, path)
        elif isinstance(type_node, ListTypeNode):
            _report_list_variable(ctx, key, path)
        else:
            raise TypeError(f"Unexpected variable type node: {type(type_node).__name__}")

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }


def _variable_property(
    type_node: NamedTypeNode,
    definition: VariableDefinitionNode,
    ctx: BuildContext,
    path: tuple[str, ...],
) -> dict[str, Any]:
    """Schema for one named-type variable."""
    # Unknown scalars and input types accept anything
    prop = ctx.scalars.schema_for(type_node.name.value) or {}

    if definition.default_value is not None:
        default = _literal_value(definition.default_value)
        if default is _NO_DEFAULT:
            ctx.diagnostics.report(
                DiagnosticKind.UNSUPPORTED_DEFAULT,
                f"default value of kind {definition.default_value.kind!r} is not captured",
                path,
            )
        else:
            prop["default"] = default

    return prop


def _report_list_variable(ctx: BuildContext, key: str, path: tuple[str, ...]):
    ctx.diagnostics.report(
        DiagnosticKind.LIST_VARIABLE,
        f"list-typed variable {key} is not supported and was skipped",
        path,
    )


def _literal_value(node: ValueNode) -> Any:
    """Return the Python value of a scalar literal, or a sentinel otherwise.

    Only int, float, string and boolean literals are converted; enum, list,
    object, null and variable nodes are not, nor floats outside the double
    range.
    """
    if isinstance(node, IntValueNode):
        return int(node.value)
    if isinstance(node, FloatValueNode):
        value = float(node.value)
        # Literals such as 1e400 overflow to inf, which JSON cannot encode
        return value if math.isfinite(value) else _NO_DEFAULT
    if isinstance(node, (StringValueNode, BooleanValueNode)):
        return node.value
    return _NO_DEFAULT
