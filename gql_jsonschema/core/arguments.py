"""Argument schemas that reference the operation's variables."""

from collections.abc import Sequence
from typing import Any

from graphql import ArgumentNode, VariableNode

from .context import BuildContext
from .diagnostics import DiagnosticKind


def build_arguments_schema(
    arguments: Sequence[ArgumentNode],
    ctx: BuildContext,
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Build the arguments schema for one selected field.

    Arguments bound to a variable become a $ref to that variable's schema,
    e.g. rollDice(numDice: $dice) inside RollDice gives
    {"numDice": {"$ref": "#/definitions/RollDice/properties/variables/properties/$dice"}}.
    Variables with no schema in the operation (list-typed or undeclared)
    give an open schema {}. Literal arguments are skipped. Both are reported.
    """
    properties: dict[str, Any] = {}

    for argument in arguments:
        name = argument.name.value
        value = argument.value
        if isinstance(value, VariableNode):
            variable_name = value.name.value
            if f"${variable_name}" in ctx.declared_variables:
                properties[name] = {"$ref": ctx.variable_pointer(variable_name)}
            else:
                # A $ref here would point at nothing; accept anything instead
                properties[name] = {}
                ctx.diagnostics.report(
                    DiagnosticKind.UNRESOLVED_VARIABLE,
                    f"argument {name!r} references ${variable_name}, "
                    "which has no schema in this operation's variables",
                    (*path, name),
                )
        else:
            ctx.diagnostics.report(
                DiagnosticKind.LITERAL_ARGUMENT,
                f"literal value of kind {value.kind!r} for argument {name!r} is not captured",
                (*path, name),
            )

    return {
        "type": "object",
        "properties": properties,
        "required": [],
        "additionalProperties": False,
    }
