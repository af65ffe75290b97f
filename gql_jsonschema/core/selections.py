"""Selection set schemas.

Walks a selection set recursively and produces one property per selected
field. Fragments are not expanded.
"""

from typing import Any

from graphql import FieldNode, FragmentSpreadNode, InlineFragmentNode, SelectionSetNode

from .arguments import build_arguments_schema
from .context import BuildContext
from .diagnostics import DiagnosticKind


def build_selection_set_schema(
    selection_set: SelectionSetNode | None,
    ctx: BuildContext,
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Build the closed object schema for a selection set."""
    properties = (
        build_selection_tree(selection_set, ctx, path) if selection_set is not None else {}
    )
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": properties,
    }


def build_selection_tree(
    selection_set: SelectionSetNode,
    ctx: BuildContext,
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Map each selected field name to its schema.

    Returns a new dict on every call; nested selection sets get their own.
    A later selection of the same field replaces the earlier one and is
    reported.
    """
    properties: dict[str, Any] = {}

    for selection in selection_set.selections:
        if isinstance(selection, FieldNode):
            name = selection.name.value
            if name in properties:
                alias = f" (alias {selection.alias.value!r})" if selection.alias else ""
                ctx.diagnostics.report(
                    DiagnosticKind.OVERWRITTEN_SELECTION,
                    f"selection of {name!r}{alias} replaces an earlier selection of the same field",
                    (*path, name),
                )
            properties[name] = _field_schema(selection, ctx, (*path, name))
        elif isinstance(selection, FragmentSpreadNode):
            ctx.diagnostics.report(
                DiagnosticKind.FRAGMENT_SPREAD,
                f"fragment spread ...{selection.name.value} is not expanded",
                path,
            )
        elif isinstance(selection, InlineFragmentNode):
            on_type = (
                f" on {selection.type_condition.name.value}"
                if selection.type_condition
                else ""
            )
            ctx.diagnostics.report(
                DiagnosticKind.INLINE_FRAGMENT,
                f"inline fragment{on_type} is not expanded",
                path,
            )
        else:
            raise TypeError(f"Unexpected selection node: {type(selection).__name__}")

    return properties


def _field_schema(field: FieldNode, ctx: BuildContext, path: tuple[str, ...]) -> dict[str, Any]:
    """Schema for one selected field: {} for leaves, an object otherwise."""
    if not field.arguments and field.selection_set is None:
        return {}

    selections: dict[str, Any] = {}
    if field.selection_set is not None:
        selections = build_selection_set_schema(field.selection_set, ctx, path)

    arguments: dict[str, Any] = {}
    if field.arguments:
        arguments = build_arguments_schema(field.arguments, ctx, path)

    return {
        "type": "object",
        "additionalProperties": False,
        "required": [],
        "properties": {
            "selections": selections,
            "arguments": arguments,
        },
    }
