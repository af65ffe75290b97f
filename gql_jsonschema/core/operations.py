"""Operation entries: variables plus selections under the operation's name."""

from typing import Any

from graphql import OperationDefinitionNode

from .context import BuildContext
from .errors import AnonymousOperationError
from .selections import build_selection_set_schema
from .variables import build_variables_schema


def build_operation_entry(
    node: OperationDefinitionNode,
    ctx: BuildContext,
) -> tuple[str, dict[str, Any]]:
    """Build the named schema entry for a query or mutation.

    Args:
        node: The operation definition
        ctx: Build context; a scoped copy is made for this operation

    Returns:
        (operation name, entry schema)

    Raises:
        AnonymousOperationError: If the operation has no name
    """
    if node.name is None or not node.name.value:
        raise AnonymousOperationError(_operation_type(node))

    name = node.name.value
    op_ctx = ctx.for_operation(name)

    # None means the node has no variable definitions field at all,
    # which is different from an empty declaration (False).
    variables: dict[str, Any] | bool = {}
    if node.variable_definitions is not None:
        variables = build_variables_schema(node.variable_definitions, op_ctx)
        if isinstance(variables, dict):
            op_ctx.declared_variables.update(variables["properties"])

    selections = build_selection_set_schema(node.selection_set, op_ctx, (name,))

    return name, {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "variables": variables,
            "selections": selections,
        },
    }


def _operation_type(node: OperationDefinitionNode) -> str:
    operation = getattr(node, "operation", None)
    return getattr(operation, "value", None) or "operation"
