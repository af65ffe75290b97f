"""Object, input, interface and enum type definitions as JSON Schema.

Field types are mapped structurally:
    String!      -> {"type": "string"} and the field is required
    [Int]        -> {"type": "array", "items": {"type": "number"}}
    [[User!]]    -> {"type": "array", "items": {"type": "array", "items": {"$ref": "#/definitions/User"}}}
    User         -> {"$ref": "#/definitions/User"}

Referenced types are expected to be emitted into the same "definitions"
map by another call; nothing checks that they exist.
"""

from typing import Any

from graphql import (
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from .context import BuildContext, json_pointer
from .scalars import ScalarRegistry

FieldedTypeNode = (
    ObjectTypeDefinitionNode | InputObjectTypeDefinitionNode | InterfaceTypeDefinitionNode
)


def type_reference(type_name: str) -> dict[str, str]:
    """$ref to a type in the document's definitions map."""
    return {"$ref": json_pointer("#/definitions", type_name)}


def build_type_schema(type_node: TypeNode, scalars: ScalarRegistry) -> dict[str, Any]:
    """Build the property schema for a field's type reference."""
    if isinstance(type_node, NonNullTypeNode):
        # Non-null only affects "required" on the enclosing object
        return build_type_schema(type_node.type, scalars)
    if isinstance(type_node, ListTypeNode):
        return {"type": "array", "items": build_type_schema(type_node.type, scalars)}
    if isinstance(type_node, NamedTypeNode):
        type_name = type_node.name.value
        return scalars.schema_for(type_name) or type_reference(type_name)
    raise TypeError(f"Unexpected type node: {type(type_node).__name__}")


def build_object_type_entry(
    node: FieldedTypeNode,
    ctx: BuildContext,
) -> tuple[str, dict[str, Any]]:
    """Build the named schema entry for a type with fields.

    Returns:
        (type name, {"type": "object", "properties": ..., "required": [...]})
    """
    properties: dict[str, Any] = {}
    required: list[str] = []

    for field_node in node.fields or ():
        field_name = field_node.name.value
        prop = build_type_schema(field_node.type, ctx.scalars)
        if field_node.description is not None:
            prop = {**prop, "description": field_node.description.value}
        properties[field_name] = prop
        if isinstance(field_node.type, NonNullTypeNode):
            required.append(field_name)

    entry: dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "required": required,
    }
    if node.description is not None:
        entry["description"] = node.description.value
    return node.name.value, entry


def build_enum_entry(
    node: EnumTypeDefinitionNode,
    ctx: BuildContext,
) -> tuple[str, dict[str, Any]]:
    """Build the named schema entry for an enum: a string with fixed values."""
    entry: dict[str, Any] = {
        "type": "string",
        "enum": [value.name.value for value in node.values or ()],
    }
    if node.description is not None:
        entry["description"] = node.description.value
    return node.name.value, entry
