"""Tests for object, input, interface and enum type schemas."""

import pytest
from graphql import parse

from gql_jsonschema.core.context import BuildContext, ConverterConfig
from gql_jsonschema.core.converter import convert_definition
from gql_jsonschema.core.object_types import (
    build_enum_entry,
    build_object_type_entry,
    build_type_schema,
    type_reference,
)
from gql_jsonschema.core.scalars import ScalarRegistry


def definition(source: str):
    return parse(source).definitions[0]


def field_type(source: str):
    """Return the type node of the first field of a type definition."""
    return definition(source).fields[0].type


@pytest.fixture
def ctx():
    return BuildContext(config=ConverterConfig())


class TestFieldTypes:
    """Structural mapping of field type references."""

    def test_scalar(self):
        assert build_type_schema(field_type("type T { a: Float }"), ScalarRegistry()) == {
            "type": "number"
        }

    def test_non_null_does_not_change_schema(self):
        assert build_type_schema(field_type("type T { a: Boolean! }"), ScalarRegistry()) == {
            "type": "boolean"
        }

    def test_reference(self):
        assert build_type_schema(field_type("type T { owner: User }"), ScalarRegistry()) == {
            "$ref": "#/definitions/User"
        }

    def test_list_of_references(self):
        assert build_type_schema(field_type("type T { t: [T] }"), ScalarRegistry()) == {
            "type": "array",
            "items": {"$ref": "#/definitions/T"},
        }

    def test_list_of_lists(self):
        schema = build_type_schema(field_type("type T { grid: [[Int!]!] }"), ScalarRegistry())
        assert schema == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "number"}},
        }

    def test_custom_scalar_is_not_a_reference(self):
        scalars = ScalarRegistry()
        scalars.register("DateTime", "string")
        assert build_type_schema(field_type("type T { at: DateTime }"), scalars) == {
            "type": "string"
        }

    def test_type_reference_helper(self):
        assert type_reference("User") == {"$ref": "#/definitions/User"}


class TestObjectTypeEntries:
    """Named entries for object types."""

    def test_required_scalar_field(self):
        result = convert_definition(definition("type H { a: String! }"))
        assert result.schema["definitions"]["H"] == {
            "type": "object",
            "properties": {"a": {"type": "string"}},
            "required": ["a"],
        }

    def test_list_reference_not_required(self, ctx):
        name, entry = build_object_type_entry(definition("type S { t: [T] }"), ctx)
        assert name == "S"
        assert entry["properties"]["t"] == {"type": "array", "items": {"$ref": "#/definitions/T"}}
        assert entry["required"] == []

    def test_scalar_only_type(self, ctx):
        _, entry = build_object_type_entry(
            definition("type User { id: ID! name: String age: Int! score: Float active: Boolean }"),
            ctx,
        )
        assert {k: v["type"] for k, v in entry["properties"].items()} == {
            "id": "string",
            "name": "string",
            "age": "number",
            "score": "number",
            "active": "boolean",
        }
        assert set(entry["required"]) == {"id", "age"}

    def test_required_uses_outermost_wrapper(self, ctx):
        _, entry = build_object_type_entry(
            definition("type T { a: [String!] b: [String]! }"), ctx
        )
        assert entry["required"] == ["b"]

    def test_descriptions(self, ctx):
        _, entry = build_object_type_entry(
            definition('"""A person""" type User { "Display name" name: String }'), ctx
        )
        assert entry["description"] == "A person"
        assert entry["properties"]["name"] == {"type": "string", "description": "Display name"}

    def test_input_type(self, ctx):
        name, entry = build_object_type_entry(
            definition("input CreateUserInput { name: String! tags: [String] }"), ctx
        )
        assert name == "CreateUserInput"
        assert entry["required"] == ["name"]
        assert entry["properties"]["tags"]["type"] == "array"

    def test_interface_type(self, ctx):
        name, entry = build_object_type_entry(definition("interface Node { id: ID! }"), ctx)
        assert name == "Node"
        assert entry["properties"] == {"id": {"type": "string"}}


class TestEnumEntries:
    """Enums become string schemas with fixed values."""

    def test_enum(self, ctx):
        name, entry = build_enum_entry(definition("enum Color { RED GREEN BLUE }"), ctx)
        assert name == "Color"
        assert entry == {"type": "string", "enum": ["RED", "GREEN", "BLUE"]}
