"""Tests for operation entries and the two document layouts."""

import pytest
from graphql import (
    FieldNode,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    parse,
)

from jsonschema import Draft6Validator

from gql_jsonschema.core.context import BuildContext, ConverterConfig, SchemaLayout
from gql_jsonschema.core.converter import convert_definition
from gql_jsonschema.core.errors import AnonymousOperationError, SchemaConversionError
from gql_jsonschema.core.operations import build_operation_entry


def operation(source: str):
    return parse(source).definitions[0]


def resolve_pointer(document: dict, pointer: str):
    """Resolve a "#/a/b" JSON Pointer inside a document."""
    assert pointer.startswith("#/")
    target = document
    for token in pointer[2:].split("/"):
        target = target[token.replace("~1", "/").replace("~0", "~")]
    return target


def collect_refs(schema):
    """Yield every $ref value in a schema document."""
    if isinstance(schema, dict):
        for key, value in schema.items():
            if key == "$ref":
                yield value
            else:
                yield from collect_refs(value)
    elif isinstance(schema, list):
        for item in schema:
            yield from collect_refs(item)


@pytest.fixture
def ctx():
    return BuildContext(config=ConverterConfig())


class TestNamedOperations:
    """Named queries and mutations."""

    def test_simple_mutation_document(self):
        result = convert_definition(operation("mutation A { b }"))
        assert result.schema == {
            "$schema": "http://json-schema.org/draft-06/schema#",
            "definitions": {
                "A": {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "variables": False,
                        "selections": {
                            "type": "object",
                            "additionalProperties": False,
                            "properties": {"b": {}},
                        },
                    },
                }
            },
        }
        assert result.is_complete

    def test_entry_name(self, ctx):
        name, entry = build_operation_entry(operation("query GetUser { me { id } }"), ctx)
        assert name == "GetUser"
        assert set(entry["properties"]) == {"variables", "selections"}
        assert entry["additionalProperties"] is False

    def test_variables_and_selections(self, ctx):
        _, entry = build_operation_entry(
            operation("query RollDice($dice: Int!, $sides: Int) { rollDice(numDice: $dice, numSides: $sides) }"),
            ctx,
        )
        variables = entry["properties"]["variables"]
        assert variables["required"] == ["$dice"]
        arguments = entry["properties"]["selections"]["properties"]["rollDice"]["properties"]["arguments"]
        assert arguments["properties"]["numSides"] == {
            "$ref": "#/definitions/RollDice/properties/variables/properties/$sides"
        }
        assert len(ctx.diagnostics) == 0

    def test_missing_variable_definitions_field(self, ctx):
        node = OperationDefinitionNode(
            operation=OperationType.QUERY,
            name=NameNode(value="Q"),
            selection_set=SelectionSetNode(selections=(FieldNode(name=NameNode(value="a")),)),
        )
        _, entry = build_operation_entry(node, ctx)
        assert entry["properties"]["variables"] == {}
        assert entry["properties"]["selections"]["properties"] == {"a": {}}

    def test_declared_but_empty_variables(self, ctx):
        _, entry = build_operation_entry(operation("query Q { a }"), ctx)
        assert entry["properties"]["variables"] is False

    def test_operation_scope_does_not_leak(self, ctx):
        build_operation_entry(operation("query First($id: ID) { a(id: $id) }"), ctx)
        assert ctx.operation_name is None
        assert ctx.declared_variables == set()


class TestAnonymousOperations:
    """Unnamed operations cannot be keyed and are rejected."""

    def test_anonymous_query(self, ctx):
        with pytest.raises(AnonymousOperationError, match="Anonymous query not supported"):
            build_operation_entry(operation("{ a }"), ctx)

    def test_anonymous_mutation(self):
        with pytest.raises(AnonymousOperationError) as exc_info:
            convert_definition(operation("mutation { a }"))
        assert exc_info.value.operation_type == "mutation"

    def test_is_a_conversion_error(self):
        with pytest.raises(SchemaConversionError):
            convert_definition(operation("query ($id: ID) { a(id: $id) }"))


class TestLayouts:
    """Definitions versus properties nesting."""

    SOURCE = "query RollDice($dice: Int!) { rollDice(numDice: $dice) }"

    @pytest.mark.parametrize(
        "layout, container",
        [
            (SchemaLayout.DEFINITIONS, "definitions"),
            (SchemaLayout.PROPERTIES, "properties"),
        ],
    )
    def test_entry_container(self, layout, container):
        schema = convert_definition(operation(self.SOURCE), layout=layout).schema
        assert set(schema) == {"$schema", container}
        assert "RollDice" in schema[container]

    @pytest.mark.parametrize("layout", list(SchemaLayout))
    def test_argument_refs_resolve(self, layout):
        schema = convert_definition(operation(self.SOURCE), layout=layout).schema
        entry = schema[layout.container]["RollDice"]
        ref = entry["properties"]["selections"]["properties"]["rollDice"]["properties"][
            "arguments"
        ]["properties"]["numDice"]["$ref"]
        assert ref == f"#/{layout.container}/RollDice/properties/variables/properties/$dice"
        assert resolve_pointer(schema, ref) == {"type": "number"}


class TestSkippedVariableArguments:
    """Arguments bound to variables without a schema still give a usable document."""

    SOURCE = "query Op($ids: [ID], $limit: Int) { users(ids: $ids, limit: $limit) { id } }"

    @pytest.mark.parametrize("layout", list(SchemaLayout))
    def test_every_ref_resolves(self, layout):
        schema = convert_definition(operation(self.SOURCE), layout=layout).schema
        refs = list(collect_refs(schema))
        assert refs == [f"#/{layout.container}/Op/properties/variables/properties/$limit"]
        for ref in refs:
            resolve_pointer(schema, ref)

    def test_instances_validate_against_entry(self):
        schema = convert_definition(operation(self.SOURCE)).schema
        validator = Draft6Validator({**schema, "$ref": "#/definitions/Op"})
        instance = {
            "variables": {"$limit": 5},
            "selections": {
                "users": {"arguments": {"ids": ["1", "2"], "limit": 5}, "selections": {"id": "u1"}}
            },
        }
        assert validator.is_valid(instance)

        instance["selections"]["users"]["arguments"]["limit"] = "five"
        assert not validator.is_valid(instance)
