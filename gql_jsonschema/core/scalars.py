"""Scalar type mapping from GraphQL to JSON Schema.

Maps GraphQL scalar names to JSON Schema primitive type names. The built-in
GraphQL scalars are always registered; custom scalars can be added per
converter.

Example usage:
    from gql_jsonschema.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.get("Int")        # "number"
    registry.get("User")       # None, callers emit a $ref instead

    registry.register("DateTime", "string")
    registry.schema_for("DateTime")  # {"type": "string"}
"""

BUILTIN_SCALARS: dict[str, str] = {
    "String": "string",
    "ID": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}

# Primitive type names allowed by the draft-06 meta-schema
JSON_SCHEMA_TYPES = frozenset(
    {"array", "boolean", "integer", "null", "number", "object", "string"}
)


class ScalarRegistry:
    """Registry of GraphQL scalar names and their JSON Schema types.

    Lookups never raise: an unknown name returns None and the caller decides
    whether that means "emit a reference" or "accept anything".

    Example:
        registry = ScalarRegistry()
        registry.register("Long", "integer")

        json_type = registry.get("Long")  # "integer"
    """

    def __init__(self):
        self._types: dict[str, str] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register the built-in GraphQL scalars."""
        for scalar_name, json_type in BUILTIN_SCALARS.items():
            self.register(scalar_name, json_type)

    def register(self, scalar_name: str, json_type: str):
        """Register the JSON Schema type for a scalar."""
        if json_type not in JSON_SCHEMA_TYPES:
            raise ValueError(
                f"Unknown JSON Schema type {json_type!r} for scalar {scalar_name!r}"
            )
        self._types[scalar_name] = json_type

    def get(self, scalar_name: str) -> str | None:
        """Get the JSON Schema type for a scalar, or None if not registered."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a scalar is registered."""
        return scalar_name in self._types

    def schema_for(self, scalar_name: str) -> dict | None:
        """Return a primitive schema fragment for a scalar, or None."""
        json_type = self.get(scalar_name)
        if json_type is None:
            return None
        return {"type": json_type}

    def __contains__(self, scalar_name: str) -> bool:
        return self.has(scalar_name)
