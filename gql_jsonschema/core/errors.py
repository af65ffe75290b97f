"""Exceptions raised while converting GraphQL definitions."""


class SchemaConversionError(ValueError):
    """Base exception for definitions that cannot be converted at all."""

    def __init__(self, message: str, node_kind: str | None = None):
        self.message = message
        self.node_kind = node_kind
        super().__init__(message)


class AnonymousOperationError(SchemaConversionError):
    """Raised for operations without a name.

    GraphQL allows unnamed operations, but every converted operation is
    keyed by its name in the output document, so there is nothing to nest
    an anonymous one under.
    """

    def __init__(self, operation_type: str = "query"):
        self.operation_type = operation_type
        super().__init__(
            f"Anonymous {operation_type} not supported: please provide a named operation",
            node_kind="operation_definition",
        )


class UnsupportedDefinitionError(SchemaConversionError):
    """Raised when a single definition of an unmodelled kind is converted."""
