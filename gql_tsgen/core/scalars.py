"""Scalar handlers for GraphQL to TypeScript generation.

Provides a protocol for defining how GraphQL scalars map to TypeScript types
and which import, if any, the mapped type needs.

Example usage:
    from gql_tsgen.core.scalars import PrimitiveHandler, ScalarRegistry

    registry = ScalarRegistry()
    registry.map_scalar("Int")        # "number"
    registry.map_scalar("JSON")       # "any"

    # Map a custom scalar to a library type
    class BigHandler:
        ts_type = "Big"
        import_statement = "import type {Big} from 'big.js';"

    registry.register("Decimal", BigHandler())
"""

from typing import Protocol, runtime_checkable

# Fallback for custom scalars nothing is registered for.
FALLBACK_TS_TYPE = "any"

PRIMITIVE_TS_TYPES = frozenset({"string", "number", "boolean"})


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar handlers.

    Attributes:
        ts_type: The TypeScript type name (e.g., "string", "UTCDate")
        import_statement: The import line the type needs, or None
    """

    ts_type: str
    import_statement: str | None


class PrimitiveHandler:
    """Handler for scalars that map onto a TypeScript primitive."""

    import_statement = None

    def __init__(self, ts_type: str):
        self.ts_type = ts_type

    def __repr__(self) -> str:
        return f"PrimitiveHandler({self.ts_type!r})"


class UTCDateHandler:
    """Handler for the naive date/time scalars, mapped to ``UTCDate``."""

    ts_type = "UTCDate"
    import_statement = "import type {UTCDate} from '@date-fns/utc';"


class ImportedTypeHandler:
    """Handler for scalars mapped to a type from another module."""

    def __init__(self, ts_type: str, import_statement: str | None = None):
        self.ts_type = ts_type
        self.import_statement = import_statement


class ScalarRegistry:
    """Registry for scalar handlers.

    Manages the mapping between GraphQL scalar names and their handlers.
    Scalars registered here are treated as built in: the generator renders
    them inline and does not emit a declaration file for them.

    Example:
        registry = ScalarRegistry()
        registry.register("DateTime", PrimitiveHandler("string"))

        handler = registry.get("DateTime")
        if handler:
            ts_type = handler.ts_type  # "string"
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register the built-in scalar table."""
        self.register("String", PrimitiveHandler("string"))
        self.register("ID", PrimitiveHandler("string"))
        self.register("Int", PrimitiveHandler("number"))
        self.register("Float", PrimitiveHandler("number"))
        self.register("Boolean", PrimitiveHandler("boolean"))
        date_handler = UTCDateHandler()
        self.register("NaiveDate", date_handler)
        self.register("NaiveTime", date_handler)
        self.register("NaiveDateTime", date_handler)

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar type, or None if not registered."""
        return self._handlers.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    def map_scalar(self, scalar_name: str) -> str:
        """Map a scalar name to its TypeScript type, falling back to ``any``."""
        handler = self.get(scalar_name)
        return handler.ts_type if handler else FALLBACK_TS_TYPE

    def resolve(self, type_name: str) -> str:
        """Map a registered scalar name; any other name is returned unchanged."""
        handler = self.get(type_name)
        return handler.ts_type if handler else type_name
