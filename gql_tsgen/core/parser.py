"""GraphQL schema loading using graphql-core.

Builds a ``GraphQLSchema`` from SDL files or from an introspection result
and converts its type map into an IRSchema.
"""

import logging
import os

from graphql import (
    GraphQLEnumType,
    GraphQLError,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    build_client_schema,
    build_schema,
    is_list_type,
    is_non_null_type,
)

from .auth import Auth
from .errors import AcquisitionError
from .introspection import IntrospectionClient
from .ir import (
    IREnum,
    IREnumValue,
    IRField,
    IRInterface,
    IRListRef,
    IRNamedRef,
    IRNonNullRef,
    IRObjectType,
    IRScalar,
    IRSchema,
    IRTypeRef,
    IRUnion,
)

logger = logging.getLogger(__name__)

SCHEMA_FILE_EXTENSIONS = (".graphql", ".graphqls")


class SchemaParser:
    """Parses GraphQL SDL files into IR."""

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise AcquisitionError(f"No schema files found at {self.schema_path}")

        sources = []
        for file_path in schema_files:
            try:
                with open(file_path, encoding="utf-8") as f:
                    sources.append(f.read())
            except (OSError, UnicodeDecodeError) as e:
                raise AcquisitionError(f"Error reading schema file {file_path}: {e}") from e

        try:
            schema = build_schema("\n".join(sources))
        except (GraphQLError, TypeError) as e:
            raise AcquisitionError(f"Error parsing schema {self.schema_path}: {e}") from e
        return schema_to_ir(schema)

    def _collect_schema_files(self) -> list[str]:
        """Collect the schema file, or all schema files below a directory."""
        if os.path.isfile(self.schema_path):
            return [self.schema_path]
        files = []
        for root, _, filenames in os.walk(self.schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_FILE_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        return sorted(files)


def schema_from_introspection(data: dict) -> IRSchema:
    """Build IR from the ``data`` portion of an introspection response."""
    try:
        schema = build_client_schema(data)
    except (GraphQLError, TypeError) as e:
        raise AcquisitionError(f"Invalid introspection result: {e}") from e
    return schema_to_ir(schema)


async def load_schema(
    source: str, auth: Auth | None = None, timeout: float = 30.0
) -> IRSchema:
    """Load a schema from an endpoint URL or a local SDL path."""
    if is_url(source):
        async with IntrospectionClient(source, auth, timeout=timeout) as client:
            data = await client.fetch()
        return schema_from_introspection(data)
    return SchemaParser(source).parse_all()


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def schema_to_ir(schema: GraphQLSchema) -> IRSchema:
    """Convert a graphql-core schema's type map into IR.

    Input object types are left out; nothing is generated for them.
    """
    ir = IRSchema()
    for name, gql_type in schema.type_map.items():
        if isinstance(gql_type, GraphQLObjectType):
            ir.add(IRObjectType(name=name, fields=_convert_fields(gql_type.fields)))
        elif isinstance(gql_type, GraphQLInterfaceType):
            ir.add(IRInterface(name=name, fields=_convert_fields(gql_type.fields)))
        elif isinstance(gql_type, GraphQLEnumType):
            ir.add(IREnum(name=name, values=[
                IREnumValue(
                    name=value_name,
                    value=str(value.value) if value.value is not None else value_name,
                )
                for value_name, value in gql_type.values.items()
            ]))
        elif isinstance(gql_type, GraphQLScalarType):
            ir.add(IRScalar(name=name))
        elif isinstance(gql_type, GraphQLUnionType):
            ir.add(IRUnion(name=name, members=[t.name for t in gql_type.types]))
        else:
            logger.debug("Not converting %s (%s)", name, type(gql_type).__name__)
    return ir


def _convert_fields(fields) -> list[IRField]:
    return [
        IRField(name=field_name, type_ref=_convert_type(field.type))
        for field_name, field in fields.items()
    ]


def _convert_type(gql_type) -> IRTypeRef:
    if is_non_null_type(gql_type):
        return IRNonNullRef(_convert_type(gql_type.of_type))
    if is_list_type(gql_type):
        return IRListRef(_convert_type(gql_type.of_type))
    return IRNamedRef(gql_type.name)
