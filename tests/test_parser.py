"""Tests for loading schemas into IR."""

import asyncio

import pytest
from graphql import build_schema, introspection_from_schema

from gql_tsgen.core.errors import AcquisitionError
from gql_tsgen.core.ir import (
    IREnum,
    IRInterface,
    IRObjectType,
    IRScalar,
    IRUnion,
    parse_type_ref,
)
from gql_tsgen.core.parser import (
    SchemaParser,
    is_url,
    load_schema,
    schema_from_introspection,
    schema_to_ir,
)

SDL = """
scalar DateTime

enum Color {
  RED
  GREEN
}

interface Node {
  id: ID!
}

type Item implements Node {
  id: ID!
  color: Color
  name: String!
  tags: [String!]!
  created: DateTime
}

type Circle { radius: Float! }
type Square { side: Float! }
union Shape = Circle | Square

input ItemInput {
  name: String!
}

type Query {
  item(id: ID!): Item
  shapes: [Shape]
}
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SDL, encoding="utf-8")
    return path


class TestSchemaToIR:
    """Tests for converting a graphql-core schema."""

    @pytest.fixture
    def ir(self):
        return schema_to_ir(build_schema(SDL))

    def test_kinds(self, ir):
        assert isinstance(ir.types["Color"], IREnum)
        assert isinstance(ir.types["Node"], IRInterface)
        assert isinstance(ir.types["Item"], IRObjectType)
        assert isinstance(ir.types["Shape"], IRUnion)
        assert isinstance(ir.types["DateTime"], IRScalar)
        assert isinstance(ir.types["String"], IRScalar)

    def test_input_types_dropped(self, ir):
        assert "ItemInput" not in ir.types

    def test_field_order_and_refs(self, ir):
        fields = ir.types["Item"].fields
        assert [f.name for f in fields] == ["id", "color", "name", "tags", "created"]
        assert fields[3].type_ref == parse_type_ref("[String!]!")
        assert str(fields[1].type_ref) == "Color"

    def test_enum_values(self, ir):
        values = ir.types["Color"].values
        assert [(v.name, v.value) for v in values] == [("RED", "RED"), ("GREEN", "GREEN")]

    def test_union_members(self, ir):
        assert ir.types["Shape"].members == ["Circle", "Square"]

    def test_meta_types_present(self, ir):
        assert "__Type" in ir.types


class TestSchemaParser:
    """Tests for SchemaParser."""

    def test_single_file(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        assert "Item" in ir.types

    def test_directory(self, tmp_path):
        (tmp_path / "a.graphqls").write_text("enum Color { RED }", encoding="utf-8")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "b.graphql").write_text(
            "type Item { color: Color }", encoding="utf-8"
        )
        (tmp_path / "notes.txt").write_text("type Broken {", encoding="utf-8")
        ir = SchemaParser(str(tmp_path)).parse_all()
        assert isinstance(ir.types["Color"], IREnum)
        assert isinstance(ir.types["Item"], IRObjectType)

    def test_missing_path(self, tmp_path):
        with pytest.raises(AcquisitionError, match="No schema files"):
            SchemaParser(str(tmp_path / "missing.graphql")).parse_all()

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "bad.graphql"
        path.write_text("type Item {", encoding="utf-8")
        with pytest.raises(AcquisitionError, match="Error parsing schema"):
            SchemaParser(str(path)).parse_all()

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin.graphql"
        path.write_bytes(b"type Item { name: String }\n# \xff\xfe\n")
        with pytest.raises(AcquisitionError, match="Error reading schema file"):
            SchemaParser(str(path)).parse_all()

    def test_unknown_type_reference(self, tmp_path):
        path = tmp_path / "bad.graphql"
        path.write_text("type Item { owner: Missing }", encoding="utf-8")
        with pytest.raises(AcquisitionError):
            SchemaParser(str(path)).parse_all()


class TestIntrospection:
    """Tests for building IR from introspection results."""

    def test_round_trip_matches_sdl(self):
        schema = build_schema(SDL)
        from_sdl = schema_to_ir(schema)
        from_introspection = schema_from_introspection(introspection_from_schema(schema))
        assert from_introspection.types["Item"] == from_sdl.types["Item"]
        assert from_introspection.types["Color"] == from_sdl.types["Color"]
        assert from_introspection.types["Shape"] == from_sdl.types["Shape"]

    def test_invalid_result(self):
        with pytest.raises(AcquisitionError, match="Invalid introspection result"):
            schema_from_introspection({"nope": {}})


class TestLoadSchema:
    """Tests for source dispatch."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("https://api.example.com/graphql", True),
            ("http://localhost:5000/graphql", True),
            ("./schema.graphql", False),
            ("httpschema.graphql", False),
        ],
    )
    def test_is_url(self, source, expected):
        assert is_url(source) is expected

    def test_local_path(self, schema_file):
        ir = asyncio.run(load_schema(str(schema_file)))
        assert "Item" in ir.types
