"""Tests for the IR: type references and generated file paths."""

import pytest

from gql_tsgen.core.ir import (
    GeneratedFile,
    IREnum,
    IREnumValue,
    IRListRef,
    IRNamedRef,
    IRNonNullRef,
    IRObjectType,
    IRSchema,
    IRUnion,
    lower_first,
    parse_type_ref,
)


class TestParseTypeRef:
    """Tests for parse_type_ref."""

    def test_named(self):
        assert parse_type_ref("String") == IRNamedRef("String")

    def test_non_null(self):
        assert parse_type_ref("ID!") == IRNonNullRef(IRNamedRef("ID"))

    def test_list_of_non_null_required(self):
        assert parse_type_ref("[String!]!") == IRNonNullRef(
            IRListRef(IRNonNullRef(IRNamedRef("String")))
        )

    def test_nested_list(self):
        assert parse_type_ref("[[Int]]") == IRListRef(IRListRef(IRNamedRef("Int")))

    @pytest.mark.parametrize("text", ["String", "[String]", "[String!]!", "[[Int!]]!"])
    def test_str_gives_printed_form(self, text):
        assert str(parse_type_ref(text)) == text

    @pytest.mark.parametrize("text", ["", "[String", "String]", "!String", "[]"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            parse_type_ref(text)


class TestEnumValue:
    """Tests for IREnumValue."""

    def test_value_defaults_to_name(self):
        assert IREnumValue(name="RED").value == "RED"

    def test_explicit_value(self):
        assert IREnumValue(name="RED", value="red").value == "red"


class TestIRSchema:
    """Tests for IRSchema."""

    def test_keeps_insertion_order(self):
        ir = IRSchema()
        ir.add(IRObjectType(name="Zed"))
        ir.add(IREnum(name="Alpha"))
        ir.add(IRUnion(name="Mid", members=["Zed"]))
        assert list(ir.types) == ["Zed", "Alpha", "Mid"]

    def test_kind_views(self):
        ir = IRSchema()
        ir.add(IRObjectType(name="Item"))
        ir.add(IREnum(name="Color"))
        assert list(ir.objects) == ["Item"]
        assert list(ir.enums) == ["Color"]
        assert ir.interfaces == {}


class TestGeneratedFile:
    """Tests for GeneratedFile paths."""

    def test_lower_first(self):
        assert lower_first("UserRole") == "userRole"
        assert lower_first("ID") == "iD"
        assert lower_first("") == ""

    def test_object_path(self):
        assert GeneratedFile("UserProfile", False, "").relative_path == "userProfile.ts"

    def test_enum_path(self):
        assert GeneratedFile("Color", True, "").relative_path == "enums/color.ts"
