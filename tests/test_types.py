"""Tests for wrapper type normalization."""

import pytest
from graphql import (
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLString,
    parse_type,
)

from gql_typegen.core.ir import TypeDescriptor
from gql_typegen.core.types import resolve_type


class TestResolveSchemaTypes:
    """Tests for graphql-core schema wrapper types."""

    def test_named(self):
        assert resolve_type(GraphQLString) == TypeDescriptor("String")

    def test_non_null(self):
        descriptor = resolve_type(GraphQLNonNull(GraphQLString))
        assert descriptor == TypeDescriptor("String", is_nullable=False)
        assert descriptor.is_required

    def test_list_of_nullable(self):
        descriptor = resolve_type(GraphQLList(GraphQLString))
        assert descriptor.is_list
        assert descriptor.is_nullable
        assert descriptor.is_item_nullable

    def test_required_list_of_required(self):
        descriptor = resolve_type(GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLInt))))
        assert descriptor.name == "Int"
        assert descriptor.is_list
        assert not descriptor.is_nullable
        assert not descriptor.is_item_nullable

    def test_nested_list(self):
        descriptor = resolve_type(GraphQLList(GraphQLList(GraphQLString)))
        assert descriptor.item.is_list
        assert descriptor.item.item == TypeDescriptor("String")


class TestResolveTypeNodes:
    """Tests for document type nodes."""

    @pytest.mark.parametrize("source,nullable,is_list,item_nullable", [
        ("String", True, False, True),
        ("String!", False, False, False),
        ("[String]", True, True, True),
        ("[String]!", False, True, True),
        ("[String!]!", False, True, False),
        ("[String!]", True, True, False),
    ])
    def test_wrapping(self, source, nullable, is_list, item_nullable):
        descriptor = resolve_type(parse_type(source))
        assert descriptor.name == "String"
        assert descriptor.is_nullable is nullable
        assert descriptor.is_list is is_list
        assert descriptor.is_item_nullable is item_nullable

    def test_schema_and_node_agree(self):
        from_schema = resolve_type(GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLString))))
        from_node = resolve_type(parse_type("[String!]!"))
        assert from_schema == from_node

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            resolve_type("String")


class TestTypeDescriptor:
    """Tests for TypeDescriptor helpers."""

    def test_with_name_keeps_wrapping(self):
        descriptor = resolve_type(parse_type("[Entry]"))
        renamed = descriptor.with_name("Feed")
        assert renamed.name == "Feed"
        assert renamed.item.name == "Feed"
        assert renamed.is_list and renamed.is_nullable and renamed.is_item_nullable
