"""Normalization of GraphQL List/NonNull wrapper types."""

from graphql import (
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
)

from .ir import TypeDescriptor


def resolve_type(type_ref, nullable: bool = True) -> TypeDescriptor:
    """Resolve a wrapped type reference into a TypeDescriptor.

    Accepts both schema types (``GraphQLNonNull(GraphQLList(...))``) and
    document type nodes (``NonNullTypeNode``, ``ListTypeNode``,
    ``NamedTypeNode``). Wrappers are peeled outside in: a NonNull marks the
    position it wraps as required, a List recurses for its items.

    Args:
        type_ref: The wrapped type or type node
        nullable: Nullability of the current position, set to False by an
            enclosing NonNull

    Returns:
        The normalized descriptor
    """
    if isinstance(type_ref, (GraphQLNonNull, NonNullTypeNode)):
        return resolve_type(_unwrap(type_ref), nullable=False)

    if isinstance(type_ref, (GraphQLList, ListTypeNode)):
        item = resolve_type(_unwrap(type_ref))
        return TypeDescriptor(
            name=item.name,
            is_nullable=nullable,
            is_list=True,
            item=item,
        )

    if isinstance(type_ref, GraphQLNamedType):
        return TypeDescriptor(name=type_ref.name, is_nullable=nullable)

    if isinstance(type_ref, NamedTypeNode):
        return TypeDescriptor(name=type_ref.name.value, is_nullable=nullable)

    raise TypeError(f"Expected a GraphQL type or type node, got {type(type_ref).__name__}")


def _unwrap(type_ref):
    # GraphQLWrappingType exposes .of_type, wrapping type nodes expose .type
    if isinstance(type_ref, (GraphQLNonNull, GraphQLList)):
        return type_ref.of_type
    return type_ref.type
