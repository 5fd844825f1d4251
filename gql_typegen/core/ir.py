"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that represent GraphQL schema constructs
in a language-agnostic way, suitable for code generation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kinds of named GraphQL types."""
    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    INPUT_OBJECT = "input_object"


@dataclass(frozen=True)
class TypeDescriptor:
    """Normalized form of a wrapped GraphQL type reference.

    ``[String!]`` becomes ``TypeDescriptor("String", is_nullable=True,
    is_list=True, item=TypeDescriptor("String", is_nullable=False))``.
    """
    name: str
    is_nullable: bool = True
    is_list: bool = False
    item: "TypeDescriptor | None" = None

    @property
    def is_required(self) -> bool:
        return not self.is_nullable

    @property
    def is_item_nullable(self) -> bool:
        """Nullability of the list items; meaningless for non-list types."""
        return self.item.is_nullable if self.item is not None else self.is_nullable

    def with_name(self, name: str) -> "TypeDescriptor":
        """Return the same wrapping around another base type name."""
        item = self.item.with_name(name) if self.item is not None else None
        return TypeDescriptor(name, self.is_nullable, self.is_list, item)


@dataclass(frozen=True)
class DirectiveUsage:
    """A directive applied to a schema node, e.g. ``@app(test: "123")``."""
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class Argument:
    """Represents an argument to a field, or an input object field."""
    name: str
    descriptor: TypeDescriptor
    kind: TypeKind
    description: str | None = None
    default_value: str | None = None  # GraphQL literal, e.g. '10' or '"HOT"'
    directives: list[DirectiveUsage] = field(default_factory=list)


@dataclass
class Field:
    """Represents a field in a GraphQL object, interface or input type."""
    name: str
    descriptor: TypeDescriptor
    kind: TypeKind
    description: str | None = None
    arguments: list[Argument] = field(default_factory=list)
    directives: list[DirectiveUsage] = field(default_factory=list)
    deprecation_reason: str | None = None
    default_value: str | None = None  # input fields only

    @property
    def has_arguments(self) -> bool:
        return bool(self.arguments)


@dataclass
class ObjectType:
    """Represents a GraphQL object type."""
    name: str
    fields: list[Field]
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.OBJECT


@dataclass
class InterfaceType:
    """Represents a GraphQL interface type."""
    name: str
    fields: list[Field]
    implementations: list[str] = field(default_factory=list)
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.INTERFACE


@dataclass
class UnionType:
    """Represents a GraphQL union type."""
    name: str
    types: list[str]
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.UNION


@dataclass
class EnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None
    deprecation_reason: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)

    @property
    def value(self) -> str:
        # Enum members serialize as their own name.
        return self.name


@dataclass
class EnumType:
    """Represents a GraphQL enum type."""
    name: str
    values: list[EnumValue]
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.ENUM


@dataclass
class ScalarType:
    """Represents a custom GraphQL scalar type."""
    name: str
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.SCALAR


@dataclass
class InputType:
    """Represents a GraphQL input object type."""
    name: str
    fields: list[Field]
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)
    kind = TypeKind.INPUT_OBJECT


@dataclass
class ArgumentsType:
    """Synthesized entity holding the arguments of one field.

    ``type Mutation { vote(repoFullName: String!): Entry }`` yields
    ``VoteMutationArgs`` with a single ``repoFullName`` property.
    """
    name: str
    field_name: str
    type_name: str
    fields: list[Argument]
    description: str | None = None
    directives: list[DirectiveUsage] = field(default_factory=list)


@dataclass
class DirectiveDefinition:
    """A custom directive declared by the schema."""
    name: str
    locations: list[str]
    arguments: list[Argument] = field(default_factory=list)
    description: str | None = None


NamedType = ObjectType | InterfaceType | UnionType | EnumType | ScalarType | InputType

BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")


@dataclass
class SchemaContext:
    """Complete intermediate representation of a GraphQL schema."""
    types: dict[str, ObjectType] = field(default_factory=dict)
    interfaces: dict[str, InterfaceType] = field(default_factory=dict)
    unions: dict[str, UnionType] = field(default_factory=dict)
    enums: dict[str, EnumType] = field(default_factory=dict)
    scalars: dict[str, ScalarType] = field(default_factory=dict)
    inputs: dict[str, InputType] = field(default_factory=dict)
    argument_types: dict[str, ArgumentsType] = field(default_factory=dict)

    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None

    directives: list[DirectiveUsage] = field(default_factory=list)
    defined_directives: dict[str, DirectiveDefinition] = field(default_factory=dict)

    def get_type(self, name: str) -> NamedType | None:
        """Look up any named schema type."""
        for registry in (
            self.types, self.interfaces, self.unions,
            self.enums, self.scalars, self.inputs,
        ):
            if name in registry:
                return registry[name]
        return None

    def kind_of(self, name: str) -> TypeKind | None:
        """Return the kind of a named type; built-in scalars are SCALAR."""
        if name in BUILTIN_SCALARS:
            return TypeKind.SCALAR
        named = self.get_type(name)
        return named.kind if named is not None else None

    def root_type(self, operation: str) -> str | None:
        """Return the root type name for 'query', 'mutation' or 'subscription'."""
        return {
            "query": self.query_type,
            "mutation": self.mutation_type,
            "subscription": self.subscription_type,
        }.get(operation)

    def possible_types(self, name: str) -> list[str]:
        """Return the concrete object type names a value of ``name`` can have."""
        if name in self.types:
            return [name]
        if name in self.interfaces:
            return list(self.interfaces[name].implementations)
        if name in self.unions:
            return list(self.unions[name].types)
        return []

    def all_names(self) -> set[str]:
        names: set[str] = set()
        for registry in (
            self.types, self.interfaces, self.unions, self.enums,
            self.scalars, self.inputs, self.argument_types,
        ):
            names.update(registry)
        return names

    @property
    def has_types(self) -> bool:
        return bool(self.types)

    @property
    def has_enums(self) -> bool:
        return bool(self.enums)
