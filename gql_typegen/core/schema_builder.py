"""Builds a SchemaContext from a graphql-core GraphQLSchema."""

import logging

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    Undefined,
    ast_from_value,
    get_named_type,
    is_introspection_type,
    is_specified_directive,
    is_specified_scalar_type,
    print_ast,
)

from .arguments import synthesize_argument_types
from .directives import directives_from_nodes
from .ir import (
    Argument,
    DirectiveDefinition,
    EnumType,
    EnumValue,
    Field,
    InputType,
    InterfaceType,
    ObjectType,
    ScalarType,
    SchemaContext,
    TypeKind,
    UnionType,
)
from .types import resolve_type

logger = logging.getLogger(__name__)


def build_schema_context(schema: GraphQLSchema) -> SchemaContext:
    """Build the template context for a validated schema."""
    return SchemaModelBuilder(schema).build()


def type_kind(gql_type: GraphQLNamedType) -> TypeKind:
    """Map a graphql-core named type to its TypeKind."""
    if isinstance(gql_type, GraphQLObjectType):
        return TypeKind.OBJECT
    if isinstance(gql_type, GraphQLInterfaceType):
        return TypeKind.INTERFACE
    if isinstance(gql_type, GraphQLUnionType):
        return TypeKind.UNION
    if isinstance(gql_type, GraphQLEnumType):
        return TypeKind.ENUM
    if isinstance(gql_type, GraphQLInputObjectType):
        return TypeKind.INPUT_OBJECT
    if isinstance(gql_type, GraphQLScalarType):
        return TypeKind.SCALAR
    raise TypeError(f"Unsupported GraphQL type {gql_type!r}")


def _print_default(value, gql_type) -> str | None:
    if value is Undefined:
        return None
    value_ast = ast_from_value(value, gql_type)
    return print_ast(value_ast) if value_ast is not None else None


class SchemaModelBuilder:
    """Walks the declared types of a schema and produces a SchemaContext."""

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema
        self.context = SchemaContext()

    def build(self) -> SchemaContext:
        """Process every declared type and return the complete context."""
        schema = self.schema
        for gql_type in schema.type_map.values():
            if is_introspection_type(gql_type) or is_specified_scalar_type(gql_type):
                continue
            self._process_type(gql_type)

        self.context.query_type = schema.query_type.name if schema.query_type else None
        self.context.mutation_type = schema.mutation_type.name if schema.mutation_type else None
        self.context.subscription_type = (
            schema.subscription_type.name if schema.subscription_type else None
        )
        self.context.directives = directives_from_nodes(
            schema.ast_node, *(schema.extension_ast_nodes or ())
        )
        for directive in schema.directives:
            if is_specified_directive(directive):
                continue
            self.context.defined_directives[directive.name] = DirectiveDefinition(
                name=directive.name,
                locations=[location.name for location in directive.locations],
                arguments=[self._argument(n, a) for n, a in directive.args.items()],
                description=directive.description,
            )

        owners = [
            named for named in self._ordered_types()
            if isinstance(named, (ObjectType, InterfaceType))
        ]
        self.context.argument_types = synthesize_argument_types(
            owners, self.context.all_names()
        )
        logger.debug(
            "Built schema context: %d types, %d interfaces, %d unions, %d enums, "
            "%d scalars, %d inputs, %d argument types",
            len(self.context.types), len(self.context.interfaces),
            len(self.context.unions), len(self.context.enums),
            len(self.context.scalars), len(self.context.inputs),
            len(self.context.argument_types),
        )
        return self.context

    def _ordered_types(self):
        for name in self.schema.type_map:
            named = self.context.get_type(name)
            if named is not None:
                yield named

    def _process_type(self, gql_type: GraphQLNamedType):
        name = gql_type.name
        directives = directives_from_nodes(
            gql_type.ast_node, *(gql_type.extension_ast_nodes or ())
        )

        if isinstance(gql_type, GraphQLObjectType):
            self.context.types[name] = ObjectType(
                name=name,
                fields=[self._field(n, f) for n, f in gql_type.fields.items()],
                interfaces=[i.name for i in gql_type.interfaces],
                description=gql_type.description,
                directives=directives,
            )
        elif isinstance(gql_type, GraphQLInterfaceType):
            self.context.interfaces[name] = InterfaceType(
                name=name,
                fields=[self._field(n, f) for n, f in gql_type.fields.items()],
                implementations=[t.name for t in self.schema.get_possible_types(gql_type)],
                description=gql_type.description,
                directives=directives,
            )
        elif isinstance(gql_type, GraphQLUnionType):
            self.context.unions[name] = UnionType(
                name=name,
                types=[t.name for t in gql_type.types],
                description=gql_type.description,
                directives=directives,
            )
        elif isinstance(gql_type, GraphQLEnumType):
            self.context.enums[name] = EnumType(
                name=name,
                values=[
                    EnumValue(
                        name=value_name,
                        description=value.description,
                        deprecation_reason=value.deprecation_reason,
                        directives=directives_from_nodes(value.ast_node),
                    )
                    for value_name, value in gql_type.values.items()
                ],
                description=gql_type.description,
                directives=directives,
            )
        elif isinstance(gql_type, GraphQLInputObjectType):
            self.context.inputs[name] = InputType(
                name=name,
                fields=[self._input_field(n, f) for n, f in gql_type.fields.items()],
                description=gql_type.description,
                directives=directives,
            )
        elif isinstance(gql_type, GraphQLScalarType):
            self.context.scalars[name] = ScalarType(
                name=name,
                description=gql_type.description,
                directives=directives,
            )

    def _field(self, name: str, gql_field: GraphQLField) -> Field:
        return Field(
            name=name,
            descriptor=resolve_type(gql_field.type),
            kind=type_kind(get_named_type(gql_field.type)),
            description=gql_field.description,
            arguments=[self._argument(n, a) for n, a in gql_field.args.items()],
            directives=directives_from_nodes(gql_field.ast_node),
            deprecation_reason=gql_field.deprecation_reason,
        )

    def _input_field(self, name: str, gql_field: GraphQLInputField) -> Field:
        return Field(
            name=name,
            descriptor=resolve_type(gql_field.type),
            kind=type_kind(get_named_type(gql_field.type)),
            description=gql_field.description,
            directives=directives_from_nodes(gql_field.ast_node),
            default_value=_print_default(gql_field.default_value, gql_field.type),
        )

    def _argument(self, name: str, gql_arg: GraphQLArgument) -> Argument:
        return Argument(
            name=name,
            descriptor=resolve_type(gql_arg.type),
            kind=type_kind(get_named_type(gql_arg.type)),
            description=gql_arg.description,
            default_value=_print_default(gql_arg.default_value, gql_arg.type),
            directives=directives_from_nodes(gql_arg.ast_node),
        )
