"""Transformation of operation documents into result-shape namespaces.

Example:
    schema_context = build_schema_context(schema)
    document_context = transform_documents(schema_context, [parse(source)])
    for operation in document_context.operations:
        print(operation.namespace, [s.name for s in operation.shapes])
"""

import logging

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    VariableDefinitionNode,
    print_ast,
)

from .errors import NameCollisionError, SelectionSchemaMismatchError
from .fragments import FragmentResolver
from .ir import SchemaContext
from .naming import NameTable, assign_operation_names, capitalize
from .selection import SelectionWalker
from .shapes import DocumentContext, OperationNamespace, ShapeField, Variables
from .types import resolve_type

logger = logging.getLogger(__name__)

VARIABLES_SHAPE_NAME = "Variables"


def transform_documents(
    schema: SchemaContext, documents: list[DocumentNode]
) -> DocumentContext:
    """Transform a batch of parsed documents against a schema context."""
    return OperationTransformer(schema).transform(documents)


class OperationTransformer:
    """Builds namespaces for every operation and fragment of a document batch.

    The transformer holds no per-batch state; each ``transform`` call is
    independent, so one instance can serve many batches concurrently.
    """

    def __init__(self, schema: SchemaContext):
        self.schema = schema

    def transform(self, documents: list[DocumentNode]) -> DocumentContext:
        """Transform all operations and fragments of a batch.

        Raises:
            MissingFragmentError: A spread names an undefined fragment
            SelectionSchemaMismatchError: A selection does not fit the schema
            NameCollisionError: Two namespaces or shapes share a name
        """
        operations: list[OperationDefinitionNode] = []
        fragments: list[FragmentDefinitionNode] = []
        for document in documents:
            for definition in document.definitions:
                if isinstance(definition, OperationDefinitionNode):
                    operations.append(definition)
                elif isinstance(definition, FragmentDefinitionNode):
                    fragments.append(definition)

        namespaces = NameTable(scope="document batch")
        fragment_namespaces: dict[str, str] = {}
        for definition in fragments:
            name = definition.name.value
            if name in fragment_namespaces:
                raise NameCollisionError(name, "fragment definitions")
            fragment_namespaces[name] = namespaces.claim(capitalize(name))

        operation_names = assign_operation_names(operations)
        for name in operation_names:
            namespaces.claim(capitalize(name))

        resolver = FragmentResolver(self.schema, fragment_namespaces)
        resolved_fragments = resolver.resolve_all(fragments)

        transformed = tuple(
            self._transform_operation(definition, name, fragment_namespaces)
            for definition, name in zip(operations, operation_names)
        )
        return DocumentContext(
            operations=transformed,
            fragments=tuple(resolved_fragments.values()),
        )

    def _transform_operation(
        self,
        definition: OperationDefinitionNode,
        name: str,
        fragment_namespaces: dict[str, str],
    ) -> OperationNamespace:
        kind = definition.operation.value
        namespace = capitalize(name)
        root_type = self.schema.root_type(kind)
        if root_type is None:
            raise SelectionSchemaMismatchError(
                None, None, namespace,
                reason=f"schema does not define a {kind} root type",
            )

        names = NameTable(scope=f"operation '{name}'")
        names.claim(VARIABLES_SHAPE_NAME)
        variables = Variables(
            fields=tuple(
                self._variable(node, namespace)
                for node in definition.variable_definitions or ()
            )
        )

        walker = SelectionWalker(self.schema, fragment_namespaces, names)
        root = walker.build_shape(
            names.claim(capitalize(kind)),
            root_type,
            definition.selection_set.selections,
            namespace,
        )
        logger.debug("Transformed %s %s into %s", kind, name, namespace)
        return OperationNamespace(
            name=name,
            namespace=namespace,
            kind=kind,
            variables=variables,
            root=root,
            is_anonymous=definition.name is None,
        )

    def _variable(self, node: VariableDefinitionNode, namespace: str) -> ShapeField:
        descriptor = resolve_type(node.type)
        kind = self.schema.kind_of(descriptor.name)
        if kind is None:
            raise SelectionSchemaMismatchError(
                descriptor.name, None, f"{namespace}.{VARIABLES_SHAPE_NAME}",
                reason=f"unknown type '{descriptor.name}' "
                f"for variable '${node.variable.name.value}'",
            )
        return ShapeField(
            name=node.variable.name.value,
            descriptor=descriptor,
            kind=kind,
            default_value=print_ast(node.default_value) if node.default_value else None,
        )
