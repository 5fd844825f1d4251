"""Selection-set walk shared by operations and fragments."""

from collections.abc import Mapping, Sequence

from graphql import (
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionNode,
)

from .errors import MissingFragmentError, SelectionSchemaMismatchError
from .ir import Field, InterfaceType, ObjectType, SchemaContext, TypeDescriptor, TypeKind
from .naming import NameTable, capitalize, inline_fragment_name
from .shapes import FragmentReference, Shape, ShapeField, Typename

TYPENAME_FIELD = "__typename"
TYPENAME_TYPE = "String"

COMPOSITE_KINDS = (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION)


def response_key(node: FieldNode) -> str:
    return node.alias.value if node.alias else node.name.value


def merge_fields(selections: Sequence[SelectionNode]) -> list[SelectionNode | list[FieldNode]]:
    """Group field selections sharing a response key.

    Returns the selections in order, where each response key appears once as
    the list of all field nodes selecting it, at the position of its first
    occurrence. Spreads and inline fragments are kept as they are.
    """
    merged: list[SelectionNode | list[FieldNode]] = []
    by_key: dict[str, list[FieldNode]] = {}
    for selection in selections:
        if isinstance(selection, FieldNode):
            key = response_key(selection)
            if key in by_key:
                by_key[key].append(selection)
                continue
            by_key[key] = [selection]
            merged.append(by_key[key])
        else:
            merged.append(selection)
    return merged


class SelectionWalker:
    """Turns selection sets into Shape trees for one namespace.

    Args:
        schema: The schema context selections are resolved against
        fragment_namespaces: Fragment name -> namespace exporting its shape,
            for every fragment defined in the batch
        names: The name table of the namespace being built
    """

    def __init__(
        self,
        schema: SchemaContext,
        fragment_namespaces: Mapping[str, str],
        names: NameTable,
    ):
        self.schema = schema
        self.fragment_namespaces = fragment_namespaces
        self.names = names

    def build_shape(
        self,
        name: str,
        type_name: str,
        selections: Sequence[SelectionNode],
        path: str,
    ) -> Shape:
        """Build the shape selected on ``type_name``.

        ``name`` must already be claimed in the name table. ``path`` locates
        the selection set for error messages, e.g. 'MyFeed.feed.repository'.
        """
        fields: list[ShapeField] = []
        spreads: list[FragmentReference] = []
        inline_fragments: list[Shape] = []
        nested: list[Shape] = []
        typename_selected = False

        for selection in merge_fields(selections):
            if isinstance(selection, list):
                key = response_key(selection[0])
                if selection[0].name.value == TYPENAME_FIELD:
                    if key == TYPENAME_FIELD:
                        typename_selected = True
                    else:
                        fields.append(self._typename_field(type_name, key))
                    continue
                shape_field = self._field(type_name, key, selection, path)
                fields.append(shape_field)
                if shape_field.shape is not None:
                    nested.append(shape_field.shape)
            elif isinstance(selection, FragmentSpreadNode):
                spreads.append(self._fragment_spread(selection, path))
            elif isinstance(selection, InlineFragmentNode):
                on_type = (
                    selection.type_condition.name.value
                    if selection.type_condition
                    else type_name
                )
                if self.schema.kind_of(on_type) not in COMPOSITE_KINDS:
                    raise SelectionSchemaMismatchError(
                        on_type, None, path,
                        reason=f"inline fragment on non-composite type '{on_type}'",
                    )
                child_name = self.names.claim_unique(inline_fragment_name(on_type))
                child = self.build_shape(
                    child_name, on_type, selection.selection_set.selections, path
                )
                inline_fragments.append(child)
                nested.append(child)
            else:
                raise TypeError(f"Unexpected selection node {type(selection).__name__}")

        if inline_fragments:
            typename = Typename(references=tuple(s.name for s in inline_fragments))
        else:
            typename = Typename(literals=tuple(self.schema.possible_types(type_name)))

        return Shape(
            name=name,
            type_name=type_name,
            typename=typename,
            fields=tuple(fields),
            fragment_spreads=tuple(spreads),
            inline_fragments=tuple(inline_fragments),
            nested=tuple(nested),
            typename_selected=typename_selected,
        )

    def _field(
        self, type_name: str, key: str, nodes: list[FieldNode], path: str
    ) -> ShapeField:
        field_name = nodes[0].name.value
        definition = self._field_definition(type_name, field_name, path)
        field_path = f"{path}.{key}"
        sub_selections = [
            selection
            for node in nodes
            if node.selection_set is not None
            for selection in node.selection_set.selections
        ]
        is_composite = definition.kind in COMPOSITE_KINDS

        if not sub_selections:
            if is_composite:
                raise SelectionSchemaMismatchError(
                    type_name, field_name, field_path,
                    reason=f"field of composite type '{definition.descriptor.name}' "
                    "needs a selection set",
                )
            return ShapeField(
                name=key,
                descriptor=definition.descriptor,
                kind=definition.kind,
                description=definition.description,
            )

        if not is_composite:
            raise SelectionSchemaMismatchError(
                type_name, field_name, field_path,
                reason=f"leaf type '{definition.descriptor.name}' cannot have a selection set",
            )
        shape_name = self.names.claim_unique(capitalize(key))
        shape = self.build_shape(
            shape_name, definition.descriptor.name, sub_selections, field_path
        )
        return ShapeField(
            name=key,
            descriptor=definition.descriptor.with_name(shape_name),
            kind=definition.kind,
            description=definition.description,
            shape=shape,
        )

    def _typename_field(self, type_name: str, key: str) -> ShapeField:
        # An aliased __typename is a plain property holding the type name
        return ShapeField(
            name=key,
            descriptor=TypeDescriptor(TYPENAME_TYPE, is_nullable=False),
            kind=TypeKind.SCALAR,
            typename_literals=tuple(self.schema.possible_types(type_name)),
        )

    def _field_definition(self, type_name: str, field_name: str, path: str) -> Field:
        owner = self.schema.get_type(type_name)
        if isinstance(owner, (ObjectType, InterfaceType)):
            for definition in owner.fields:
                if definition.name == field_name:
                    return definition
        raise SelectionSchemaMismatchError(type_name, field_name, f"{path}.{field_name}")

    def _fragment_spread(self, node: FragmentSpreadNode, path: str) -> FragmentReference:
        fragment_name = node.name.value
        namespace = self.fragment_namespaces.get(fragment_name)
        if namespace is None:
            raise MissingFragmentError(fragment_name, path)
        return FragmentReference(name=fragment_name, namespace=namespace)
