"""Resolution of fragment definitions into their own namespaces."""

import logging
from collections.abc import Mapping

from graphql import FragmentDefinitionNode

from .errors import SelectionSchemaMismatchError
from .ir import SchemaContext
from .naming import NameTable
from .selection import COMPOSITE_KINDS, SelectionWalker
from .shapes import FragmentNamespace

logger = logging.getLogger(__name__)

FRAGMENT_SHAPE_NAME = "Fragment"


class FragmentResolver:
    """Builds one FragmentNamespace per fragment definition.

    The shape is built as if the fragment were an operation rooted at its
    type condition, independent of where the fragment is spread.
    """

    def __init__(self, schema: SchemaContext, fragment_namespaces: Mapping[str, str]):
        self.schema = schema
        self.fragment_namespaces = fragment_namespaces

    def resolve(self, definition: FragmentDefinitionNode) -> FragmentNamespace:
        """Resolve a single fragment definition."""
        name = definition.name.value
        namespace = self.fragment_namespaces[name]
        on_type = definition.type_condition.name.value
        if self.schema.kind_of(on_type) not in COMPOSITE_KINDS:
            raise SelectionSchemaMismatchError(
                on_type, None, namespace,
                reason=f"fragment '{name}' is defined on non-composite type '{on_type}'",
            )

        names = NameTable(scope=f"fragment '{name}'")
        walker = SelectionWalker(self.schema, self.fragment_namespaces, names)
        root = walker.build_shape(
            names.claim(FRAGMENT_SHAPE_NAME),
            on_type,
            definition.selection_set.selections,
            namespace,
        )
        logger.debug("Resolved fragment %s on %s", name, on_type)
        return FragmentNamespace(name=name, namespace=namespace, on_type=on_type, root=root)

    def resolve_all(
        self, definitions: list[FragmentDefinitionNode]
    ) -> dict[str, FragmentNamespace]:
        """Resolve every definition exactly once, keyed by fragment name."""
        return {definition.name.value: self.resolve(definition) for definition in definitions}
