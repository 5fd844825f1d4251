"""Result shapes produced by transforming operations and fragments.

A Shape mirrors one selection set: what the client receives for it at
runtime. Shapes are immutable once built and owned by the namespace of the
operation or fragment that produced them.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .ir import TypeDescriptor, TypeKind


@dataclass(frozen=True)
class Typename:
    """Type of a shape's ``__typename`` discriminator.

    Either concrete object type names (``"Entry"``), or the names of the
    inline-fragment shapes whose own ``__typename`` it unions.
    """
    literals: tuple[str, ...] = ()
    references: tuple[str, ...] = ()


@dataclass(frozen=True)
class FragmentReference:
    """A fragment spread, resolved to the namespace exporting its shape."""
    name: str
    namespace: str


@dataclass(frozen=True)
class ShapeField:
    """One property of a shape."""
    name: str  # response key: alias if given, else the field name
    descriptor: TypeDescriptor
    kind: TypeKind
    description: str | None = None
    shape: "Shape | None" = None
    default_value: str | None = None  # variables only
    # Set for an aliased __typename: the object type names it can hold
    typename_literals: tuple[str, ...] = ()

    @property
    def is_nested(self) -> bool:
        return self.shape is not None


@dataclass(frozen=True)
class Shape:
    """A named object shape for one selection set."""
    name: str
    type_name: str
    typename: Typename
    fields: tuple[ShapeField, ...] = ()
    fragment_spreads: tuple[FragmentReference, ...] = ()
    inline_fragments: tuple["Shape", ...] = ()
    # Child shapes (nested fields and inline fragments) in selection order
    nested: tuple["Shape", ...] = ()
    typename_selected: bool = False

    def iter_shapes(self) -> Iterator["Shape"]:
        """Yield this shape and all shapes below it, pre-order."""
        yield self
        for child in self.nested:
            yield from child.iter_shapes()


@dataclass(frozen=True)
class Variables:
    """The variables accepted by an operation."""
    fields: tuple[ShapeField, ...] = ()
    name: str = "Variables"


@dataclass(frozen=True)
class OperationNamespace:
    """Everything generated for one operation."""
    name: str
    namespace: str
    kind: str  # 'query', 'mutation' or 'subscription'
    variables: Variables
    root: Shape
    is_anonymous: bool = False

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """All shapes of the namespace, flattened pre-order from the root."""
        return tuple(self.root.iter_shapes())


@dataclass(frozen=True)
class FragmentNamespace:
    """Everything generated for one fragment definition."""
    name: str
    namespace: str
    on_type: str
    root: Shape

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """All shapes of the namespace, flattened pre-order from the root."""
        return tuple(self.root.iter_shapes())


@dataclass(frozen=True)
class DocumentContext:
    """Transformed operations and fragments of one document batch."""
    operations: tuple[OperationNamespace, ...] = ()
    fragments: tuple[FragmentNamespace, ...] = ()

    @property
    def has_operations(self) -> bool:
        return bool(self.operations)

    @property
    def has_fragments(self) -> bool:
        return bool(self.fragments)

    def get_operation(self, name: str) -> OperationNamespace | None:
        for operation in self.operations:
            if operation.name == name:
                return operation
        return None

    def get_fragment(self, name: str) -> FragmentNamespace | None:
        for fragment in self.fragments:
            if fragment.name == name:
                return fragment
        return None
