"""Deterministic naming for operations and generated shapes."""

import re

from graphql import OperationDefinitionNode

from .errors import NameCollisionError

ANONYMOUS_PREFIX = "AnonymousQuery_"


def capitalize(name: str) -> str:
    """Upper-case the first character only: 'fieldTest' -> 'FieldTest'."""
    return name[:1].upper() + name[1:]


def pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    return "".join(capitalize(word) for word in re.split(r"[_\-\s]+", name) if word)


def arguments_type_name(field_name: str, type_name: str) -> str:
    """Name of the synthesized arguments entity: vote on Mutation -> VoteMutationArgs."""
    return f"{capitalize(field_name)}{capitalize(type_name)}Args"


def inline_fragment_name(type_name: str) -> str:
    return f"{type_name}InlineFragment"


def assign_operation_names(operations: list[OperationDefinitionNode]) -> list[str]:
    """Name every operation of a batch.

    Named operations keep their declared name. Anonymous ones become
    AnonymousQuery_1, AnonymousQuery_2, ... counted in document order over
    anonymous operations only.
    """
    names = []
    anonymous_count = 0
    for operation in operations:
        if operation.name is not None:
            names.append(operation.name.value)
        else:
            anonymous_count += 1
            names.append(f"{ANONYMOUS_PREFIX}{anonymous_count}")
    return names


class NameTable:
    """Names already taken inside one namespace."""

    def __init__(self, scope: str):
        self.scope = scope
        self._taken: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._taken

    def claim(self, name: str) -> str:
        """Take ``name``; a second claim of the same name is an error."""
        if name in self._taken:
            raise NameCollisionError(name, self.scope)
        self._taken.add(name)
        return name

    def claim_unique(self, name: str) -> str:
        """Take ``name``, prefixing underscores until it is free."""
        while name in self._taken:
            name = f"_{name}"
        self._taken.add(name)
        return name
