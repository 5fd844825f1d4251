"""Synthesis of per-field argument entities."""

import logging

from .errors import NameCollisionError
from .ir import ArgumentsType, InterfaceType, ObjectType
from .naming import arguments_type_name

logger = logging.getLogger(__name__)


def synthesize_argument_types(
    types: list[ObjectType | InterfaceType],
    reserved_names: set[str],
) -> dict[str, ArgumentsType]:
    """Create one ArgumentsType for every field that declares arguments.

    Args:
        types: Object and interface types, in schema order
        reserved_names: Names of genuine schema types the synthesized names
            must not shadow

    Returns:
        Argument entities keyed by their synthesized name

    Raises:
        NameCollisionError: If a synthesized name is already taken
    """
    result: dict[str, ArgumentsType] = {}
    for owner in types:
        for field in owner.fields:
            if not field.has_arguments:
                continue
            name = arguments_type_name(field.name, owner.name)
            if name in reserved_names:
                raise NameCollisionError(name, "schema types")
            if name in result:
                raise NameCollisionError(name, "synthesized argument types")
            result[name] = ArgumentsType(
                name=name,
                field_name=field.name,
                type_name=owner.name,
                fields=list(field.arguments),
            )
            logger.debug("Synthesized %s for %s.%s", name, owner.name, field.name)
    return result
