"""Directive extraction and the generic directive predicate.

Any IR node carrying a ``directives`` list (types, fields, arguments, enum
values and the SchemaContext itself) can be queried by directive name:

    usage = find_directive(schema_context.types["Query"], "app")
    if usage is not None:
        print(usage.arguments)
"""

from typing import Any

from graphql import value_from_ast_untyped

from .ir import DirectiveUsage


def directives_from_nodes(*nodes) -> list[DirectiveUsage]:
    """Collect directive usages from AST nodes, skipping missing ones.

    Used with a definition node and its extension nodes, e.g.
    ``directives_from_nodes(gql_type.ast_node, *gql_type.extension_ast_nodes)``.
    """
    usages = []
    for node in nodes:
        if node is None or not getattr(node, "directives", None):
            continue
        for directive in node.directives:
            usages.append(
                DirectiveUsage(
                    name=directive.name.value,
                    arguments={
                        arg.name.value: value_from_ast_untyped(arg.value)
                        for arg in directive.arguments or ()
                    },
                )
            )
    return usages


def find_directive(node: Any, name: str) -> DirectiveUsage | None:
    """Return the first usage of directive ``name`` on ``node``, if any."""
    for usage in getattr(node, "directives", None) or ():
        if usage.name == name:
            return usage
    return None


def has_directive(node: Any, name: str) -> bool:
    """Check whether directive ``name`` is attached to ``node``."""
    return find_directive(node, name) is not None


class DirectiveArguments(dict):
    """Directive arguments with attribute access for templates."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key) from None


def if_directive(node: Any, name: str, caller=None) -> str:
    """Template helper rendering a call block only when a directive is attached.

    Usage inside a template:

        {% call(args) if_directive(type, "app") %}directive{{ args.test }}{% endcall %}

    The block receives the directive's arguments as its single parameter when
    it declares one.
    """
    usage = find_directive(node, name)
    if usage is None or caller is None:
        return ""
    if caller.arguments:
        return caller(DirectiveArguments(usage.arguments))
    return caller()
