"""Tests for directive extraction and predicates."""

from graphql import parse

from gql_typegen.core.directives import (
    directives_from_nodes,
    find_directive,
    has_directive,
    if_directive,
)
from gql_typegen.core.ir import DirectiveUsage, ObjectType


class FakeCaller:
    """Stands in for a Jinja call block."""

    def __init__(self, arguments=()):
        self.arguments = arguments
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return "body"


def _type(*directives):
    return ObjectType(name="Query", fields=[], directives=list(directives))


class TestDirectivesFromNodes:
    """Tests for reading directive usages from AST nodes."""

    def test_reads_arguments(self):
        document = parse('type Query @app(test: "123", n: 2, flags: [A, B]) { a: String }')
        [usage] = directives_from_nodes(document.definitions[0])
        assert usage.name == "app"
        assert usage.arguments == {"test": "123", "n": 2, "flags": ["A", "B"]}

    def test_skips_missing_nodes(self):
        document = parse("type Query @a { x: String } extend type Query @b")
        usages = directives_from_nodes(None, *document.definitions)
        assert [u.name for u in usages] == ["a", "b"]

    def test_directive_without_arguments(self):
        document = parse("type Query @a @b(n: 1) { x: String }")
        [definition] = document.definitions
        definition.directives[0].arguments = None
        usages = directives_from_nodes(definition)
        assert [(u.name, u.arguments) for u in usages] == [("a", {}), ("b", {"n": 1})]


class TestPredicates:
    """Tests for find_directive and has_directive."""

    def test_find(self):
        node = _type(DirectiveUsage("app", {"test": "1"}))
        assert find_directive(node, "app").arguments == {"test": "1"}
        assert find_directive(node, "other") is None

    def test_has(self):
        assert has_directive(_type(DirectiveUsage("app")), "app")
        assert not has_directive(_type(), "app")

    def test_node_without_directives(self):
        assert not has_directive(object(), "app")


class TestIfDirective:
    """Tests for the if_directive template helper."""

    def test_renders_when_present(self):
        caller = FakeCaller()
        assert if_directive(_type(DirectiveUsage("app")), "app", caller=caller) == "body"
        assert caller.calls == [()]

    def test_empty_when_absent(self):
        caller = FakeCaller()
        assert if_directive(_type(), "app", caller=caller) == ""
        assert caller.calls == []

    def test_passes_arguments(self):
        caller = FakeCaller(arguments=("args",))
        if_directive(_type(DirectiveUsage("app", {"test": "123"})), "app", caller=caller)
        [(args,)] = caller.calls
        assert args["test"] == "123"
        assert args.test == "123"
