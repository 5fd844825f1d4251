"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the schema context before rendering or transform the generated code after.

Example usage:
    from gql_typegen.core.hooks import HookRunner, AddHeaderHook, FilterTypesHook

    runner = HookRunner()
    runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
    runner.add_post_hook(AddHeaderHook("// Generated file - do not edit"))
    CodeGenerator(context, hooks=runner).render()
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from .ir import SchemaContext


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the schema context before rendering and
    return the context to render.
    """

    def pre_generate(self, context: SchemaContext) -> SchemaContext:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive each rendered file and may transform it
    before it is written.
    """

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to filter schema entities by name prefix/suffix.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def _filter(self, entities: dict) -> dict:
        return {k: v for k, v in entities.items() if self._should_include(k)}

    def pre_generate(self, context: SchemaContext) -> SchemaContext:
        """Return a copy of the context without the filtered entities."""
        return replace(
            context,
            types=self._filter(context.types),
            interfaces=self._filter(context.interfaces),
            unions=self._filter(context.unions),
            enums=self._filter(context.enums),
            scalars=self._filter(context.scalars),
            inputs=self._filter(context.inputs),
            argument_types=self._filter(context.argument_types),
        )


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, context: SchemaContext) -> SchemaContext:
        for hook in self.pre_hooks:
            context = hook.pre_generate(context)
        return context

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
