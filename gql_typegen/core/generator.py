"""Code generator for GraphQL schemas and documents.

Renders Jinja2 templates to produce TypeScript declarations from the schema
context and transformed documents.

Supports custom templates, either as sources in ``config.templates`` or as
files in ``config.template_dir``:
    config = GeneratorConfig(templates={"index": "{{ config.custom }}"})

Template lookup order:
1. Sources from config.templates
2. User's template directory (if provided)
3. Package default templates
"""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, PackageLoader

from .config import GeneratorConfig
from .directives import has_directive, if_directive
from .hooks import HookRunner
from .ir import SchemaContext, TypeDescriptor, TypeKind
from .naming import capitalize, pascal_case
from .shapes import DocumentContext, Shape

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".ts.j2"


@dataclass
class GeneratedFile:
    """A rendered output file."""
    filename: str
    content: str


def doc_comment(text: str | None, deprecation_reason: str | None = None) -> str:
    """Format a description as a JSDoc comment, or '' when there is nothing to say."""
    lines = text.splitlines() if text else []
    if deprecation_reason:
        lines.append(f"@deprecated {deprecation_reason}")
    if not lines:
        return ""
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    return f"/**\n{body}\n */"


def wrap_type(descriptor: TypeDescriptor, base: str, immutable: bool = False) -> str:
    """Apply the list and null wrapping of ``descriptor`` around ``base``.

    >>> wrap_type(TypeDescriptor("String", is_list=True, item=TypeDescriptor("String")), "string")
    '(string | null)[] | null'
    """
    if descriptor.is_list and descriptor.item is not None:
        inner = wrap_type(descriptor.item, base, immutable)
        if immutable:
            result = f"ReadonlyArray<{inner}>"
        elif "|" in inner or "&" in inner:
            result = f"({inner})[]"
        else:
            result = f"{inner}[]"
    else:
        result = base
    if descriptor.is_nullable:
        result += " | null"
    return result


class CodeGenerator:
    """Generates TypeScript code from a schema context and documents.

    Supports custom templates via ``config.templates`` and
    ``config.template_dir``. Available partials to override:
        - index: the whole output file
        - schema: every schema entity
        - type: one interface (objects, interfaces, inputs, argument types)
        - enum: one enum
        - documents: the namespaces of one document batch
        - selection_set: one result shape
        - fragments: the fragment namespaces of one batch

    Example:
        generator = CodeGenerator(
            schema=build_schema_context(schema),
            config=GeneratorConfig(immutable_types=True),
            documents=[transform_documents(context, documents)],
        )
        content = generator.render()
    """

    def __init__(
        self,
        schema: SchemaContext,
        config: GeneratorConfig | None = None,
        documents: Sequence[DocumentContext] = (),
        hooks: HookRunner | None = None,
    ):
        self.schema = schema
        self.config = config or GeneratorConfig()
        self.documents = list(documents)
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if self.config.templates:
            loaders.append(DictLoader({
                self._template_name(name): source
                for name, source in self.config.templates.items()
            }))
        if self.config.template_dir:
            template_path = Path(self.config.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_typegen", "templates/typescript"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["converted_type"] = self.converted_type
        self.env.filters["wrap_type"] = self._wrap_type_filter
        self.env.filters["get_optionals"] = self.get_optionals
        self.env.filters["field_declaration"] = self.field_declaration
        self.env.filters["typename_type"] = self.typename_type
        self.env.filters["doc_comment"] = doc_comment
        self.env.filters["capitalize_first"] = capitalize
        self.env.filters["pascal_case"] = pascal_case
        self.env.globals["if_directive"] = if_directive
        self.env.tests["has_directive"] = has_directive
        for name, helper in self.config.custom_helpers.items():
            self.env.filters[name] = helper
            self.env.globals[name] = helper

    @staticmethod
    def _template_name(name: str) -> str:
        return name if name.endswith(TEMPLATE_SUFFIX) else f"{name}{TEMPLATE_SUFFIX}"

    # -- template helpers -------------------------------------------------

    @property
    def readonly(self) -> str:
        return "readonly " if self.config.immutable_types else ""

    def base_type(self, field) -> str:
        """Target type name of a field's innermost type, before wrapping."""
        name = field.descriptor.name
        literals = getattr(field, "typename_literals", ())
        if literals:
            return " | ".join(f'"{literal}"' for literal in literals)
        if getattr(field, "shape", None) is None and field.kind == TypeKind.SCALAR:
            return self.config.primitives.get(name, name)
        return name

    def converted_type(self, field) -> str:
        """Full target type of a field, e.g. '(string | null)[] | null'."""
        return wrap_type(field.descriptor, self.base_type(field), self.config.immutable_types)

    def _wrap_type_filter(self, descriptor: TypeDescriptor, base: str) -> str:
        return wrap_type(descriptor, base, self.config.immutable_types)

    def get_optionals(self, field) -> str:
        """The optional marker: '?' for nullable fields unless avoid_optionals."""
        if field.descriptor.is_required or self.config.avoid_optionals:
            return ""
        return "?"

    def field_declaration(self, field) -> str:
        """A complete property line, e.g. 'readonly feed?: (Feed | null)[] | null;'."""
        return (
            f"{self.readonly}{field.name}{self.get_optionals(field)}: "
            f"{self.converted_type(field)};"
        )

    def typename_type(self, shape: Shape, flatten: bool = True) -> str:
        """Type of a shape's __typename field.

        With flattened types, inline-fragment unions refer to the sibling
        shapes by name; inline rendering spells out their literals instead.
        """
        if shape.typename.references and flatten:
            return " | ".join(f'{name}["__typename"]' for name in shape.typename.references)
        literals = _typename_literals(shape)
        if not literals:
            return "string"
        return " | ".join(f'"{literal}"' for literal in literals)

    # -- rendering --------------------------------------------------------

    def _context(self, schema: SchemaContext, generate_schema: bool) -> dict:
        return {
            "schema": schema,
            "types": list(schema.types.values()),
            "interfaces": list(schema.interfaces.values()),
            "unions": list(schema.unions.values()),
            "enums": list(schema.enums.values()),
            "scalars": list(schema.scalars.values()),
            "inputs": list(schema.inputs.values()),
            "argument_types": list(schema.argument_types.values()),
            "directives": schema.directives,
            "documents": self.documents,
            "generate_schema": generate_schema,
            "config": self.config.template_vars(),
            "primitives": self.config.primitives,
            "readonly": self.readonly,
        }

    def render(self, generate_schema: bool = True) -> str:
        """Render the index template and return its content.

        Args:
            generate_schema: Emit every schema entity; when False only the
                enums documents depend on are emitted before the documents
        """
        schema = self.hooks.run_pre_hooks(self.schema)
        template = self.env.get_template(self._template_name("index"))
        return template.render(self._context(schema, generate_schema))

    def compile(self, generate_schema: bool = True) -> list[GeneratedFile]:
        """Render all output files, with post-generation hooks applied."""
        filename = self.config.out_file
        content = self.hooks.run_post_hooks(filename, self.render(generate_schema))
        logger.debug("Rendered %s (%d characters)", filename, len(content))
        return [GeneratedFile(filename=filename, content=content)]

    def generate(self, output_dir: str, generate_schema: bool = True) -> list[str]:
        """Render and write all output files. Returns the written paths."""
        os.makedirs(output_dir, exist_ok=True)
        written = []
        for generated in self.compile(generate_schema):
            full_path = os.path.join(output_dir, generated.filename)
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, "w") as f:
                f.write(generated.content)
            written.append(full_path)
        return written


def _typename_literals(shape: Shape) -> list[str]:
    if not shape.typename.references:
        return list(shape.typename.literals)
    literals: list[str] = []
    for fragment in shape.inline_fragments:
        for literal in _typename_literals(fragment):
            if literal not in literals:
                literals.append(literal)
    return literals
