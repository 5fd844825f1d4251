"""Core modules for GraphQL type generation."""

from .arguments import synthesize_argument_types
from .config import DEFAULT_PRIMITIVES, GeneratorConfig
from .directives import find_directive, has_directive, if_directive
from .errors import (
    MissingFragmentError,
    NameCollisionError,
    SelectionSchemaMismatchError,
    TypegenError,
)
from .fragments import FragmentResolver
from .generator import CodeGenerator, GeneratedFile
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    Argument,
    ArgumentsType,
    DirectiveDefinition,
    DirectiveUsage,
    EnumType,
    EnumValue,
    Field,
    InputType,
    InterfaceType,
    ObjectType,
    ScalarType,
    SchemaContext,
    TypeDescriptor,
    TypeKind,
    UnionType,
)
from .loader import load_documents, load_schema
from .naming import NameTable, assign_operation_names
from .operations import OperationTransformer, transform_documents
from .schema_builder import SchemaModelBuilder, build_schema_context
from .shapes import (
    DocumentContext,
    FragmentNamespace,
    FragmentReference,
    OperationNamespace,
    Shape,
    ShapeField,
    Typename,
    Variables,
)
from .types import resolve_type

__all__ = [
    # IR types
    "Argument",
    "ArgumentsType",
    "DirectiveDefinition",
    "DirectiveUsage",
    "EnumType",
    "EnumValue",
    "Field",
    "InputType",
    "InterfaceType",
    "ObjectType",
    "ScalarType",
    "SchemaContext",
    "TypeDescriptor",
    "TypeKind",
    "UnionType",
    # Shapes
    "DocumentContext",
    "FragmentNamespace",
    "FragmentReference",
    "OperationNamespace",
    "Shape",
    "ShapeField",
    "Typename",
    "Variables",
    # Schema
    "SchemaModelBuilder",
    "build_schema_context",
    "resolve_type",
    "synthesize_argument_types",
    # Documents
    "FragmentResolver",
    "NameTable",
    "OperationTransformer",
    "assign_operation_names",
    "transform_documents",
    # Directives
    "find_directive",
    "has_directive",
    "if_directive",
    # Config
    "DEFAULT_PRIMITIVES",
    "GeneratorConfig",
    # Errors
    "MissingFragmentError",
    "NameCollisionError",
    "SelectionSchemaMismatchError",
    "TypegenError",
    # Loading
    "load_documents",
    "load_schema",
    # Hooks
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    "PostGenerateHook",
    "PreGenerateHook",
    # Generator
    "CodeGenerator",
    "GeneratedFile",
]
