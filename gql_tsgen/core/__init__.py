"""Core modules for GraphQL to TypeScript generation."""

from .auth import Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth
from .config import GeneratorConfig, ScalarOverride, load_config
from .errors import AcquisitionError, ConfigError, GenerationError, WriteError
from .generator import CodeGenerator
from .hooks import AddHeaderHook, HookRunner, PostGenerateHook, PreGenerateHook
from .imports import ImportResolver
from .introspection import IntrospectionClient
from .ir import (
    GeneratedFile,
    IREnum,
    IREnumValue,
    IRField,
    IRInterface,
    IRListRef,
    IRNamedRef,
    IRNonNullRef,
    IRObjectType,
    IRScalar,
    IRSchema,
    IRUnion,
    parse_type_ref,
)
from .parser import SchemaParser, load_schema, schema_from_introspection, schema_to_ir
from .renderer import RenderedType, render_type
from .scalars import (
    ImportedTypeHandler,
    PrimitiveHandler,
    ScalarHandler,
    ScalarRegistry,
    UTCDateHandler,
)

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "CombinedAuth",
    "HeaderAuth",
    "NoAuth",
    # Config
    "GeneratorConfig",
    "ScalarOverride",
    "load_config",
    # Errors
    "AcquisitionError",
    "ConfigError",
    "GenerationError",
    "WriteError",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "PrimitiveHandler",
    "UTCDateHandler",
    "ImportedTypeHandler",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "HookRunner",
    # IR types
    "GeneratedFile",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRInterface",
    "IRListRef",
    "IRNamedRef",
    "IRNonNullRef",
    "IRObjectType",
    "IRScalar",
    "IRSchema",
    "IRUnion",
    "parse_type_ref",
    # Rendering
    "RenderedType",
    "render_type",
    "ImportResolver",
    # Schema loading
    "IntrospectionClient",
    "SchemaParser",
    "load_schema",
    "schema_from_introspection",
    "schema_to_ir",
    # Generator
    "CodeGenerator",
]
