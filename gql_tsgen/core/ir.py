"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that represent the GraphQL named types the
generator understands, plus the recursive type references used by fields.
"""

import re
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class IRNamedRef:
    """Reference to a named type, e.g. ``String``."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IRListRef:
    """List wrapper, e.g. ``[String]``."""
    of_type: "IRTypeRef"

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class IRNonNullRef:
    """Non-null wrapper, e.g. ``String!``."""
    of_type: "IRTypeRef"

    def __str__(self) -> str:
        return f"{self.of_type}!"


IRTypeRef = Union[IRNamedRef, IRListRef, IRNonNullRef]

_NAME_RE = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")


def parse_type_ref(text: str) -> IRTypeRef:
    """Parse a printed GraphQL type reference such as ``[String!]!``."""
    ref, rest = _parse_ref(text.replace(" ", ""))
    if rest:
        raise ValueError(f"Unexpected trailing input in type reference: {text!r}")
    return ref


def _parse_ref(text: str) -> tuple[IRTypeRef, str]:
    if text.startswith("["):
        inner, rest = _parse_ref(text[1:])
        if not rest.startswith("]"):
            raise ValueError(f"Unclosed list in type reference: {text!r}")
        ref: IRTypeRef = IRListRef(inner)
        rest = rest[1:]
    else:
        match = _NAME_RE.match(text)
        if not match:
            raise ValueError(f"Expected a type name in: {text!r}")
        ref = IRNamedRef(match.group())
        rest = text[match.end():]
    if rest.startswith("!"):
        return IRNonNullRef(ref), rest[1:]
    return ref, rest


@dataclass
class IRField:
    """Represents a field in a GraphQL object type or interface."""
    name: str
    type_ref: IRTypeRef


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    value: str = ""

    def __post_init__(self):
        if not self.value:
            self.value = self.name


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue] = field(default_factory=list)


@dataclass
class IRObjectType:
    """Represents a GraphQL object type."""
    name: str
    fields: list[IRField] = field(default_factory=list)


@dataclass
class IRInterface:
    """Represents a GraphQL interface type."""
    name: str
    fields: list[IRField] = field(default_factory=list)


@dataclass
class IRScalar:
    """Represents a GraphQL scalar type."""
    name: str


@dataclass
class IRUnion:
    """Represents a GraphQL union type."""
    name: str
    members: list[str] = field(default_factory=list)


IRNamedType = Union[IRObjectType, IRInterface, IREnum, IRScalar, IRUnion]


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema.

    ``types`` keeps the order of the source schema's type map.
    """
    types: dict[str, IRNamedType] = field(default_factory=dict)

    def add(self, named_type: IRNamedType):
        """Add a named type, keyed by its name."""
        self.types[named_type.name] = named_type

    @property
    def enums(self) -> dict[str, IREnum]:
        return {k: v for k, v in self.types.items() if isinstance(v, IREnum)}

    @property
    def objects(self) -> dict[str, IRObjectType]:
        return {k: v for k, v in self.types.items() if isinstance(v, IRObjectType)}

    @property
    def interfaces(self) -> dict[str, IRInterface]:
        return {k: v for k, v in self.types.items() if isinstance(v, IRInterface)}

    @property
    def scalars(self) -> dict[str, IRScalar]:
        return {k: v for k, v in self.types.items() if isinstance(v, IRScalar)}

    @property
    def unions(self) -> dict[str, IRUnion]:
        return {k: v for k, v in self.types.items() if isinstance(v, IRUnion)}


ENUM_DIR = "enums"


def lower_first(name: str) -> str:
    """Lowercase the first letter: ``UserRole`` -> ``userRole``."""
    return name[:1].lower() + name[1:]


@dataclass(frozen=True)
class GeneratedFile:
    """One generated TypeScript declaration, ready to be written."""
    type_name: str
    is_enum: bool
    content: str

    @property
    def relative_path(self) -> str:
        """Path relative to the output directory."""
        file_name = f"{lower_first(self.type_name)}.ts"
        return f"{ENUM_DIR}/{file_name}" if self.is_enum else file_name
