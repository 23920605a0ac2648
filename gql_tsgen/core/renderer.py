"""Render GraphQL type references as TypeScript type expressions."""

from dataclasses import dataclass

from .ir import IRListRef, IRNamedRef, IRNonNullRef, IRTypeRef
from .scalars import ScalarRegistry


@dataclass(frozen=True)
class RenderedType:
    """A type reference rendered for a TypeScript property.

    Attributes:
        text: The TypeScript type expression, e.g. ``string[]``
        is_required: True if the outermost wrapper is non-null
        base_name: The unwrapped TypeScript name, used to resolve imports
        type_name: The unwrapped GraphQL name
        is_list: True if a list wrapper appears at any depth
    """
    text: str
    is_required: bool
    base_name: str
    type_name: str
    is_list: bool = False


def unwrap(ref: IRTypeRef) -> tuple[IRNamedRef, bool]:
    """Strip all wrappers; return the named reference and whether a list was seen."""
    is_list = False
    while not isinstance(ref, IRNamedRef):
        if isinstance(ref, IRListRef):
            is_list = True
        ref = ref.of_type
    return ref, is_list


def render_type(ref: IRTypeRef, scalars: ScalarRegistry) -> RenderedType:
    """Render a type reference.

    Nested lists collapse into a single ``[]`` suffix, so ``[[Int]]`` renders
    as ``number[]``. Only the outermost non-null marker decides whether the
    property is required.
    """
    named, is_list = unwrap(ref)
    base_name = scalars.resolve(named.name)
    text = f"{base_name}[]" if is_list else base_name
    return RenderedType(
        text=text,
        is_required=isinstance(ref, IRNonNullRef),
        base_name=base_name,
        type_name=named.name,
        is_list=is_list,
    )
