"""TypeScript code generator for GraphQL schemas.

Renders Jinja2 templates to produce one TypeScript declaration per named
type in the IR.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(ir, output_dir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Generation runs in two passes. Enums are synthesized first and their names
frozen into a set; every other declaration is then synthesized against that
set so fields referencing an enum get a value import instead of a type-only
import.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from .errors import WriteError
from .hooks import HookRunner
from .imports import ImportResolver
from .ir import (
    ENUM_DIR,
    GeneratedFile,
    IREnum,
    IRField,
    IRInterface,
    IRNamedType,
    IRObjectType,
    IRScalar,
    IRSchema,
    IRUnion,
)
from .renderer import render_type
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)

# Names reserved by the introspection system (__Schema, __Type, ...)
META_TYPE_PREFIX = "__"


class CodeGenerator:
    """Generates TypeScript declarations from GraphQL IR.

    Supports custom templates via the template_dir parameter.
    Templates in template_dir take precedence over built-in templates.

    Available templates to override:
        - interface.ts.j2: object and interface types
        - enum.ts.j2: enum types
        - alias.ts.j2: scalar and union type aliases

    Example:
        generator = CodeGenerator(
            ir=schema,
            output_dir="./src/types/graphql",
            ignore={"Query", "Mutation"},
        )
        generator.generate()
    """

    def __init__(
        self,
        ir: IRSchema,
        output_dir: str,
        ignore: Iterable[str] = (),
        scalars: Optional[ScalarRegistry] = None,
        template_dir: Optional[str] = None,
        hooks: Optional[HookRunner] = None,
    ):
        """Initialize the code generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            output_dir: Directory where generated files will be written
            ignore: Type names to skip entirely
            scalars: Scalar registry; defaults to the built-in table
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Optional pre/post generation hooks
        """
        self.ir = ir
        self.output_dir = output_dir
        self.ignore = frozenset(ignore)
        self.scalars = scalars or ScalarRegistry()
        self.template_dir = template_dir
        self.hooks = hooks or HookRunner()

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        # TypeScript output, nothing to escape
        self.env = Environment(loader=ChoiceLoader(loaders), autoescape=False)

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.env.get_template(template_name).render(context)

    # -- declaration synthesis ------------------------------------------------

    def synthesize(
        self, named_type: IRNamedType, enum_names: Iterable[str] = ()
    ) -> Optional[str]:
        """Produce the TypeScript declaration for one named type.

        Returns None for any kind without a TypeScript rendering.
        """
        if isinstance(named_type, IRObjectType):
            return self._render_interface(
                named_type.name, named_type.fields, enum_names, honor_nullability=True
            )
        if isinstance(named_type, IREnum):
            return self._render("enum.ts.j2", {
                "name": named_type.name,
                "values": named_type.values,
            })
        if isinstance(named_type, IRScalar):
            return self._render("alias.ts.j2", {
                "name": named_type.name,
                "target": self.scalars.map_scalar(named_type.name),
            })
        if isinstance(named_type, IRInterface):
            # Interface properties are always emitted as required.
            return self._render_interface(
                named_type.name, named_type.fields, enum_names, honor_nullability=False
            )
        if isinstance(named_type, IRUnion):
            return self._render("alias.ts.j2", {
                "name": named_type.name,
                "target": " | ".join(named_type.members),
            })
        return None

    def _render_interface(
        self,
        name: str,
        fields: List[IRField],
        enum_names: Iterable[str],
        honor_nullability: bool,
    ) -> str:
        resolver = ImportResolver(name, enum_names, self.scalars)
        properties = []
        for field in fields:
            rendered = render_type(field.type_ref, self.scalars)
            resolver.add(rendered)
            properties.append({
                "name": field.name,
                "type": rendered.text,
                "required": rendered.is_required or not honor_nullability,
            })
        return self._render("interface.ts.j2", {
            "name": name,
            "imports": resolver.lines,
            "properties": properties,
        })

    # -- schema walk ----------------------------------------------------------

    def _should_skip(self, name: str) -> bool:
        if name.startswith(META_TYPE_PREFIX):
            return True
        if name in self.ignore:
            logger.debug("Skipping ignored type %s", name)
            return True
        return self.scalars.has(name)

    def collect_enums(self) -> List[GeneratedFile]:
        """First pass: synthesize every enum declaration."""
        files = []
        for name, named_type in self.ir.types.items():
            if self._should_skip(name) or not isinstance(named_type, IREnum):
                continue
            content = self.synthesize(named_type)
            if content:
                files.append(GeneratedFile(named_type.name, True, content))
        return files

    def generate_declarations(self, enum_names: frozenset) -> List[GeneratedFile]:
        """Second pass: synthesize every non-enum declaration."""
        files = []
        for name, named_type in self.ir.types.items():
            if self._should_skip(name) or isinstance(named_type, IREnum):
                continue
            content = self.synthesize(named_type, enum_names)
            if content:
                files.append(GeneratedFile(named_type.name, False, content))
            else:
                logger.debug("No declaration produced for %s", name)
        return files

    def build(self) -> List[GeneratedFile]:
        """Run both passes and return every generated declaration."""
        self.ir = self.hooks.run_pre_hooks(self.ir)
        enum_files = self.collect_enums()
        enum_names = frozenset(f.type_name for f in enum_files)
        logger.debug("Enum registry: %s", sorted(enum_names))
        return enum_files + self.generate_declarations(enum_names)

    def generate(self) -> List[Path]:
        """Generate and write all declaration files."""
        return self.write_files(self.build())

    # -- output ---------------------------------------------------------------

    def write_files(self, files: Iterable[GeneratedFile]) -> List[Path]:
        """Write generated declarations below the output directory."""
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            os.makedirs(os.path.join(self.output_dir, ENUM_DIR), exist_ok=True)
        except OSError as e:
            raise WriteError(f"Cannot create output directory {self.output_dir}: {e}") from e

        written = []
        for generated in files:
            full_path = Path(self.output_dir) / generated.relative_path
            content = self.hooks.run_post_hooks(generated.relative_path, generated.content)
            try:
                full_path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise WriteError(f"Cannot write {full_path}: {e}") from e
            logger.debug("Wrote %s", full_path)
            written.append(full_path)
        return written
