"""Import resolution for generated declarations.

Each declaration gets its own ``ImportResolver``. Fields are added in order;
the resolver decides whether a field's type needs an import and which kind:

    import type {UTCDate} from '@date-fns/utc';   # scalar with an import
    import {Color} from "./enums/color";           # enum, imported as a value
    import type {Item} from "./item";              # everything else
"""

import logging
from collections.abc import Iterable

from .ir import ENUM_DIR, lower_first
from .renderer import RenderedType
from .scalars import PRIMITIVE_TS_TYPES, ScalarRegistry

logger = logging.getLogger(__name__)


def module_name(type_name: str) -> str:
    """Module (file stem) a type is written to."""
    return lower_first(type_name)


def enum_import(type_name: str) -> str:
    return f'import {{{type_name}}} from "./{ENUM_DIR}/{module_name(type_name)}";'


def type_import(type_name: str) -> str:
    return f'import type {{{type_name}}} from "./{module_name(type_name)}";'


class ImportResolver:
    """Collects the import lines one declaration needs."""

    def __init__(
        self,
        current_type: str,
        enum_names: Iterable[str],
        scalars: ScalarRegistry,
    ):
        self.current_type = current_type
        self.enum_names = frozenset(enum_names)
        self.scalars = scalars
        self._seen: set[str] = set()
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Import lines in the order their types were first referenced."""
        return list(self._lines)

    def add(self, rendered: RenderedType):
        """Register one field's rendered type."""
        handler = self.scalars.get(rendered.type_name)
        if handler is not None:
            if handler.import_statement:
                self._append(handler.import_statement, handler.import_statement)
            return

        base_name = rendered.base_name
        if base_name in PRIMITIVE_TS_TYPES or base_name == self.current_type:
            return
        if base_name in self.enum_names:
            self._append(base_name, enum_import(base_name))
        else:
            self._append(base_name, type_import(base_name))

    def _append(self, key: str, line: str):
        if key in self._seen:
            return
        self._seen.add(key)
        self._lines.append(line)
        logger.debug("%s: %s", self.current_type, line)
