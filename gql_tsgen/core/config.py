"""Configuration for gql-tsgen.

Settings come from ``graphql.config.json`` in the working directory, or the
file passed with ``--config``; command-line options override them.

Example config:
    {
        "schema": "https://api.example.com/graphql",
        "outDir": "./src/types/graphql",
        "ignore": ["Query", "Mutation"],
        "scalars": {
            "DateTime": "string",
            "Decimal": {"type": "Big", "import": "import type {Big} from 'big.js';"}
        }
    }
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .auth import Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth
from .errors import ConfigError
from .hooks import AddHeaderHook, HookRunner
from .scalars import ImportedTypeHandler, ScalarRegistry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "graphql.config.json"
DEFAULT_OUT_DIR = "./src/types/graphql"


class ScalarOverride(BaseModel):
    """TypeScript mapping for a custom scalar."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    import_statement: Optional[str] = Field(default=None, alias="import")


class GeneratorConfig(BaseModel):
    """Validated generator settings."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_source: Optional[str] = Field(default=None, alias="schema")
    out_dir: str = Field(default=DEFAULT_OUT_DIR, alias="outDir")
    ignore: list[str] = Field(default_factory=list)
    headers: dict[str, str] = Field(default_factory=dict)
    scalars: dict[str, Union[str, ScalarOverride]] = Field(default_factory=dict)
    header: Optional[str] = None
    template_dir: Optional[str] = Field(default=None, alias="templateDir")
    timeout: float = 30.0

    def require_schema(self) -> str:
        """Return the schema source, raising ConfigError when none is set."""
        if not self.schema_source:
            raise ConfigError("No schema configured: set 'schema' in the config file or pass --schema")
        return self.schema_source

    def build_scalar_registry(self) -> ScalarRegistry:
        """Built-in scalar table plus the configured overrides."""
        registry = ScalarRegistry()
        for name, mapping in self.scalars.items():
            if isinstance(mapping, str):
                registry.register(name, ImportedTypeHandler(mapping))
            else:
                registry.register(name, ImportedTypeHandler(mapping.type, mapping.import_statement))
        return registry

    def build_hooks(self) -> HookRunner:
        runner = HookRunner()
        if self.header:
            runner.add_post_hook(AddHeaderHook(self.header))
        return runner

    def build_auth(self, token: Optional[str] = None) -> Auth:
        handlers: list[Auth] = []
        if self.headers:
            handlers.append(HeaderAuth(self.headers))
        if token:
            handlers.append(BearerAuth(token))
        if not handlers:
            return NoAuth()
        return CombinedAuth(*handlers)


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Load and validate a JSON config file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Error parsing config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        config = GeneratorConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}:\n{e}") from e
    logger.debug("Loaded config from %s", path)
    return config
