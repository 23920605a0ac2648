"""Exceptions raised by gql-tsgen.

Every failure is fatal to the run. The CLI catches ``GenerationError`` and
reports it; nothing below it retries.
"""

from typing import Any


class GenerationError(Exception):
    """Base class for all gql-tsgen errors."""


class ConfigError(GenerationError):
    """Missing or invalid configuration."""


class AcquisitionError(GenerationError):
    """The schema could not be fetched or parsed."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class WriteError(GenerationError):
    """Generated files could not be written."""
