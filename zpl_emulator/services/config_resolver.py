"""Resolve label configuration from built-in defaults and an optional override file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import orjson
from pydantic import ValidationError

from zpl_emulator.contracts.errors import ConfigLoadError
from zpl_emulator.contracts.label_contract import ConfigurationOverride, LabelConfiguration

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def default_configuration() -> LabelConfiguration:
    """Return the built-in label configuration."""
    return LabelConfiguration()


class ConfigResolver:
    """Loads the override file, if present, on top of the defaults.

    The merge is shallow: every key present in the override file replaces the
    matching default, keys it omits keep their default value.
    """

    def __init__(self, source: Path) -> None:
        """Initialize the resolver.

        Args:
            source: Location of the JSON override file. It does not need to exist.
        """
        self._source = source

    def resolve(self) -> LabelConfiguration:
        """Return the merged configuration.

        Raises:
            ConfigLoadError: The override file exists but is unreadable or malformed.
        """
        defaults = default_configuration()
        if not self._source.exists():
            logger.debug("No override configuration at %s; using defaults", self._source)
            return defaults

        override = self._load_override()
        return defaults.model_copy(update=override.model_dump(exclude_none=True))

    def _load_override(self) -> ConfigurationOverride:
        try:
            raw = self._source.read_bytes()
        except OSError as exc:
            raise ConfigLoadError(self._source, exc.strerror or str(exc)) from exc

        try:
            document = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise ConfigLoadError(self._source, f"invalid JSON ({exc})") from exc

        if not isinstance(document, dict):
            raise ConfigLoadError(self._source, "expected a JSON object at the top level")

        try:
            return ConfigurationOverride.model_validate(document)
        except ValidationError as exc:
            raise ConfigLoadError(self._source, str(exc)) from exc
