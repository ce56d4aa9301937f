"""Read-only resolver configuration.

The configuration is an explicit value handed to the registry and the
aggregator. It is assembled from the home directory and an optional
``config.toml`` living next to the installed sheets::

    primary_sheet = "cryptic_computer"
    workers = 4

    [sources]
    computer = "https://github.com/cryptic-resolver/cryptic_computer.git"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from cryptic_resolver.core.constants import (
    CONFIG_FILENAME,
    DEFAULT_SOURCES,
    DEFAULT_WORKERS,
    PRIMARY_SHEET,
)
from cryptic_resolver.runtime.home import get_resolver_home

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when config.toml cannot be read or holds invalid values."""


@dataclass
class ResolverConfig:
    """Effective configuration for one CLI invocation."""

    home: Path
    primary_sheet: str = PRIMARY_SHEET
    workers: int = DEFAULT_WORKERS
    sources: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SOURCES))

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILENAME


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data: dict[str, Any] = toml.load(path)
    except (OSError, toml.TomlDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    return data


def load_config(home: Path | None = None) -> ResolverConfig:
    """Build the effective configuration.

    Args:
        home: Explicit sheet home. Defaults to ``get_resolver_home()``.

    Returns:
        ResolverConfig with values from ``config.toml`` applied over defaults.

    Raises:
        ConfigError: If the config file is unreadable or has invalid values.
    """
    config = ResolverConfig(home=home or get_resolver_home())
    if not config.config_file.is_file():
        logger.debug("No config file at %s, using defaults", config.config_file)
        return config

    data = _read_config_file(config.config_file)

    primary = data.get("primary_sheet")
    if primary is not None:
        if not isinstance(primary, str) or not primary.strip():
            raise ConfigError("primary_sheet must be a non-empty string")
        config.primary_sheet = primary.strip()

    workers = data.get("workers")
    if workers is not None:
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigError(f"workers must be a positive integer, got {workers!r}")
        config.workers = workers

    sources = data.get("sources")
    if sources is not None:
        if not isinstance(sources, dict) or not all(
            isinstance(url, str) for url in sources.values()
        ):
            raise ConfigError("[sources] must map sheet names to repository URLs")
        config.sources = dict(sources)

    return config
