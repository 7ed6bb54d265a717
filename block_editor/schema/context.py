"""Per-request context handed to every resolver as ``info.context``."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger("block_editor.context")

ConfigFilter = Callable[[dict[str, Any]], dict[str, Any]]


class AppContext:
    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config: dict[str, Any] = dict(config or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)


class AppContextFactory:
    """Creates an AppContext per request, running the config filters in order."""

    def __init__(self) -> None:
        self._filters: list[ConfigFilter] = []

    def add_config_filter(self, config_filter: ConfigFilter) -> None:
        self._filters.append(config_filter)

    def create(self, **config: Any) -> AppContext:
        for config_filter in self._filters:
            config = config_filter(config)
        logger.debug("Created request context with keys: %s", sorted(config))
        return AppContext(config)
