from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from block_editor.config import settings
from block_editor.models.content_type import ContentType

logger = logging.getLogger("block_editor.content_types")


class ContentTypeRegistry:
    """In-memory registry of content types (posts, pages, ...)."""

    def __init__(self) -> None:
        self._types: dict[str, ContentType] = {}

    def load_from_directory(self, directory: Path | str | None = None) -> int:
        """Load content type definitions from all JSON files in the definitions directory."""
        directory = Path(directory or settings.content_types_dir)
        loaded = 0
        for path in sorted(directory.glob("*.json")):
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            entries = data if isinstance(data, list) else data.get("content_types", [])
            for entry in entries:
                try:
                    content_type = ContentType.model_validate(entry)
                except ValidationError as exc:
                    logger.warning("Skipped invalid content type in %s: %s", path.name, exc)
                    continue
                self._types[content_type.name] = content_type
                loaded += 1
        logger.info("Loaded %d content types from %s", loaded, directory)
        return loaded

    def register(self, content_type: ContentType) -> None:
        self._types[content_type.name] = content_type
        logger.debug("Registered content type: %s", content_type.name)

    def get(self, name: str) -> ContentType | None:
        return self._types.get(name)

    def get_post_types(self, **filters: Any) -> list[ContentType]:
        """Content types whose attributes equal every given filter value."""
        return [
            content_type
            for content_type in self._types.values()
            if all(getattr(content_type, key, None) == value for key, value in filters.items())
        ]

    def supports(self, name: str, feature: str) -> bool:
        content_type = self._types.get(name)
        return content_type is not None and feature in content_type.supports
