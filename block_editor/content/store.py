from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from block_editor.config import settings
from block_editor.models.content_type import ContentNode

logger = logging.getLogger("block_editor.content_store")


class ContentStore:
    """Content nodes keyed by content type and id."""

    def __init__(self) -> None:
        self._nodes: dict[tuple[str, str], ContentNode] = {}

    def load_from_directory(self, directory: Path | str | None = None) -> int:
        directory = Path(directory or settings.content_dir)
        loaded = 0
        for path in sorted(directory.glob("*.json")):
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            entries = data if isinstance(data, list) else data.get("nodes", [])
            for entry in entries:
                try:
                    self.add(ContentNode.model_validate(entry))
                except ValidationError as exc:
                    logger.warning("Skipped invalid content node in %s: %s", path.name, exc)
                    continue
                loaded += 1
        logger.info("Loaded %d content nodes from %s", loaded, directory)
        return loaded

    def add(self, node: ContentNode) -> None:
        self._nodes[(node.content_type, node.id)] = node

    def get(self, content_type: str, node_id: str) -> ContentNode | None:
        return self._nodes.get((content_type, node_id))

    def list_by_type(self, content_type: str) -> list[ContentNode]:
        return [node for (kind, _), node in self._nodes.items() if kind == content_type]

    @property
    def count(self) -> int:
        return len(self._nodes)
