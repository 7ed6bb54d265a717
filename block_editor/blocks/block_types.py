from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from block_editor.config import settings
from block_editor.models.block import BlockDescriptor

logger = logging.getLogger("block_editor.block_types")


class BlockTypeRegistry:
    """In-memory registry of the block types known to the editor."""

    def __init__(self) -> None:
        self._blocks: dict[str, BlockDescriptor] = {}

    def load_from_directory(self, directory: Path | str | None = None) -> int:
        """Load block descriptors from all JSON files in the definitions directory."""
        directory = Path(directory or settings.block_definitions_dir)
        loaded = 0
        for path in sorted(directory.glob("*.json")):
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            blocks = data if isinstance(data, list) else data.get("blocks", [])
            for block_data in blocks:
                try:
                    block = BlockDescriptor.model_validate(block_data)
                except ValidationError as exc:
                    logger.warning("Skipped invalid block in %s: %s", path.name, exc)
                    continue
                self._blocks[block.name] = block
                loaded += 1
        logger.info("Loaded %d block types from %s", loaded, directory)
        return loaded

    def register(self, block: BlockDescriptor) -> None:
        if block.name in self._blocks:
            logger.warning("Block type %s is already registered; replacing it", block.name)
        self._blocks[block.name] = block
        logger.debug("Registered block type: %s", block.name)

    def get(self, name: str) -> BlockDescriptor | None:
        return self._blocks.get(name)

    def get_all_registered(self) -> dict[str, BlockDescriptor]:
        """Name -> descriptor, in registration order."""
        return dict(self._blocks)

    @property
    def count(self) -> int:
        return len(self._blocks)
