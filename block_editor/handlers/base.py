from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from block_editor.models.block import BlockDescriptor
from block_editor.schema.interfaces import EDITOR_BLOCK
from block_editor.schema.naming import block_type_name

if TYPE_CHECKING:
    from block_editor.registry.registry import Registry

logger = logging.getLogger("block_editor.handlers")


class Block:
    """Declares the GraphQL type of one block kind.

    Constructing a handler registers its object type straight away; subclasses
    add block-specific fields by overriding ``register_fields()``.
    """

    def __init__(self, block: BlockDescriptor, block_registry: Registry) -> None:
        self.block = block
        self.block_registry = block_registry
        self.type_name = block_type_name(block)
        self.register_block_type()
        self.register_fields()

    def register_block_type(self) -> None:
        self.block_registry.type_registry.register_object_type(
            self.type_name,
            {
                "description": self.block.description or f"A block used for editing the site ({self.block.name})",
                "interfaces": [EDITOR_BLOCK],
                "fields": {},
            },
        )
        logger.debug("Registered block type %s as %s", self.block.name, self.type_name)

    def register_fields(self) -> None:
        """Declare fields specific to this block kind. The generic handler declares none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(block={self.block.name!r}, type_name={self.type_name!r})"
