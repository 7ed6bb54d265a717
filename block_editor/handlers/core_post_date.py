from __future__ import annotations

from block_editor.handlers.base import Block
from block_editor.handlers.dispatch import register_handler


@register_handler()
class CorePostDate(Block):
    def register_fields(self) -> None:
        self.block_registry.type_registry.register_fields(
            self.type_name,
            {
                "test": {
                    "type": "String",
                    "description": "Testing",
                    "resolve": lambda block, info: "test value",
                },
            },
        )
