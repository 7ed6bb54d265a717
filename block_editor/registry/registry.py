from __future__ import annotations

import logging
from typing import Any, Iterable

from block_editor.blocks.block_types import BlockTypeRegistry
from block_editor.content.registry import ContentTypeRegistry
from block_editor.handlers.base import Block
from block_editor.handlers.dispatch import (
    HandlerMap,
    HandlerResolver,
    default_handlers,
    default_resolver,
    handler_name,
)
from block_editor.handlers.loader import load_all_handlers
from block_editor.models.block import BlockDescriptor
from block_editor.schema.context import AppContextFactory
from block_editor.schema.interfaces import (
    CONTEXT_BLOCKS_KEY,
    WITH_EDITOR_BLOCKS,
    register_editor_block_interface,
    register_editor_block_root_fields,
    register_editor_block_supports,
    register_with_editor_blocks_interface,
)
from block_editor.schema.naming import block_type_name
from block_editor.schema.type_registry import TypeRegistry

logger = logging.getLogger("block_editor.registry")


class Registry:
    """Wires the block type registry into a TypeRegistry for one schema build.

    ``init()`` registers the shared block types and interfaces, one object
    type per registered block (through its handler), and the
    ``WithEditorBlocks`` interface on every content type that supports the
    block editor.
    """

    def __init__(
        self,
        type_registry: TypeRegistry,
        *,
        block_types: BlockTypeRegistry,
        content_types: ContentTypeRegistry,
        context_factory: AppContextFactory | None = None,
        handlers: HandlerMap | None = None,
        resolvers: Iterable[HandlerResolver] = (),
    ) -> None:
        self.type_registry = type_registry
        self.block_types = block_types
        self.content_types = content_types
        self.context_factory = context_factory or AppContextFactory()
        if handlers is None:
            load_all_handlers()
            handlers = default_handlers
        self.handlers = handlers
        self.resolvers: list[HandlerResolver] = list(resolvers) or [default_resolver]
        self.registered_blocks: dict[str, BlockDescriptor] = {}
        self.block_handlers: dict[str, Block] = {}
        self._initialized = False

    def init(self) -> None:
        if self._initialized:
            logger.debug("Registry already initialized; skipping")
            return
        self._initialized = True

        register_editor_block_supports(self.type_registry)

        # Register the EditorBlock Interface
        register_editor_block_interface(self.type_registry)
        register_with_editor_blocks_interface(self.type_registry)
        register_editor_block_root_fields(self.type_registry)

        self.pass_blocks_to_context()
        self.register_block_types()
        self.add_block_fields_to_schema()

    def pass_blocks_to_context(self) -> None:
        """Publish the registered blocks on every request context."""

        def add_registered_blocks(config: dict[str, Any]) -> dict[str, Any]:
            config[CONTEXT_BLOCKS_KEY] = self.registered_blocks
            return config

        self.context_factory.add_config_filter(add_registered_blocks)

    def register_block_types(self) -> None:
        registered = self.block_types.get_all_registered()
        if not registered or not isinstance(registered, (dict, list)):
            logger.info("No block types registered; nothing to add to the schema")
            return

        blocks = registered.values() if isinstance(registered, dict) else registered
        self.registered_blocks = {block.name: block for block in blocks}
        for block in blocks:
            self.register_block_type(block)
        logger.info("Registered %d block types to the schema", len(self.block_handlers))

    def register_block_type(self, block: BlockDescriptor) -> Block:
        """Build the handler that declares ``block``'s GraphQL type."""
        type_name = block_type_name(block)
        name = handler_name(type_name)

        # Extensions can point a block at a different handler
        for resolver in self.resolvers:
            name = resolver(name, block, self)

        factory = self.handlers.get(name)
        if factory is None:
            handler = Block(block, self)
        else:
            handler = factory(block, self)
        self.block_handlers[handler.type_name] = handler
        logger.debug("Block %s handled by %r", block.name or type_name, handler)
        return handler

    def add_block_fields_to_schema(self) -> None:
        # Content types that don't show in REST aren't block-editor enabled
        block_editor_post_types = self.content_types.get_post_types(show_in_graphql=True, show_in_rest=True)
        if not block_editor_post_types:
            logger.info("No content types are exposed to both GraphQL and REST")
            return

        supported_post_types = [
            post_type
            for post_type in block_editor_post_types
            if self.content_types.supports(post_type.name, "editor") and post_type.graphql_single_name
        ]
        if not supported_post_types:
            logger.info("No content types support the block editor")
            return

        # TODO: attach only the blocks allowed on each content type instead of
        # one interface exposing every registered block everywhere.
        self.type_registry.register_interfaces_to_types(
            [WITH_EDITOR_BLOCKS],
            [post_type.graphql_single_name for post_type in supported_post_types],
        )
        logger.info(
            "Added %s to content types: %s",
            WITH_EDITOR_BLOCKS,
            ", ".join(post_type.name for post_type in supported_post_types),
        )
