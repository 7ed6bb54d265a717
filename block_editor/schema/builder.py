from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from graphql import GraphQLSchema

from block_editor.blocks.block_types import BlockTypeRegistry
from block_editor.content.registry import ContentTypeRegistry
from block_editor.content.schema import register_content_node_types
from block_editor.content.store import ContentStore
from block_editor.handlers.dispatch import HandlerMap, HandlerResolver
from block_editor.registry.registry import Registry
from block_editor.schema.context import AppContext, AppContextFactory
from block_editor.schema.type_registry import TypeRegistry

logger = logging.getLogger("block_editor.builder")


@dataclass
class SchemaBuild:
    """Everything produced by one schema build pass."""

    schema: GraphQLSchema
    registry: Registry
    context_factory: AppContextFactory

    def create_context(self, **config) -> AppContext:
        return self.context_factory.create(**config)


def build_schema(
    block_types: BlockTypeRegistry,
    content_types: ContentTypeRegistry,
    store: ContentStore | None = None,
    *,
    handlers: HandlerMap | None = None,
    resolvers: Iterable[HandlerResolver] = (),
) -> SchemaBuild:
    type_registry = TypeRegistry()
    register_content_node_types(type_registry, content_types, store or ContentStore())

    context_factory = AppContextFactory()
    registry = Registry(
        type_registry,
        block_types=block_types,
        content_types=content_types,
        context_factory=context_factory,
        handlers=handlers,
        resolvers=resolvers,
    )
    registry.init()

    schema = type_registry.build_schema()
    logger.info("Built schema with %d block types", len(registry.block_handlers))
    return SchemaBuild(schema=schema, registry=registry, context_factory=context_factory)
