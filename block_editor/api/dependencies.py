"""Shared dependencies for API routers."""

from __future__ import annotations

from functools import lru_cache

from block_editor.blocks.block_types import BlockTypeRegistry
from block_editor.content.registry import ContentTypeRegistry
from block_editor.content.store import ContentStore
from block_editor.schema.builder import SchemaBuild, build_schema


@lru_cache(maxsize=1)
def get_block_types() -> BlockTypeRegistry:
    block_types = BlockTypeRegistry()
    block_types.load_from_directory()
    return block_types


@lru_cache(maxsize=1)
def get_content_types() -> ContentTypeRegistry:
    content_types = ContentTypeRegistry()
    content_types.load_from_directory()
    return content_types


@lru_cache(maxsize=1)
def get_content_store() -> ContentStore:
    store = ContentStore()
    store.load_from_directory()
    return store


@lru_cache(maxsize=1)
def get_schema_build() -> SchemaBuild:
    """Return the cached schema built from the loaded block and content types."""
    return build_schema(get_block_types(), get_content_types(), get_content_store())
