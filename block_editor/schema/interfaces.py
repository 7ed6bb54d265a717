"""Shared types every block type and block-enabled content type builds on."""

from __future__ import annotations

import logging
from typing import Any

from block_editor.models.block import BlockDescriptor
from block_editor.schema.naming import block_type_name
from block_editor.schema.type_registry import ROOT_QUERY, TypeRegistry

logger = logging.getLogger("block_editor.interfaces")

EDITOR_BLOCK = "EditorBlock"
EDITOR_BLOCK_SUPPORTS = "EditorBlockSupports"
WITH_EDITOR_BLOCKS = "WithEditorBlocks"

CONTEXT_BLOCKS_KEY = "registered_editor_blocks"


def register_editor_block_supports(type_registry: TypeRegistry) -> None:
    type_registry.register_object_type(
        EDITOR_BLOCK_SUPPORTS,
        {
            "description": "Block editor features a block type supports",
            "fields": {
                "inserter": {"type": "Boolean"},
                "multiple": {"type": "Boolean"},
                "anchor": {"type": "Boolean"},
                "fontSize": {"type": "Boolean"},
                "customClassName": {"type": "Boolean"},
                "html": {"type": "Boolean"},
                "reusable": {"type": "Boolean"},
            },
        },
    )


def register_editor_block_interface(type_registry: TypeRegistry) -> None:
    type_registry.register_interface_type(
        EDITOR_BLOCK,
        {
            "description": "Blocks that can be edited to create content and layouts",
            "resolve_type": _resolve_block_type,
            "fields": {
                "name": {
                    "type": "String",
                    "description": "The name of the block",
                    "resolve": lambda block, info: _block_name(block),
                },
                "blockEditorCategoryName": {
                    "type": "String",
                    "description": "The name of the category the block belongs to",
                    "resolve": lambda block, info: _metadata(block, info, "category"),
                },
                "isDynamic": {
                    "type": "Boolean",
                    "description": "Whether the block is rendered on the server",
                    "resolve": lambda block, info: _metadata(block, info, "is_dynamic"),
                },
                "apiVersion": {
                    "type": "Int",
                    "description": "The API version of the block type",
                    "resolve": lambda block, info: _metadata(block, info, "api_version"),
                },
                "supports": {
                    "type": EDITOR_BLOCK_SUPPORTS,
                    "description": "Editor features the block type supports",
                    "resolve": _resolve_supports,
                },
            },
        },
    )


def register_with_editor_blocks_interface(type_registry: TypeRegistry) -> None:
    type_registry.register_interface_type(
        WITH_EDITOR_BLOCKS,
        {
            "description": "Content that can be built with the block editor",
            "resolve_type": lambda node, info, abstract_type: node.get("__typename"),
            "fields": {
                "editorBlocks": {
                    "type": {"list_of": EDITOR_BLOCK},
                    "description": "The blocks the content is made of",
                    "resolve": _resolve_editor_blocks,
                },
            },
        },
    )


def register_editor_block_root_fields(type_registry: TypeRegistry) -> None:
    type_registry.register_field(
        ROOT_QUERY,
        "registeredEditorBlockNames",
        {
            "type": {"list_of": "String"},
            "description": "Names of the block types registered with the block editor",
            "resolve": lambda root, info: list(info.context.get(CONTEXT_BLOCKS_KEY) or {}),
        },
    )


def _resolve_editor_blocks(node: Any, info) -> list[Any]:
    """The node's blocks, minus blocks whose type is not in the schema."""
    editor_block = info.schema.get_type(EDITOR_BLOCK)
    blocks = []
    for block in node.get("editorBlocks") or []:
        type_name = block_type_name(_block_name(block))
        block_type = info.schema.get_type(type_name)
        if block_type is None or not info.schema.is_sub_type(editor_block, block_type):
            logger.warning("Skipping block %r: type %s is not registered", _block_name(block), type_name)
            continue
        blocks.append(block)
    return blocks


def _block_name(block: Any) -> str | None:
    if isinstance(block, dict):
        return block.get("name")
    return getattr(block, "name", None)


def _resolve_block_type(block: Any, info, abstract_type) -> str:
    return block_type_name(_block_name(block))


def _descriptor(block: Any, info) -> BlockDescriptor | None:
    registered = info.context.get(CONTEXT_BLOCKS_KEY) or {}
    return registered.get(_block_name(block))


def _metadata(block: Any, info, attribute: str) -> Any:
    descriptor = _descriptor(block, info)
    return getattr(descriptor, attribute) if descriptor is not None else None


def _resolve_supports(block: Any, info) -> dict[str, Any] | None:
    descriptor = _descriptor(block, info)
    if descriptor is None:
        return None
    return descriptor.supports.model_dump(by_alias=True)
