"""Object types and root query fields for content exposed to GraphQL."""

from __future__ import annotations

import logging
from typing import Any

from block_editor.content.registry import ContentTypeRegistry
from block_editor.content.store import ContentStore
from block_editor.models.content_type import ContentNode, ContentType
from block_editor.schema.naming import format_type_name
from block_editor.schema.type_registry import ROOT_QUERY, TypeRegistry

logger = logging.getLogger("block_editor.content_schema")


def register_content_node_types(
    type_registry: TypeRegistry,
    content_types: ContentTypeRegistry,
    store: ContentStore,
) -> list[str]:
    """Register a type and root fields for every content type shown in GraphQL.

    Returns the registered type names.
    """
    registered = []
    for content_type in content_types.get_post_types(show_in_graphql=True):
        if not content_type.graphql_single_name:
            logger.warning("Content type %s shows in GraphQL but has no single name", content_type.name)
            continue
        registered.append(_register_content_type(type_registry, content_type, store))
    return registered


def _register_content_type(type_registry: TypeRegistry, content_type: ContentType, store: ContentStore) -> str:
    type_name = format_type_name(content_type.graphql_single_name)
    type_registry.register_object_type(
        type_name,
        {
            "description": f"The {content_type.label or content_type.name} content type",
            "fields": {
                "id": {"type": {"non_null": "ID"}},
                "title": {"type": "String"},
                "contentType": {"type": "String", "description": "Key of the content type"},
            },
        },
    )

    def to_source(node: ContentNode | None) -> dict[str, Any] | None:
        if node is None:
            return None
        return {**node.model_dump(by_alias=True), "__typename": type_name}

    type_registry.register_field(
        ROOT_QUERY,
        content_type.graphql_single_name,
        {
            "type": type_name,
            "description": f"A single {type_name} by id",
            "args": {"id": {"type": {"non_null": "ID"}}},
            "resolve": lambda root, info, id: to_source(store.get(content_type.name, id)),
        },
    )
    if content_type.graphql_plural_name:
        type_registry.register_field(
            ROOT_QUERY,
            content_type.graphql_plural_name,
            {
                "type": {"list_of": type_name},
                "description": f"All {type_name} nodes",
                "resolve": lambda root, info: [to_source(node) for node in store.list_by_type(content_type.name)],
            },
        )
    return type_name
