from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ContentType(BaseModel):
    name: str = Field(..., description="Unique content type key, e.g. post")
    label: str = Field(default="", description="Human-readable label")
    public: bool = True
    show_in_rest: bool = False
    show_in_graphql: bool = False
    supports: list[str] = Field(
        default_factory=list,
        description="Features enabled for this content type, e.g. editor",
    )
    graphql_single_name: str | None = None
    graphql_plural_name: str | None = None


class ContentNode(BaseModel):
    """A stored piece of content with its blocks already parsed."""

    id: str
    content_type: str = Field(..., alias="contentType")
    title: str = ""
    editor_blocks: list[dict[str, Any]] = Field(default_factory=list, alias="editorBlocks")

    model_config = {"populate_by_name": True}
