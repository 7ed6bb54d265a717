from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BlockSupports(BaseModel):
    """Editor feature flags a block opts into."""

    inserter: bool | None = None
    multiple: bool | None = None
    anchor: bool | None = None
    font_size: bool | None = Field(default=None, alias="fontSize")
    custom_class_name: bool | None = Field(default=None, alias="customClassName")
    html: bool | None = None
    reusable: bool | None = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class BlockDescriptor(BaseModel):
    name: str = Field(default="", description="Namespaced block name, e.g. core/paragraph")
    title: str = Field(default="", description="Human-readable block title")
    description: str = Field(default="", description="What the block is for")
    category: str | None = Field(default=None, description="Inserter category")
    api_version: int = Field(default=1, alias="apiVersion")
    parent: list[str] | None = None
    keywords: list[str] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    supports: BlockSupports = Field(default_factory=BlockSupports)
    is_dynamic: bool = Field(
        default=False,
        alias="isDynamic",
        description="Whether the block is rendered on the server",
    )

    model_config = {"populate_by_name": True}
