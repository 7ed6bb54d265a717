"""Block type endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from block_editor.api.dependencies import get_block_types
from block_editor.models.block import BlockDescriptor

router = APIRouter(prefix="/api", tags=["blocks"])


@router.get("/blocks", response_model=list[BlockDescriptor])
async def list_blocks(category: str | None = None) -> list[BlockDescriptor]:
    """List all registered block types, optionally filtered by category."""
    blocks = list(get_block_types().get_all_registered().values())
    if category:
        return [block for block in blocks if block.category == category]
    return blocks


@router.get("/blocks/{name:path}", response_model=BlockDescriptor)
async def get_block(name: str) -> BlockDescriptor:
    """Get a block type by its namespaced name, e.g. core/paragraph."""
    block = get_block_types().get(name)
    if block is None:
        raise HTTPException(status_code=404, detail="Block type not found")
    return block
