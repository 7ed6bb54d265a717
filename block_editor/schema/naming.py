"""Schema-safe type names derived from block and content type names."""

from __future__ import annotations

import re

from block_editor.config import settings
from block_editor.models.block import BlockDescriptor

_WORD_BREAK = re.compile(r"[^A-Za-z0-9]+")

# GraphQL names cannot start with a digit
DIGIT_PREFIX = "Block"


def format_type_name(name: str) -> str:
    """Turn any name into a GraphQL type name.

    Non-alphanumeric characters split words; each word gets its first letter
    upper-cased and the rest left as-is, so ``core/post-date`` becomes
    ``CorePostDate`` and ``Core/HTML`` becomes ``CoreHTML``. Names starting
    with a digit are prefixed: ``10up/slider`` becomes ``Block10upSlider``.
    """
    type_name = "".join(word[:1].upper() + word[1:] for word in _WORD_BREAK.split(name) if word)
    if type_name[:1].isdigit():
        type_name = DIGIT_PREFIX + type_name
    return type_name


def block_type_name(block: BlockDescriptor | str | None) -> str:
    """TypeName for a block, falling back to the placeholder name when unnamed."""
    name = block.name if isinstance(block, BlockDescriptor) else block
    return format_type_name(name or settings.fallback_block_name)
