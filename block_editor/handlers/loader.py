"""Auto-imports all handler modules so their @register_handler decorators run."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

logger = logging.getLogger("block_editor.loader")

HANDLERS_DIR = Path(__file__).parent
_SKIP = {"base", "dispatch", "loader"}


def load_all_handlers() -> int:
    """Import every handler module next to this one to trigger registration."""
    count = 0
    for py_file in sorted(HANDLERS_DIR.rglob("*.py")):
        if py_file.name.startswith("_") or py_file.stem in _SKIP:
            continue
        # Convert path to module: block_editor.handlers.core_post_date
        relative = py_file.relative_to(HANDLERS_DIR.parent.parent)
        module_path = ".".join(relative.with_suffix("").parts)
        try:
            importlib.import_module(module_path)
        except Exception:
            logger.error("Failed to load handler module %s", module_path)
            raise
        count += 1
    logger.debug("Loaded %d handler modules", count)
    return count
