"""Which handler class declares the fields of which block type.

Handlers are looked up by qualified name, ``<handler_namespace>.<TypeName>``.
Built-in handlers add themselves to ``default_handlers`` with
``@register_handler()``; extensions either register under their own names
and point blocks at them with a resolver, or replace a built-in entry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol

from block_editor.config import settings
from block_editor.models.block import BlockDescriptor

if TYPE_CHECKING:
    from block_editor.handlers.base import Block
    from block_editor.registry.registry import Registry

logger = logging.getLogger("block_editor.handlers")

HandlerFactory = Callable[[BlockDescriptor, "Registry"], "Block"]


class HandlerResolver(Protocol):
    """Picks the handler name to use for a block, given the conventional default."""

    def __call__(self, handler_name: str, block: BlockDescriptor, registry: Registry) -> str: ...


def default_resolver(handler_name: str, block: BlockDescriptor, registry: Registry) -> str:
    return handler_name


def handler_name(type_name: str) -> str:
    return f"{settings.handler_namespace}.{type_name}"


class HandlerMap:
    """Maps qualified handler names to handler classes or factories."""

    def __init__(self, handlers: dict[str, HandlerFactory] | None = None) -> None:
        self._handlers: dict[str, HandlerFactory] = dict(handlers or {})

    def register(self, name: str, factory: HandlerFactory) -> None:
        if not name or not name.strip():
            raise ValueError("handler name must be non-empty")
        name = name.strip()
        if name in self._handlers and self._handlers[name] is not factory:
            logger.info("Replacing handler %s", name)
        self._handlers[name] = factory

    def get(self, name: str) -> HandlerFactory | None:
        return self._handlers.get(name)

    def copy(self) -> HandlerMap:
        return HandlerMap(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers


default_handlers = HandlerMap()


def register_handler(name: str | None = None, handlers: HandlerMap | None = None):
    """Decorator: register a handler class, by default as ``<namespace>.<ClassName>``."""
    target = handlers if handlers is not None else default_handlers

    def decorator(cls):
        target.register(name or handler_name(cls.__name__), cls)
        return cls

    return decorator
