"""Programmatic GraphQL type registry.

Types are registered as plain config dicts and only turned into graphql-core
types by ``build_schema()``, so fields and interfaces can be added to a type
by anyone, in any order, before the schema is built.

Field config keys: ``type`` (required), ``description``, ``resolve``,
``args`` and ``deprecation_reason``. A type reference is either a type name
or a wrapper dict: ``{"list_of": ref}`` / ``{"non_null": ref}``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from block_editor.schema.naming import format_type_name

logger = logging.getLogger("block_editor.type_registry")

ROOT_QUERY = "RootQuery"

SCALARS: dict[str, GraphQLNamedType] = {
    "String": GraphQLString,
    "Boolean": GraphQLBoolean,
    "Int": GraphQLInt,
    "Float": GraphQLFloat,
    "ID": GraphQLID,
}

_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class TypeRegistrationError(ValueError):
    """A type or field could not be declared to the schema."""


class TypeRegistry:
    """Collects object and interface type definitions and builds a schema from them."""

    def __init__(self) -> None:
        self._types: dict[str, dict[str, Any]] = {}
        self._attached_interfaces: dict[str, list[str]] = {}
        self.register_object_type(
            ROOT_QUERY,
            {"description": "The root entry point into the Graph", "fields": {}},
        )

    # --- Registration ---

    def register_object_type(self, type_name: str, config: dict[str, Any]) -> None:
        self._register_type("object", type_name, config)

    def register_interface_type(self, type_name: str, config: dict[str, Any]) -> None:
        self._register_type("interface", type_name, config)

    def _register_type(self, kind: str, type_name: str, config: dict[str, Any]) -> None:
        _check_name(type_name, "type")
        if type_name in self._types or type_name in SCALARS:
            logger.warning("Type %s is already registered; keeping the first definition", type_name)
            return
        self._types[type_name] = {
            "kind": kind,
            "description": config.get("description"),
            "interfaces": list(config.get("interfaces", [])),
            "resolve_type": config.get("resolve_type"),
            "fields": {},
        }
        self.register_fields(type_name, config.get("fields") or {})
        logger.debug("Registered %s type %s", kind, type_name)

    def register_fields(self, type_name: str, fields: dict[str, dict[str, Any]]) -> None:
        for field_name, field_config in fields.items():
            self.register_field(type_name, field_name, field_config)

    def register_field(self, type_name: str, field_name: str, config: dict[str, Any]) -> None:
        if type_name not in self._types:
            raise TypeRegistrationError(
                f"Cannot register field {field_name!r}: type {type_name!r} does not exist"
            )
        _check_name(field_name, "field")
        if not isinstance(config, dict) or "type" not in config:
            raise TypeRegistrationError(f"Field {type_name}.{field_name} must declare a type")
        fields = self._types[type_name]["fields"]
        if field_name in fields:
            logger.warning("Field %s.%s is already registered; keeping the first definition", type_name, field_name)
            return
        fields[field_name] = dict(config)

    def register_interfaces_to_types(
        self,
        interface_names: str | Iterable[str],
        type_names: str | Iterable[str],
    ) -> None:
        """Make every type in ``type_names`` implement every interface in ``interface_names``.

        Targets are resolved when the schema is built, so the types may be
        registered after this call.
        """
        if isinstance(interface_names, str):
            interface_names = [interface_names]
        if isinstance(type_names, str):
            type_names = [type_names]
        interface_names = list(interface_names)
        for type_name in type_names:
            attached = self._attached_interfaces.setdefault(format_type_name(type_name), [])
            attached.extend(name for name in interface_names if name not in attached)

    # --- Lookup ---

    def has_type(self, type_name: str) -> bool:
        return type_name in self._types or type_name in SCALARS

    def get_type_config(self, type_name: str) -> dict[str, Any] | None:
        config = self._types.get(type_name)
        if config is None:
            return None
        return {**config, "interfaces": self.get_interfaces(type_name), "fields": dict(config["fields"])}

    def get_interfaces(self, type_name: str) -> list[str]:
        interfaces = list(self._types[type_name]["interfaces"]) if type_name in self._types else []
        for name in self._attached_interfaces.get(type_name, []):
            if name not in interfaces:
                interfaces.append(name)
        return interfaces

    def get_fields(self, type_name: str) -> dict[str, dict[str, Any]]:
        """Own fields merged over the fields of every implemented interface."""
        merged: dict[str, dict[str, Any]] = {}
        for interface_name in self.get_interfaces(type_name):
            merged.update(self._types[interface_name]["fields"])
        merged.update(self._types[type_name]["fields"])
        return merged

    def get_types_implementing(self, interface_name: str) -> list[str]:
        return [name for name in self._types if interface_name in self.get_interfaces(name)]

    # --- Build ---

    def build_schema(self) -> GraphQLSchema:
        self._validate()
        built: dict[str, GraphQLNamedType] = {}
        for type_name, config in self._types.items():
            built[type_name] = self._build_type(type_name, config, built)
        return GraphQLSchema(query=built[ROOT_QUERY], types=list(built.values()))

    def _validate(self) -> None:
        for type_name in self._attached_interfaces:
            if type_name not in self._types:
                raise TypeRegistrationError(f"Cannot attach interfaces to unknown type {type_name!r}")
        if not self._types[ROOT_QUERY]["fields"]:
            raise TypeRegistrationError(f"{ROOT_QUERY} has no fields")
        for type_name in self._types:
            for interface_name in self.get_interfaces(type_name):
                interface = self._types.get(interface_name)
                if interface is None or interface["kind"] != "interface":
                    raise TypeRegistrationError(
                        f"Type {type_name!r} implements unknown interface {interface_name!r}"
                    )
            fields = self.get_fields(type_name)
            if not fields:
                raise TypeRegistrationError(f"Type {type_name!r} has no fields")
            for field_name, field_config in fields.items():
                where = f"{type_name}.{field_name}"
                self._check_ref(field_config["type"], where)
                for arg_name, arg_config in (field_config.get("args") or {}).items():
                    self._check_ref(arg_config.get("type"), f"{where}({arg_name})")

    def _check_ref(self, ref: Any, where: str) -> None:
        if isinstance(ref, dict):
            if len(ref) != 1 or not ref.keys() & {"list_of", "non_null"}:
                raise TypeRegistrationError(f"{where}: invalid type wrapper {ref!r}")
            self._check_ref(next(iter(ref.values())), where)
        elif not isinstance(ref, str) or not self.has_type(ref):
            raise TypeRegistrationError(f"{where}: unknown type {ref!r}")

    def _build_type(
        self,
        type_name: str,
        config: dict[str, Any],
        built: dict[str, GraphQLNamedType],
    ) -> GraphQLNamedType:
        def fields() -> dict[str, GraphQLField]:
            return {
                name: self._build_field(field_config, built)
                for name, field_config in self.get_fields(type_name).items()
            }

        def interfaces() -> list[GraphQLInterfaceType]:
            return [built[name] for name in self.get_interfaces(type_name)]

        if config["kind"] == "interface":
            return GraphQLInterfaceType(
                type_name,
                fields=fields,
                interfaces=interfaces,
                resolve_type=config["resolve_type"],
                description=config["description"],
            )
        return GraphQLObjectType(
            type_name,
            fields=fields,
            interfaces=interfaces,
            description=config["description"],
        )

    def _build_field(self, config: dict[str, Any], built: dict[str, GraphQLNamedType]) -> GraphQLField:
        args = {}
        for arg_name, arg_config in (config.get("args") or {}).items():
            kwargs = {"description": arg_config.get("description")}
            if "default_value" in arg_config:
                kwargs["default_value"] = arg_config["default_value"]
            args[arg_name] = GraphQLArgument(_wrap(arg_config["type"], built), **kwargs)
        return GraphQLField(
            _wrap(config["type"], built),
            args=args,
            resolve=config.get("resolve"),
            description=config.get("description"),
            deprecation_reason=config.get("deprecation_reason"),
        )


def _wrap(ref: Any, built: dict[str, GraphQLNamedType]):
    if isinstance(ref, dict):
        if "list_of" in ref:
            return GraphQLList(_wrap(ref["list_of"], built))
        return GraphQLNonNull(_wrap(ref["non_null"], built))
    return SCALARS.get(ref) or built[ref]


def _check_name(name: Any, what: str) -> None:
    if not isinstance(name, str) or not _NAME_RE.match(name):
        raise TypeRegistrationError(f"Invalid {what} name: {name!r}")
