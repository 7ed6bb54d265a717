"""Tests for the GraphQL TypeRegistry."""

import logging

import pytest
from graphql import graphql_sync

from block_editor.schema.type_registry import ROOT_QUERY, TypeRegistrationError, TypeRegistry


def _add_hello(type_registry: TypeRegistry) -> None:
    type_registry.register_field(ROOT_QUERY, "hello", {"type": "String", "resolve": lambda root, info: "world"})


class TestRegistration:
    def test_root_query_registered(self, type_registry):
        assert type_registry.has_type(ROOT_QUERY)

    def test_scalars_known(self, type_registry):
        for name in ("String", "Boolean", "Int", "Float", "ID"):
            assert type_registry.has_type(name)

    def test_register_object_type(self, type_registry):
        type_registry.register_object_type("Thing", {"description": "A thing", "fields": {"size": {"type": "Int"}}})
        config = type_registry.get_type_config("Thing")
        assert config["kind"] == "object"
        assert config["description"] == "A thing"
        assert list(config["fields"]) == ["size"]

    def test_unknown_type_config_is_none(self, type_registry):
        assert type_registry.get_type_config("Nope") is None

    @pytest.mark.parametrize("name", ["", "1Thing", "Core/HTML", "has space", None])
    def test_invalid_type_name_raises(self, type_registry, name):
        with pytest.raises(TypeRegistrationError, match="Invalid type name"):
            type_registry.register_object_type(name, {"fields": {}})

    def test_duplicate_type_keeps_first(self, type_registry, caplog):
        type_registry.register_object_type("Thing", {"fields": {"a": {"type": "Int"}}})
        with caplog.at_level(logging.WARNING, logger="block_editor.type_registry"):
            type_registry.register_object_type("Thing", {"fields": {"b": {"type": "Int"}}})
        assert list(type_registry.get_type_config("Thing")["fields"]) == ["a"]
        assert "already registered" in caplog.text

    def test_scalar_name_cannot_be_reused(self, type_registry):
        type_registry.register_object_type("String", {"fields": {"a": {"type": "Int"}}})
        assert type_registry.get_type_config("String") is None

    def test_fields_on_unknown_type_raise(self, type_registry):
        with pytest.raises(TypeRegistrationError, match="does not exist"):
            type_registry.register_fields("Missing", {"a": {"type": "String"}})

    def test_field_without_type_raises(self, type_registry):
        type_registry.register_object_type("Thing", {"fields": {}})
        with pytest.raises(TypeRegistrationError, match="must declare a type"):
            type_registry.register_field("Thing", "a", {"description": "no type"})

    def test_invalid_field_name_raises(self, type_registry):
        type_registry.register_object_type("Thing", {"fields": {}})
        with pytest.raises(TypeRegistrationError, match="Invalid field name"):
            type_registry.register_field("Thing", "bad-name", {"type": "String"})

    def test_duplicate_field_keeps_first(self, type_registry):
        type_registry.register_object_type("Thing", {"fields": {"a": {"type": "Int"}}})
        type_registry.register_field("Thing", "a", {"type": "String"})
        assert type_registry.get_type_config("Thing")["fields"]["a"]["type"] == "Int"


class TestInterfaces:
    def test_object_inherits_interface_fields(self, type_registry):
        type_registry.register_interface_type("Named", {"fields": {"name": {"type": "String"}}})
        type_registry.register_object_type("Thing", {"interfaces": ["Named"], "fields": {"size": {"type": "Int"}}})
        assert list(type_registry.get_fields("Thing")) == ["name", "size"]

    def test_attach_before_type_exists(self, type_registry):
        type_registry.register_interface_type("Named", {"fields": {"name": {"type": "String"}}})
        type_registry.register_interfaces_to_types("Named", ["thing"])
        type_registry.register_object_type("Thing", {"fields": {"size": {"type": "Int"}}})
        assert type_registry.get_interfaces("Thing") == ["Named"]
        assert type_registry.get_types_implementing("Named") == ["Thing"]

    def test_attach_is_not_duplicated(self, type_registry):
        type_registry.register_interface_type("Named", {"fields": {"name": {"type": "String"}}})
        type_registry.register_object_type("Thing", {"interfaces": ["Named"], "fields": {}})
        type_registry.register_interfaces_to_types(["Named"], ["Thing"])
        type_registry.register_interfaces_to_types(["Named"], ["Thing"])
        assert type_registry.get_interfaces("Thing") == ["Named"]


class TestBuildSchema:
    def test_build_and_execute(self, type_registry):
        _add_hello(type_registry)
        result = graphql_sync(type_registry.build_schema(), "{ hello }")
        assert result.errors is None
        assert result.data == {"hello": "world"}

    def test_empty_root_query_raises(self, type_registry):
        with pytest.raises(TypeRegistrationError, match="RootQuery has no fields"):
            type_registry.build_schema()

    def test_unknown_field_type_raises(self, type_registry):
        _add_hello(type_registry)
        type_registry.register_object_type("Thing", {"fields": {"other": {"type": "Missing"}}})
        with pytest.raises(TypeRegistrationError, match="Thing.other: unknown type 'Missing'"):
            type_registry.build_schema()

    def test_invalid_wrapper_raises(self, type_registry):
        _add_hello(type_registry)
        type_registry.register_object_type("Thing", {"fields": {"other": {"type": {"many": "String"}}}})
        with pytest.raises(TypeRegistrationError, match="invalid type wrapper"):
            type_registry.build_schema()

    def test_unknown_interface_raises(self, type_registry):
        _add_hello(type_registry)
        type_registry.register_object_type("Thing", {"interfaces": ["Missing"], "fields": {"a": {"type": "Int"}}})
        with pytest.raises(TypeRegistrationError, match="unknown interface"):
            type_registry.build_schema()

    def test_attach_to_unknown_type_raises(self, type_registry):
        _add_hello(type_registry)
        type_registry.register_interface_type("Named", {"fields": {"name": {"type": "String"}}})
        type_registry.register_interfaces_to_types("Named", "ghost")
        with pytest.raises(TypeRegistrationError, match="unknown type 'Ghost'"):
            type_registry.build_schema()

    def test_type_without_fields_raises(self, type_registry):
        _add_hello(type_registry)
        type_registry.register_object_type("Empty", {"fields": {}})
        with pytest.raises(TypeRegistrationError, match="has no fields"):
            type_registry.build_schema()

    def test_wrappers_and_args(self, type_registry):
        type_registry.register_field(
            ROOT_QUERY,
            "echo",
            {
                "type": {"list_of": {"non_null": "String"}},
                "args": {"word": {"type": {"non_null": "String"}}, "times": {"type": "Int", "default_value": 2}},
                "resolve": lambda root, info, word, times: [word] * times,
            },
        )
        schema = type_registry.build_schema()
        assert str(schema.query_type.fields["echo"].type) == "[String!]"
        result = graphql_sync(schema, '{ echo(word: "hi") }')
        assert result.data == {"echo": ["hi", "hi"]}

    def test_interface_dispatch(self, type_registry):
        type_registry.register_interface_type(
            "Named",
            {
                "fields": {"name": {"type": "String"}},
                "resolve_type": lambda value, info, abstract_type: value["kind"],
            },
        )
        type_registry.register_object_type("Cat", {"interfaces": ["Named"], "fields": {"meows": {"type": "Boolean"}}})
        type_registry.register_field(
            ROOT_QUERY,
            "pets",
            {"type": {"list_of": "Named"}, "resolve": lambda root, info: [{"kind": "Cat", "name": "Tom", "meows": True}]},
        )
        result = graphql_sync(type_registry.build_schema(), "{ pets { name ... on Cat { meows } } }")
        assert result.errors is None
        assert result.data == {"pets": [{"name": "Tom", "meows": True}]}
