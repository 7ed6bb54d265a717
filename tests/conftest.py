import pytest
from fastapi.testclient import TestClient

from block_editor.blocks.block_types import BlockTypeRegistry
from block_editor.content.registry import ContentTypeRegistry
from block_editor.content.store import ContentStore
from block_editor.main import app
from block_editor.models.content_type import ContentType
from block_editor.schema.type_registry import TypeRegistry


@pytest.fixture()
def block_types():
    reg = BlockTypeRegistry()
    reg.load_from_directory()
    return reg


@pytest.fixture()
def content_types():
    reg = ContentTypeRegistry()
    reg.load_from_directory()
    return reg


@pytest.fixture()
def store():
    s = ContentStore()
    s.load_from_directory()
    return s


@pytest.fixture()
def type_registry():
    return TypeRegistry()


@pytest.fixture()
def post_type():
    return ContentType(
        name="post",
        show_in_rest=True,
        show_in_graphql=True,
        supports=["title", "editor"],
        graphql_single_name="post",
        graphql_plural_name="posts",
    )


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
