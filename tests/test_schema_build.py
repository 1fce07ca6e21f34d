import re

import pytest
from strawberry.schema.config import StrawberryConfig

from controllerql import AggregateQueryProvider, ControllerQLError, build_schema
from tests.models import User
from tests.schema import (
    CALLS,
    USERS,
    BothMarkersController,
    DerivedController,
    GoogleDocController,
    MutationOnlyController,
    PageController,
    SearchController,
    UserController,
)


@pytest.fixture
def schema(provider_factory):
    return build_schema(
        provider_factory(UserController()),
        provider_factory(SearchController()),
        provider_factory(GoogleDocController()),
    )


def test_sdl_shape(schema):
    sdl = str(schema)
    assert 'getUser(id: Int!): User!' in sdl
    assert 'users: [User!]!' in sdl
    assert 'firstMatch(title: String!): Item' in sdl
    assert 'countItems: Int!' in sdl
    assert 'createUser(user: UserInput!): User!' in sdl
    assert 'renameUser(id: Int!, name: String!): User!' in sdl
    assert 'input UserInput' in sdl
    assert '"""Fetch one user by id."""' in sdl


@pytest.mark.asyncio
async def test_query_calls_controller(schema):
    res = await schema.execute('query { getUser(id: 1) { id name email } }')
    assert res.errors is None, res.errors
    assert res.data == {'getUser': {'id': 1, 'name': 'Alice Johnson', 'email': 'alice@example.com'}}


@pytest.mark.asyncio
async def test_nullable_argument_omitted(schema):
    res = await schema.execute('query { findUser(name: "bob") { id } nobody: findUser(name: "zed", exact: true) { id } }')
    assert res.errors is None, res.errors
    assert res.data == {'findUser': {'id': 2}, 'nobody': None}


@pytest.mark.asyncio
async def test_docstring_typed_arguments_and_defaults(schema):
    res = await schema.execute('query { search(query: ["ap"]) { id title } tags(itemId: 1) }')
    assert res.errors is None, res.errors
    assert res.data['search'] == [{'id': 1, 'title': 'Apple'}, {'id': 2, 'title': 'Apricot'}]
    assert res.data['tags'] == ['fruit', 'red']
    assert CALLS == [('search', ['ap'], 10)]


@pytest.mark.asyncio
async def test_google_docstring_arguments(schema):
    res = await schema.execute('query { tagged(tags: ["fruit", "red"], matchAll: true) { title } }')
    assert res.errors is None, res.errors
    assert res.data == {'tagged': [{'title': 'Apple'}]}


@pytest.mark.asyncio
async def test_async_controller_method(schema):
    res = await schema.execute('query { countItems }')
    assert res.errors is None, res.errors
    assert res.data == {'countItems': 3}


@pytest.mark.asyncio
async def test_mutation_hydrates_input_into_domain_object(schema):
    res = await schema.execute('mutation { createUser(user: {name: "Carol"}) { id name email } }')
    assert res.errors is None, res.errors
    assert res.data == {'createUser': {'id': 3, 'name': 'Carol', 'email': None}}
    (name, user), = CALLS
    assert name == 'create_user'
    assert isinstance(user, User)
    assert USERS[3] is user


def test_execute_sync(provider_factory):
    schema = build_schema(provider_factory(DerivedController()))
    res = schema.execute_sync('{ health status motd version }')
    assert res.errors is None, res.errors
    assert res.data == {'health': True, 'status': 'derived', 'motd': 'hello', 'version': '1'}


def test_same_method_on_both_roots(provider_factory):
    schema = build_schema(provider_factory(BothMarkersController()))
    assert schema.execute_sync('query { ping }').data == {'ping': 'pong'}
    assert schema.execute_sync('mutation { ping }').data == {'ping': 'pong'}


def test_auth_filtered_fields_are_absent(provider_factory, logged_out, no_rights):
    schema = build_schema(
        provider_factory(UserController(), authentication_service=logged_out, authorization_service=no_rights),
    )
    sdl = str(schema)
    assert 'getUser' in sdl
    assert not re.search(r'\bme:', sdl)
    assert not re.search(r'\busers:', sdl)
    assert 'renameUser' not in sdl
    res = schema.execute_sync('{ me { id } }')
    assert res.errors


def test_strawberry_config_is_passed_through(provider_factory):
    schema = build_schema(
        provider_factory(UserController()),
        strawberry_config=StrawberryConfig(auto_camel_case=False),
    )
    res = schema.execute_sync('{ get_user(id: 2) { name } }')
    assert res.errors is None, res.errors
    assert res.data == {'get_user': {'name': 'Bob Smith'}}


def test_aggregate_provider(provider_factory):
    schema = build_schema(AggregateQueryProvider([
        provider_factory(DerivedController()),
        provider_factory(MutationOnlyController()),
    ]))
    assert schema.execute_sync('mutation { reset }').data == {'reset': True}


def test_schema_needs_a_query(provider_factory):
    with pytest.raises(ControllerQLError, match='No query field'):
        build_schema(provider_factory(MutationOnlyController()))


def test_duplicate_field_names(provider_factory):
    with pytest.raises(ControllerQLError, match="Duplicate Query field 'health'"):
        build_schema(provider_factory(DerivedController()), provider_factory(DerivedController()))


def test_none_default_argument_is_optional(provider_factory):
    schema = build_schema(provider_factory(PageController()))
    assert 'page(size: Int = null): Int!' in str(schema)
    res = schema.execute_sync('{ a: page b: page(size: null) c: page(size: 2) }')
    assert res.errors is None, res.errors
    assert res.data == {'a': 3, 'b': 3, 'c': 2}
