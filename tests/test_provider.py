import pytest

from controllerql import AggregateQueryProvider, ControllerQueryProvider, logged, query
from controllerql.core.assembler import MUTATION, QUERY
from controllerql.exceptions import (
    MissingReturnTypeError,
    UnresolvableTypeError,
    UnsupportedUnionTypeError,
)
from tests.models import User
from tests.schema import (
    BothMarkersController,
    DerivedController,
    GoogleDocController,
    MissingReturnController,
    MutationOnlyController,
    PageController,
    ProseDocController,
    SearchController,
    UndocumentedController,
    UnionReturnController,
    UnknownDocTypeController,
    UnmappedController,
    UserController,
)


def _signatures(fields):
    return [str(f) for f in fields]


def test_user_queries_with_default_services(provider_factory):
    provider = provider_factory(UserController())
    assert _signatures(provider.list_queries()) == [
        'get_user(id: Int!): User!',
        'find_user(name: String!, exact: Boolean): User',
        'me: User!',
        'users: [User!]!',
    ]
    assert _signatures(provider.list_mutations()) == [
        'create_user(user: User!): User!',
        'rename_user(id: Int!, name: String!): User!',
    ]


def test_field_details(provider_factory):
    controller = UserController()
    get_user, find_user, *_ = provider_factory(controller).list_queries()
    assert get_user.kind == QUERY
    assert get_user.description == 'Fetch one user by id.'
    assert get_user.defaults == {}
    assert find_user.defaults == {'exact': None}
    assert find_user.description is None
    assert get_user.target.owner is controller
    assert get_user.target(id=2).name == 'Bob Smith'


def test_mutation_fields(provider_factory):
    create_user = provider_factory(UserController()).list_mutations()[0]
    assert create_user.kind == MUTATION
    assert create_user.description == 'Register a new user.'
    assert create_user.arguments['user'].named_type.domain_class is User


def test_logged_out_hides_logged_fields(provider_factory, logged_out, admin_rights):
    provider = provider_factory(
        UserController(), authentication_service=logged_out, authorization_service=admin_rights,
    )
    assert [f.name for f in provider.list_queries()] == ['get_user', 'find_user', 'users']
    assert [f.name for f in provider.list_mutations()] == ['create_user']


def test_missing_right_hides_fields(provider_factory, logged_in, no_rights):
    provider = provider_factory(
        UserController(), authentication_service=logged_in, authorization_service=no_rights,
    )
    assert [f.name for f in provider.list_queries()] == ['get_user', 'find_user', 'me']
    assert [f.name for f in provider.list_mutations()] == ['create_user']


def test_docstring_types(provider_factory):
    assert _signatures(provider_factory(SearchController()).list_queries()) == [
        'search(query: [String!]!, limit: Int!): [Item!]!',
        'first_match(title: String!): Item',
        'tags(item_id: Int!): [String!]!',
        'count_items: Int!',
    ]


def test_google_docstring_types(provider_factory):
    assert _signatures(provider_factory(GoogleDocController()).list_queries()) == [
        'tagged(tags: [String!], match_all: Boolean!): [Item!]!',
    ]


def test_inherited_and_static_methods(provider_factory):
    fields = provider_factory(DerivedController()).list_queries()
    assert [f.name for f in fields] == ['health', 'status', 'motd', 'version']
    by_name = {f.name: f for f in fields}
    assert by_name['status'].target() == 'derived'
    assert by_name['motd'].target() == 'hello'
    assert by_name['version'].target() == '1'


def test_method_with_both_markers_is_listed_twice(provider_factory):
    provider = provider_factory(BothMarkersController())
    assert [f.name for f in provider.list_queries()] == ['ping']
    assert [f.name for f in provider.list_mutations()] == ['ping']


def test_no_mutations(provider_factory):
    assert provider_factory(SearchController()).list_mutations() == []
    assert provider_factory(MutationOnlyController()).list_queries() == []


def test_fields_are_rebuilt_on_every_call(mapper):
    state = {'logged': True}

    class Flip:
        def is_logged(self):
            return state['logged']

    provider = ControllerQueryProvider(UserController(), type_mapper=mapper, authentication_service=Flip())
    assert 'me' in [f.name for f in provider.list_queries()]
    state['logged'] = False
    assert 'me' not in [f.name for f in provider.list_queries()]


@pytest.mark.parametrize('controller, error, message', [
    (UnionReturnController(), UnsupportedUnionTypeError, 'UnionReturnController.value: Union types are not supported'),
    (UndocumentedController(), UnresolvableTypeError, "UndocumentedController.value: Don't know how to handle type"),
    (MissingReturnController(), MissingReturnTypeError, 'MissingReturnController.value'),
    (UnmappedController(), UnresolvableTypeError, 'No GraphQL type is mapped for class tests.models.Unmapped'),
    (UnknownDocTypeController(), UnresolvableTypeError, 'Widget'),
])
def test_errors_name_the_controller_method(provider_factory, controller, error, message):
    with pytest.raises(error, match=message):
        provider_factory(controller).list_queries()


def test_denied_fields_are_not_resolved(provider_factory, logged_out):
    class Guarded:
        @query
        @logged
        def broken(self, anything) -> int:
            return 1

    assert provider_factory(Guarded(), authentication_service=logged_out).list_queries() == []


def test_aggregate_provider_keeps_provider_order(provider_factory):
    aggregate = AggregateQueryProvider([
        provider_factory(DerivedController()),
        provider_factory(BothMarkersController()),
        provider_factory(MutationOnlyController()),
    ])
    assert [f.name for f in aggregate.list_queries()] == ['health', 'status', 'motd', 'version', 'ping']
    assert [f.name for f in aggregate.list_mutations()] == ['ping', 'reset']


def test_aggregate_of_nothing():
    aggregate = AggregateQueryProvider([])
    assert aggregate.list_queries() == []
    assert aggregate.list_mutations() == []


def test_docstring_prose_is_ignored_for_concrete_types(provider_factory):
    assert _signatures(provider_factory(ProseDocController()).list_queries()) == [
        'count(limit: Int!): Int!',
        'titles(tags: [String!]!): [String!]!',
    ]


def test_none_default_makes_argument_nullable(provider_factory):
    page, = provider_factory(PageController()).list_queries()
    assert str(page) == 'page(size: Int): Int!'
    assert page.defaults == {'size': None}
