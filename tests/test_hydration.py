from controllerql import DefaultHydrator
from controllerql.core.types import INT, ListType, NonNullType, ObjectType
from tests.models import Item, User, UserInput


def _user_node(mapper):
    return NonNullType(mapper.map_class_to_type('tests.models.User'))


def test_scalars_and_none_pass_through(mapper):
    hydrator = DefaultHydrator()
    assert hydrator.hydrate(3, NonNullType(INT)) == 3
    assert hydrator.hydrate(None, _user_node(mapper)) is None


def test_input_instance_becomes_domain_object(mapper):
    user = DefaultHydrator().hydrate(UserInput(name='Carol', email='c@example.com'), _user_node(mapper))
    assert isinstance(user, User)
    assert (user.name, user.email, user.id) == ('Carol', 'c@example.com', 0)


def test_dict_becomes_domain_object(mapper):
    user = DefaultHydrator().hydrate({'name': 'Dan'}, _user_node(mapper))
    assert user == User(name='Dan')


def test_lists_are_hydrated_element_wise(mapper):
    node = NonNullType(ListType(_user_node(mapper)))
    users = DefaultHydrator().hydrate([UserInput(name='A'), None], node)
    assert users == [User(name='A'), None]


def test_domain_objects_are_kept(mapper):
    existing = User(name='Eve', id=7)
    assert DefaultHydrator().hydrate(existing, _user_node(mapper)) is existing


def test_type_without_domain_class_is_left_alone():
    node = ObjectType(name='Item', fqcn='tests.models.Item', output_type=Item)
    raw = {'id': 1}
    assert DefaultHydrator().hydrate(raw, node) is raw
