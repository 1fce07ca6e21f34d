"""Shared fixtures for controllerql tests."""

import pytest

from controllerql import (
    ControllerQueryProvider,
    StaticAuthenticationService,
    StaticAuthorizationService,
)
from tests.schema import USERS, User, make_mapper


@pytest.fixture
def mapper():
    return make_mapper()


@pytest.fixture
def logged_in():
    return StaticAuthenticationService(logged=True)


@pytest.fixture
def logged_out():
    return StaticAuthenticationService(logged=False)


@pytest.fixture
def admin_rights():
    return StaticAuthorizationService(['admin', 'CAN_EDIT_USERS'])


@pytest.fixture
def no_rights():
    return StaticAuthorizationService()


@pytest.fixture
def provider_factory(mapper):
    """Build a ControllerQueryProvider around a controller with the shared mapper."""
    def _make(controller, **kwargs):
        return ControllerQueryProvider(controller, type_mapper=mapper, **kwargs)
    return _make


@pytest.fixture(autouse=True)
def reset_users():
    snapshot = {k: User(id=v.id, name=v.name, email=v.email) for k, v in USERS.items()}
    yield
    USERS.clear()
    USERS.update(snapshot)
