"""Test configuration and fixtures for controllerql."""

import logging

import pytest

# Surface the library's debug output (gate decisions, assembled fields) on failures
logging.getLogger("controllerql").setLevel(logging.DEBUG)

from tests.fixtures import (  # noqa: E402,F401
    mapper,
    logged_in,
    logged_out,
    admin_rights,
    no_rights,
    provider_factory,
    reset_users,
)
from tests.schema import CALLS  # noqa: E402


@pytest.fixture(autouse=True)
def clear_calls():
    CALLS.clear()
    yield
    CALLS.clear()
