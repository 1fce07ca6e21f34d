"""Authentication and authorization services consulted by the authorization gate."""
from __future__ import annotations
from typing import Callable, Iterable, Optional, Protocol


class AuthenticationService(Protocol):
    def is_logged(self) -> bool: ...


class AuthorizationService(Protocol):
    def is_allowed(self, right: str) -> bool: ...


class StaticAuthenticationService:
    """Reports a fixed login state. ``StaticAuthenticationService(logged=False)`` hides every ``@logged`` field."""

    def __init__(self, logged: bool = True):
        self.logged = logged

    def is_logged(self) -> bool:
        return self.logged


class StaticAuthorizationService:
    """Grants a fixed set of rights.

    Args:
        rights: Names of the granted rights.
        allow_all: Grant every right regardless of ``rights``.
    """

    def __init__(self, rights: Iterable[str] = (), *, allow_all: bool = False):
        self.rights = frozenset(rights)
        self.allow_all = allow_all

    def is_allowed(self, right: str) -> bool:
        return self.allow_all or right in self.rights


class CallbackAuthenticationService:
    def __init__(self, is_logged: Callable[[], bool]):
        self._is_logged = is_logged

    def is_logged(self) -> bool:
        return bool(self._is_logged())


class CallbackAuthorizationService:
    def __init__(self, is_allowed: Callable[[str], bool]):
        self._is_allowed = is_allowed

    def is_allowed(self, right: str) -> bool:
        return bool(self._is_allowed(right))


def default_authentication_service(service: Optional[AuthenticationService] = None) -> AuthenticationService:
    return service if service is not None else StaticAuthenticationService(logged=True)


def default_authorization_service(service: Optional[AuthorizationService] = None) -> AuthorizationService:
    return service if service is not None else StaticAuthorizationService(allow_all=True)


__all__ = [
    'AuthenticationService', 'AuthorizationService',
    'StaticAuthenticationService', 'StaticAuthorizationService',
    'CallbackAuthenticationService', 'CallbackAuthorizationService',
]
