"""Annotation vocabulary attached to controller methods.

Public decorators:
- query, mutation: expose a method as a root Query / Mutation field
- logged: require an authenticated caller
- right: require a named authorization grant
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

ANNOTATIONS_ATTR = '__controllerql_annotations__'


@dataclass(frozen=True)
class Query:
    """Marks a method as a field of the root Query type."""


@dataclass(frozen=True)
class Mutation:
    """Marks a method as a field of the root Mutation type."""


@dataclass(frozen=True)
class Logged:
    """The field is only exposed to authenticated callers."""


@dataclass(frozen=True)
class Right:
    """The field is only exposed to callers holding the right ``name``.

    Attributes:
        name: Name of the grant checked against the authorization service.
    """

    name: str

    def get_name(self) -> str:
        return self.name


def get_annotations(func: Any) -> Tuple[Any, ...]:
    """Return the annotations attached to ``func`` (bound methods are unwrapped)."""
    func = getattr(func, '__func__', func)
    return tuple(getattr(func, ANNOTATIONS_ATTR, ()))


def annotate(func: Callable[..., Any], annotation: Any) -> Callable[..., Any]:
    """Attach ``annotation`` to ``func`` and return ``func`` unchanged."""
    target = getattr(func, '__func__', func)
    existing = tuple(getattr(target, ANNOTATIONS_ATTR, ()))
    setattr(target, ANNOTATIONS_ATTR, existing + (annotation,))
    return func


def _marker(annotation: Any, fn: Optional[Callable[..., Any]]):
    def _deco(f):
        if not callable(f):
            raise TypeError(f"@{type(annotation).__name__.lower()} must decorate a callable, got {f!r}")
        return annotate(f, annotation)
    return _deco(fn) if callable(fn) else _deco


def query(fn: Optional[Callable[..., Any]] = None):
    """Expose a controller method as a Query field.

    Works both bare and called:

        class UserController:
            @query
            def get_user(self, id: int) -> User: ...

            @query()
            def list_users(self) -> list[User]: ...
    """
    return _marker(Query(), fn)


def mutation(fn: Optional[Callable[..., Any]] = None):
    """Expose a controller method as a Mutation field."""
    return _marker(Mutation(), fn)


def logged(fn: Optional[Callable[..., Any]] = None):
    """Hide the field unless the authentication service reports a logged-in caller."""
    return _marker(Logged(), fn)


def right(name: str):
    """Hide the field unless the authorization service allows the right ``name``.

    Example:
        class AdminController:
            @query
            @right('CAN_VIEW_USERS')
            def users(self) -> list[User]: ...
    """
    if not isinstance(name, str) or not name:
        raise TypeError("@right requires a non-empty right name, e.g. @right('admin')")
    return _marker(Right(name), None)


__all__ = [
    'Query', 'Mutation', 'Logged', 'Right',
    'query', 'mutation', 'logged', 'right',
    'annotate', 'get_annotations', 'ANNOTATIONS_ATTR',
]
