from __future__ import annotations
import collections.abc
import inspect
import types
import typing
from typing import Any, Tuple, Union, get_args, get_origin

NoneType = type(None)

_UNION_ORIGINS = (Union, getattr(types, 'UnionType', Union))
_LIST_ORIGINS = (
    list,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Iterable,
)


def is_union(annotation: Any) -> bool:
    return get_origin(annotation) in _UNION_ORIGINS


def split_optional(annotation: Any) -> Tuple[Any, bool]:
    """Split ``X | None`` into ``(X, True)``; anything else into ``(annotation, False)``.

    A union of several non-None members keeps them together:
    ``int | str | None`` -> ``(Union[int, str], True)``.
    """
    if annotation is inspect.Parameter.empty:
        return Any, False
    if not is_union(annotation):
        return annotation, False
    args = get_args(annotation)
    rest = tuple(a for a in args if a is not NoneType)
    nullable = len(rest) < len(args)
    if len(rest) == 1:
        return rest[0], nullable
    return Union[rest], nullable  # type: ignore[return-value]


def list_element(annotation: Any) -> Tuple[bool, Any]:
    """Return ``(True, element)`` for list-like annotations.

    Bare containers (``list``, ``typing.List``, ``Iterable``, ...) report
    ``Any`` as element type.
    """
    origin = get_origin(annotation)
    if origin is None and annotation in _LIST_ORIGINS:
        origin = annotation
    if origin not in _LIST_ORIGINS:
        return False, None
    args = get_args(annotation)
    return True, (args[0] if args else Any)


def is_ambiguous(annotation: Any) -> bool:
    """True for annotations that leave the type to the docstring: ``Any``,
    no annotation, or a list whose element type is unknown."""
    if annotation is Any or annotation is inspect.Parameter.empty:
        return True
    is_list, element = list_element(annotation)
    return is_list and element is Any


def fqcn(cls: type) -> str:
    """Fully qualified class name, ``module.QualName``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def describe(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return 'mixed'
    if isinstance(annotation, typing.ForwardRef):
        return annotation.__forward_arg__
    if isinstance(annotation, type) and not get_args(annotation):
        return annotation.__name__
    return str(annotation).replace('typing.', '')


__all__ = ['NoneType', 'is_union', 'split_optional', 'list_element', 'is_ambiguous', 'fqcn', 'describe']
