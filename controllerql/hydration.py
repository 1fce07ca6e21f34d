"""Conversion of raw GraphQL argument values into domain objects."""
from __future__ import annotations
import dataclasses
from typing import Any, Protocol

from .core.types import ListType, NonNullType, ObjectType, SchemaTypeNode


class Hydrator(Protocol):
    def hydrate(self, value: Any, type_node: SchemaTypeNode) -> Any: ...


class DefaultHydrator:
    """Builds domain objects from Strawberry input instances.

    Scalars and ``None`` pass through; lists are hydrated element-wise; an
    input instance of an :class:`ObjectType` argument is copied field by field
    into ``domain_class(**fields)``. Values that already are domain objects are
    returned unchanged.
    """

    def hydrate(self, value: Any, type_node: SchemaTypeNode) -> Any:
        if value is None:
            return None
        if isinstance(type_node, NonNullType):
            return self.hydrate(value, type_node.of_type)
        if isinstance(type_node, ListType):
            return [self.hydrate(v, type_node.of_type) for v in value]
        if isinstance(type_node, ObjectType):
            return self._hydrate_object(value, type_node)
        return value

    def _hydrate_object(self, value: Any, type_node: ObjectType) -> Any:
        domain_class = type_node.domain_class
        if domain_class is None or isinstance(value, domain_class):
            return value
        if isinstance(value, dict):
            data = dict(value)
        elif dataclasses.is_dataclass(value):
            data = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        else:
            data = {k: v for k, v in vars(value).items() if not k.startswith('_')}
        return domain_class(**data)


__all__ = ['Hydrator', 'DefaultHydrator']
