"""Object type registry consulted by the type resolver for class annotations."""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Protocol

from .core.types import ObjectType
from .core.utils import fqcn as _fqcn
from .exceptions import UnresolvableTypeError

_logger = logging.getLogger("controllerql")


class TypeMapper(Protocol):
    def map_class_to_type(self, fqcn: str) -> ObjectType: ...


def _strawberry_name(tp: Any) -> Optional[str]:
    definition = getattr(tp, '__strawberry_definition__', None) or getattr(tp, '_type_definition', None)
    if definition is None:
        return None
    return getattr(definition, 'name', None)


class StrawberryTypeMapper:
    """Maps domain classes to Strawberry object (and input) types.

    Example:
        @strawberry.type
        class UserType:
            id: int
            name: str

        mapper = StrawberryTypeMapper()
        mapper.register(User, UserType, input_type=UserInput)
        # a domain class that is itself a Strawberry type needs no output type
        mapper.register(Item)
    """

    def __init__(self):
        self._types: Dict[str, ObjectType] = {}

    def register(self, domain_class: type, output_type: Any = None, *, input_type: Any = None) -> ObjectType:
        output_type = output_type if output_type is not None else domain_class
        name = _strawberry_name(output_type)
        if name is None:
            raise TypeError(
                f"{output_type!r} is not a Strawberry type; decorate it with @strawberry.type "
                f"or pass output_type= when registering {domain_class!r}"
            )
        key = _fqcn(domain_class)
        node = ObjectType(
            name=name,
            fqcn=key,
            output_type=output_type,
            input_type=input_type,
            domain_class=domain_class,
        )
        self._types[key] = node
        _logger.debug("controllerql.mapper: %s -> %s", key, name)
        return node

    def map_class_to_type(self, fqcn: str) -> ObjectType:
        try:
            return self._types[fqcn]
        except KeyError:
            raise UnresolvableTypeError(f"No GraphQL type is mapped for class {fqcn}") from None


__all__ = ['TypeMapper', 'StrawberryTypeMapper']
