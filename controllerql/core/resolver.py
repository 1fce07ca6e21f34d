"""Maps Python annotations and docstring candidates to GraphQL type nodes.

The native annotation is authoritative. Docstring candidates are only read
when the annotation is ambiguous: ``Any``, a missing annotation, or a list
without (or with an ``Any``) element type. In that case exactly one non-null
candidate must remain; ``None`` among the candidates makes the position
nullable.
"""
from __future__ import annotations
import inspect
import typing
from typing import Any, Sequence

from ..exceptions import UnresolvableTypeError, UnsupportedUnionTypeError
from .types import (
    BOOLEAN, FLOAT, INT, STRING,
    ListType, NonNullType, SchemaTypeNode,
)
from .utils import NoneType, describe, fqcn, is_ambiguous, is_union, list_element, split_optional

if typing.TYPE_CHECKING:  # pragma: no cover
    from ..mapper import TypeMapper

_SCALARS = {
    int: INT,
    str: STRING,
    float: FLOAT,
    bool: BOOLEAN,
}


class TypeResolver:
    def __init__(self, type_mapper: 'TypeMapper'):
        self.type_mapper = type_mapper

    def is_ambiguous(self, native_type: Any) -> bool:
        return is_ambiguous(native_type)

    def resolve(self, native_type: Any, doc_types: Sequence[Any], nullable: bool) -> SchemaTypeNode:
        """Resolve one value position into a schema type node.

        Args:
            native_type: The Python annotation, with ``None`` already split off.
            doc_types: Docstring candidates for the same position (may contain ``NoneType``).
            nullable: Whether the native annotation allows ``None``.

        Raises:
            UnresolvableTypeError: nothing usable is known about the type.
            UnsupportedUnionTypeError: several non-null candidates remain.
        """
        if self.is_ambiguous(native_type):
            if not nullable:
                nullable = any(t is NoneType for t in doc_types)
            candidates = [t for t in doc_types if t is not NoneType]
            if not candidates:
                raise UnresolvableTypeError(f"Don't know how to handle type {describe(native_type)}")
            if len(candidates) > 1:
                raise UnsupportedUnionTypeError(
                    "Union types are not supported (yet): "
                    + ' | '.join(describe(t) for t in candidates)
                )
            node = self.to_graphql_type(candidates[0])
        else:
            node = self.to_graphql_type(native_type)
        if not nullable:
            node = NonNullType(node)
        return node

    def to_graphql_type(self, annotation: Any) -> SchemaTypeNode:
        """Convert a concrete annotation. Does not deal with top-level nullability."""
        if annotation is Any:
            raise UnresolvableTypeError("Don't know how to handle type mixed")
        scalar = _SCALARS.get(annotation) if isinstance(annotation, type) else None
        if scalar is not None:
            return scalar
        if is_union(annotation):
            inner, _ = split_optional(annotation)
            if is_union(inner):
                raise UnsupportedUnionTypeError(f"Union types are not supported (yet): {describe(inner)}")
            return self.to_graphql_type(inner)
        is_list, element = list_element(annotation)
        if is_list:
            if element is Any:
                raise UnresolvableTypeError(f"Don't know how to handle type {describe(annotation)}")
            inner, element_nullable = split_optional(element)
            element_node = self.to_graphql_type(inner)
            if not element_nullable:
                element_node = NonNullType(element_node)
            return ListType(element_node)
        if inspect.isclass(annotation) and annotation is not NoneType and not typing.get_args(annotation):
            return self.type_mapper.map_class_to_type(fqcn(annotation))
        raise UnresolvableTypeError(f"Don't know how to handle type {describe(annotation)}")


__all__ = ['TypeResolver']
