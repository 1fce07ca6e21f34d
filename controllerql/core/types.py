from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from ..exceptions import UnresolvableTypeError


class ScalarKind(Enum):
    INT = 'Int'
    FLOAT = 'Float'
    STRING = 'String'
    BOOLEAN = 'Boolean'

    @property
    def python_type(self) -> type:
        return _SCALAR_PY_TYPES[self]


_SCALAR_PY_TYPES = {
    ScalarKind.INT: int,
    ScalarKind.FLOAT: float,
    ScalarKind.STRING: str,
    ScalarKind.BOOLEAN: bool,
}


class SchemaTypeNode:
    """Base class of resolved GraphQL type nodes.

    A node is either a named type (:class:`ScalarType`, :class:`ObjectType`)
    or a wrapper (:class:`ListType`, :class:`NonNullType`). ``str(node)``
    renders the GraphQL type reference, e.g. ``[Item!]!``.
    """

    def to_annotation(self, *, input: bool = False) -> Any:
        """Translate the node into a Strawberry-compatible Python annotation.

        Strawberry treats bare annotations as non-null, so every node that is
        not wrapped in :class:`NonNullType` becomes ``Optional[...]``.
        """
        return Optional[self._bare_annotation(input)]

    def _bare_annotation(self, input: bool) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def named_type(self) -> 'SchemaTypeNode':
        return self


@dataclass(frozen=True)
class ScalarType(SchemaTypeNode):
    kind: ScalarKind

    def _bare_annotation(self, input: bool) -> Any:
        return self.kind.python_type

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ObjectType(SchemaTypeNode):
    """A domain class mapped to a named GraphQL object type.

    Attributes:
        name: GraphQL type name.
        fqcn: Fully qualified name of the domain class (``module.QualName``).
        output_type: Strawberry type used when the node is a field result.
        input_type: Strawberry input type used when the node is an argument.
        domain_class: The domain class arguments are hydrated into.
    """

    name: str
    fqcn: str
    output_type: Any
    input_type: Any = None
    domain_class: Any = None

    def _bare_annotation(self, input: bool) -> Any:
        if not input:
            return self.output_type
        if self.input_type is None:
            raise UnresolvableTypeError(
                f"Type {self.name} ({self.fqcn}) has no input type and cannot be used as an argument"
            )
        return self.input_type

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListType(SchemaTypeNode):
    of_type: SchemaTypeNode

    def _bare_annotation(self, input: bool) -> Any:
        return List[self.of_type.to_annotation(input=input)]  # type: ignore[index]

    @property
    def named_type(self) -> SchemaTypeNode:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullType(SchemaTypeNode):
    of_type: SchemaTypeNode

    def __post_init__(self):
        if isinstance(self.of_type, NonNullType):
            raise ValueError(f"NonNullType cannot wrap another NonNullType ({self.of_type})")

    def to_annotation(self, *, input: bool = False) -> Any:
        return self.of_type._bare_annotation(input)

    def _bare_annotation(self, input: bool) -> Any:
        return self.of_type._bare_annotation(input)

    @property
    def named_type(self) -> SchemaTypeNode:
        return self.of_type.named_type

    def __str__(self) -> str:
        return f"{self.of_type}!"


def non_null(node: SchemaTypeNode) -> NonNullType:
    """Wrap ``node`` in :class:`NonNullType` unless it already is one."""
    return node if isinstance(node, NonNullType) else NonNullType(node)


INT = ScalarType(ScalarKind.INT)
FLOAT = ScalarType(ScalarKind.FLOAT)
STRING = ScalarType(ScalarKind.STRING)
BOOLEAN = ScalarType(ScalarKind.BOOLEAN)

__all__ = [
    'ScalarKind', 'SchemaTypeNode', 'ScalarType', 'ObjectType', 'ListType', 'NonNullType',
    'non_null', 'INT', 'FLOAT', 'STRING', 'BOOLEAN',
]
