from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .extractor import EMPTY, MethodCandidate
from .resolver import TypeResolver
from .types import SchemaTypeNode

_logger = logging.getLogger("controllerql")

QUERY = 'query'
MUTATION = 'mutation'


@dataclass(frozen=True)
class FieldTarget:
    """Deferred invocation target: the controller and the method name to call."""

    owner: Any
    method_name: str

    def bind(self) -> Callable[..., Any]:
        return getattr(self.owner, self.method_name)

    def __call__(self, *args, **kwargs):
        return self.bind()(*args, **kwargs)


@dataclass
class SchemaField:
    """A resolved root field.

    Attributes:
        name: Field name (the method name).
        arguments: Argument name -> type node, in parameter order.
        type: Return type node.
        target: Controller method invoked by the execution runtime.
        defaults: Default values of the arguments that declare one.
        description: First paragraph of the method docstring.
        kind: ``'query'`` or ``'mutation'``.
        hydrator: Converts raw argument values before the target is called.
    """

    name: str
    arguments: Dict[str, SchemaTypeNode]
    type: SchemaTypeNode
    target: FieldTarget
    defaults: Dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None
    kind: str = QUERY
    hydrator: Any = None

    def __str__(self) -> str:
        args = ', '.join(f"{k}: {v}" for k, v in self.arguments.items())
        return f"{self.name}({args}): {self.type}" if args else f"{self.name}: {self.type}"


class FieldAssembler:
    def __init__(self, resolver: TypeResolver, hydrator: Any = None):
        self.resolver = resolver
        self.hydrator = hydrator

    def assemble(self, candidate: MethodCandidate, kind: str = QUERY) -> SchemaField:
        # nullability comes from the annotation of each parameter, docstrings
        # only fill in types the annotation leaves open
        args: Dict[str, SchemaTypeNode] = {}
        defaults: Dict[str, Any] = {}
        for p in candidate.parameters:
            args[p.name] = self.resolver.resolve(p.native_type, p.doc_types, p.nullable)
            if p.default is not EMPTY:
                defaults[p.name] = p.default
        return_node = self.resolver.resolve(
            candidate.return_type, candidate.return_doc_types, candidate.return_nullable
        )
        sf = SchemaField(
            name=candidate.name,
            arguments=args,
            type=return_node,
            target=FieldTarget(candidate.owner, candidate.name),
            defaults=defaults,
            description=candidate.description,
            kind=kind,
            hydrator=self.hydrator,
        )
        _logger.debug("controllerql.assembler: %s %s", kind, sf)
        return sf


__all__ = ['FieldAssembler', 'FieldTarget', 'SchemaField', 'QUERY', 'MUTATION']
