"""Query providers: the public facade turning controllers into schema fields."""
from __future__ import annotations
import abc
import logging
from typing import Any, Iterable, List, Optional, Type

from .annotations import Mutation, Query
from .core.assembler import MUTATION, QUERY, FieldAssembler, SchemaField
from .core.docblock import DocBlockTypeReader, DocstringTypeReader
from .core.extractor import MetadataExtractor
from .core.gate import AuthorizationGate
from .core.reader import AnnotationReader, AttributeAnnotationReader
from .core.resolver import TypeResolver
from .exceptions import ControllerQLError
from .hydration import DefaultHydrator, Hydrator
from .mapper import TypeMapper
from .security import (
    AuthenticationService,
    AuthorizationService,
    default_authentication_service,
    default_authorization_service,
)

_logger = logging.getLogger("controllerql")


class QueryProvider(abc.ABC):
    """Source of root Query and Mutation fields."""

    @abc.abstractmethod
    def list_queries(self) -> List[SchemaField]:
        ...

    @abc.abstractmethod
    def list_mutations(self) -> List[SchemaField]:
        ...


class ControllerQueryProvider(QueryProvider):
    """A query provider that looks for queries in a "controller".

    Every public method decorated with ``@query`` (resp. ``@mutation``) and
    accepted by the authorization gate becomes a field. Fields are rebuilt on
    every call, in method declaration order. A method carrying both markers is
    reported by both ``list_queries()`` and ``list_mutations()``.

    Example:
        class UserController:
            @query
            def get_user(self, id: int) -> User: ...

            @mutation
            @logged
            @right('CAN_EDIT_USERS')
            def rename_user(self, id: int, name: str) -> User: ...

        provider = ControllerQueryProvider(UserController(), type_mapper=mapper)
        provider.list_queries()   # [get_user(id: Int!): User!]
    """

    def __init__(
        self,
        controller: Any,
        *,
        type_mapper: TypeMapper,
        annotation_reader: Optional[AnnotationReader] = None,
        doc_reader: Optional[DocBlockTypeReader] = None,
        hydrator: Optional[Hydrator] = None,
        authentication_service: Optional[AuthenticationService] = None,
        authorization_service: Optional[AuthorizationService] = None,
    ):
        self.controller = controller
        self.type_mapper = type_mapper
        self.annotation_reader = annotation_reader or AttributeAnnotationReader()
        self.doc_reader = doc_reader or DocstringTypeReader()
        self.hydrator = hydrator or DefaultHydrator()
        self.authentication_service = default_authentication_service(authentication_service)
        self.authorization_service = default_authorization_service(authorization_service)

    def list_queries(self) -> List[SchemaField]:
        return self._fields_by_annotation(Query, QUERY)

    def list_mutations(self) -> List[SchemaField]:
        return self._fields_by_annotation(Mutation, MUTATION)

    def _fields_by_annotation(self, annotation_kind: Type[Any], kind: str) -> List[SchemaField]:
        extractor = MetadataExtractor(self.controller, self.doc_reader)
        gate = AuthorizationGate(self.annotation_reader, self.authentication_service, self.authorization_service)
        assembler = FieldAssembler(TypeResolver(self.type_mapper), self.hydrator)
        out: List[SchemaField] = []
        for name, method in extractor.public_methods():
            if self.annotation_reader.get_method_annotation(method, annotation_kind) is None:
                continue
            if not gate.is_authorized(method):
                continue
            try:
                out.append(assembler.assemble(extractor.describe(name, method), kind))
            except ControllerQLError as e:
                raise type(e)(f"{type(self.controller).__name__}.{name}: {e}") from e
        _logger.debug(
            "controllerql.provider: %s exposes %d %s field(s)",
            type(self.controller).__name__, len(out), kind,
        )
        return out


class AggregateQueryProvider(QueryProvider):
    """Concatenates the fields of several providers, in provider order."""

    def __init__(self, providers: Iterable[QueryProvider]):
        self.providers = list(providers)

    def list_queries(self) -> List[SchemaField]:
        return [f for p in self.providers for f in p.list_queries()]

    def list_mutations(self) -> List[SchemaField]:
        return [f for p in self.providers for f in p.list_mutations()]


__all__ = ['QueryProvider', 'ControllerQueryProvider', 'AggregateQueryProvider']
