"""controllerql: GraphQL fields derived from decorated controller methods.

Public API:
- query, mutation, logged, right (method decorators)
- ControllerQueryProvider, AggregateQueryProvider, QueryProvider
- StrawberryTypeMapper, DefaultHydrator
- StaticAuthenticationService, StaticAuthorizationService
- build_schema
"""
from .annotations import Query, Mutation, Logged, Right, query, mutation, logged, right
from .core import (
    SchemaField, FieldTarget, SchemaTypeNode, ScalarType, ObjectType, ListType, NonNullType,
    TypeResolver, DocstringTypeReader, AttributeAnnotationReader,
)
from .exceptions import (
    ControllerQLError, UnresolvableTypeError, UnsupportedUnionTypeError,
    MissingReturnTypeError, TypeExpressionError,
)
from .hydration import DefaultHydrator
from .mapper import StrawberryTypeMapper
from .provider import QueryProvider, ControllerQueryProvider, AggregateQueryProvider
from .security import (
    StaticAuthenticationService, StaticAuthorizationService,
    CallbackAuthenticationService, CallbackAuthorizationService,
)
from .schema import build_schema

__version__ = '0.1.0'

__all__ = [
    'Query', 'Mutation', 'Logged', 'Right', 'query', 'mutation', 'logged', 'right',
    'SchemaField', 'FieldTarget', 'SchemaTypeNode', 'ScalarType', 'ObjectType', 'ListType', 'NonNullType',
    'TypeResolver', 'DocstringTypeReader', 'AttributeAnnotationReader',
    'ControllerQLError', 'UnresolvableTypeError', 'UnsupportedUnionTypeError',
    'MissingReturnTypeError', 'TypeExpressionError',
    'DefaultHydrator', 'StrawberryTypeMapper',
    'QueryProvider', 'ControllerQueryProvider', 'AggregateQueryProvider',
    'StaticAuthenticationService', 'StaticAuthorizationService',
    'CallbackAuthenticationService', 'CallbackAuthorizationService',
    'build_schema',
]
