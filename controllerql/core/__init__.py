# Core subpackage: reflection, type resolution and field assembly.
from .types import (
    ScalarKind, SchemaTypeNode, ScalarType, ObjectType, ListType, NonNullType,
    INT, FLOAT, STRING, BOOLEAN, non_null,
)
from .reader import AnnotationReader, AttributeAnnotationReader
from .docblock import DocBlockTypeReader, DocstringTypeReader, parse_type_expression
from .extractor import MetadataExtractor, MethodCandidate, ParameterCandidate
from .gate import AuthorizationGate
from .resolver import TypeResolver
from .assembler import FieldAssembler, FieldTarget, SchemaField, QUERY, MUTATION

__all__ = [
    'ScalarKind', 'SchemaTypeNode', 'ScalarType', 'ObjectType', 'ListType', 'NonNullType',
    'INT', 'FLOAT', 'STRING', 'BOOLEAN', 'non_null',
    'AnnotationReader', 'AttributeAnnotationReader',
    'DocBlockTypeReader', 'DocstringTypeReader', 'parse_type_expression',
    'MetadataExtractor', 'MethodCandidate', 'ParameterCandidate',
    'AuthorizationGate', 'TypeResolver',
    'FieldAssembler', 'FieldTarget', 'SchemaField', 'QUERY', 'MUTATION',
]
