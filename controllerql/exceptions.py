"""Errors raised while deriving a schema from controllers."""
from __future__ import annotations


class ControllerQLError(Exception):
    """Base class for all controllerql errors."""


class UnresolvableTypeError(ControllerQLError):
    """A parameter or return type cannot be mapped to any GraphQL type."""


class UnsupportedUnionTypeError(ControllerQLError):
    """More than one non-null type remains for a single value position."""


class MissingReturnTypeError(ControllerQLError):
    """A controller method exposes no return annotation."""


class TypeExpressionError(ControllerQLError, ValueError):
    """A docstring type expression could not be parsed."""


__all__ = [
    'ControllerQLError',
    'UnresolvableTypeError',
    'UnsupportedUnionTypeError',
    'MissingReturnTypeError',
    'TypeExpressionError',
]
