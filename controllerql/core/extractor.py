from __future__ import annotations
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..exceptions import MissingReturnTypeError, UnresolvableTypeError
from .docblock import DocBlockTypeReader
from .utils import is_ambiguous, split_optional

_logger = logging.getLogger("controllerql")

EMPTY = inspect.Parameter.empty


@dataclass
class ParameterCandidate:
    """One parameter of a controller method.

    ``native_type`` has ``None`` split off; ``nullable`` tells whether the
    annotation allowed it or the default is ``None``. ``doc_types`` holds the
    docstring candidates, read only when ``native_type`` is ambiguous.
    """

    name: str
    native_type: Any
    doc_types: List[Any]
    nullable: bool
    default: Any = EMPTY


@dataclass
class MethodCandidate:
    name: str
    method: Callable[..., Any]
    parameters: List[ParameterCandidate]
    return_type: Any
    return_nullable: bool
    return_doc_types: List[Any]
    description: Optional[str] = None
    owner: Any = None


class MetadataExtractor:
    """Reflects over one controller instance.

    Public methods are the plain functions (and static/class methods) whose
    name does not start with ``_``. They are reported in declaration order,
    most-derived class first; an override shadows the base definition.
    """

    def __init__(self, controller: Any, doc_reader: DocBlockTypeReader):
        self.controller = controller
        self.doc_reader = doc_reader

    def public_methods(self) -> Iterator[Tuple[str, Callable[..., Any]]]:
        seen = set()
        for klass in type(self.controller).__mro__:
            if klass is object:
                continue
            for name, value in vars(klass).items():
                if name in seen:
                    continue
                seen.add(name)
                if name.startswith('_'):
                    continue
                if isinstance(value, (staticmethod, classmethod)):
                    value = value.__func__
                if not inspect.isfunction(value):
                    continue
                yield name, getattr(self.controller, name)

    def describe(self, name: str, method: Callable[..., Any]) -> MethodCandidate:
        """Build the :class:`MethodCandidate` of one bound method.

        Raises:
            MissingReturnTypeError: the method has no return annotation.
            UnresolvableTypeError: an annotation cannot be evaluated.
        """
        qualname = getattr(method, '__qualname__', name)
        try:
            sig = inspect.signature(method, eval_str=True)
        except NameError as e:
            raise UnresolvableTypeError(f"Cannot evaluate annotations of {qualname}: {e}") from e
        if sig.return_annotation is inspect.Signature.empty:
            raise MissingReturnTypeError(
                f"{qualname} has no return type annotation; annotate it (use typing.Any "
                f"together with a docstring :rtype: when the type cannot be expressed)"
            )
        params: List[ParameterCandidate] = []
        for p in sig.parameters.values():
            if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                _logger.debug("controllerql.extractor: %s ignores variadic parameter %s", qualname, p.name)
                continue
            native, nullable = split_optional(p.annotation)
            params.append(ParameterCandidate(
                name=p.name,
                native_type=native,
                doc_types=list(self.doc_reader.param_types(method, p.name)) if is_ambiguous(native) else [],
                nullable=nullable or p.default is None,
                default=p.default,
            ))
        return_type, return_nullable = split_optional(sig.return_annotation)
        describe_doc = getattr(self.doc_reader, 'description', None)
        return MethodCandidate(
            name=name,
            method=method,
            parameters=params,
            return_type=return_type,
            return_nullable=return_nullable,
            return_doc_types=list(self.doc_reader.return_types(method)) if is_ambiguous(return_type) else [],
            description=describe_doc(method) if callable(describe_doc) else None,
            owner=self.controller,
        )

    def methods(self) -> Iterator[MethodCandidate]:
        for name, method in self.public_methods():
            yield self.describe(name, method)


__all__ = ['MetadataExtractor', 'MethodCandidate', 'ParameterCandidate']
