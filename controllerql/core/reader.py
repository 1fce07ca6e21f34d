from __future__ import annotations
from typing import Any, Optional, Protocol, Type, TypeVar

from ..annotations import get_annotations

A = TypeVar('A')


class AnnotationReader(Protocol):
    def get_method_annotation(self, method: Any, annotation_kind: Type[A]) -> Optional[A]: ...


class AttributeAnnotationReader:
    """Reads annotations stored on functions by the controllerql decorators."""

    def get_method_annotation(self, method: Any, annotation_kind: Type[A]) -> Optional[A]:
        for ann in get_annotations(method):
            if isinstance(ann, annotation_kind):
                return ann
        return None


__all__ = ['AnnotationReader', 'AttributeAnnotationReader']
