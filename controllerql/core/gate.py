from __future__ import annotations
import logging
from typing import Any

from ..annotations import Logged, Right
from ..security import AuthenticationService, AuthorizationService
from .reader import AnnotationReader

_logger = logging.getLogger("controllerql")


class AuthorizationGate:
    """Decides whether a discovered method becomes a schema field.

    ``@logged`` requires ``is_logged()``; ``@right(name)`` requires
    ``is_allowed(name)``. Both must pass; a method without either is always
    authorized. Denial only filters the field out, it never raises.
    """

    def __init__(
        self,
        annotation_reader: AnnotationReader,
        authentication_service: AuthenticationService,
        authorization_service: AuthorizationService,
    ):
        self.annotation_reader = annotation_reader
        self.authentication_service = authentication_service
        self.authorization_service = authorization_service

    def is_authorized(self, method: Any) -> bool:
        logged = self.annotation_reader.get_method_annotation(method, Logged)
        if logged is not None and not self.authentication_service.is_logged():
            _logger.debug("controllerql.gate: skip %s (not logged in)", getattr(method, '__qualname__', method))
            return False
        right = self.annotation_reader.get_method_annotation(method, Right)
        if right is not None and not self.authorization_service.is_allowed(right.get_name()):
            _logger.debug(
                "controllerql.gate: skip %s (right %r denied)",
                getattr(method, '__qualname__', method), right.get_name(),
            )
            return False
        return True


__all__ = ['AuthorizationGate']
