"""Registration of provider fields into a Strawberry schema.

Execution is entirely Strawberry's: this module only generates one resolver
per field whose signature mirrors the resolved argument and return nodes.
"""
from __future__ import annotations
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional

import strawberry
from strawberry.schema.config import StrawberryConfig

from .core.assembler import MUTATION, SchemaField
from .exceptions import ControllerQLError
from .hydration import DefaultHydrator
from .provider import QueryProvider

_logger = logging.getLogger("controllerql")


def make_resolver(sf: SchemaField) -> Callable[..., Any]:
    """Build the Strawberry resolver of one field.

    Arguments are hydrated with the field's hydrator, then passed by name to
    the controller method. Nullable arguments the client omitted are passed
    as ``None`` unless the method declares a default.
    """
    target = sf.target
    hydrator = sf.hydrator or DefaultHydrator()
    params = [
        inspect.Parameter(
            name,
            inspect.Parameter.KEYWORD_ONLY,
            default=sf.defaults.get(name, inspect.Parameter.empty),
            annotation=node.to_annotation(input=True),
        )
        for name, node in sf.arguments.items()
    ]
    return_annotation = sf.type.to_annotation()

    def _prepare(kwargs: Dict[str, Any]) -> Dict[str, Any]:
        out = {}
        for name, node in sf.arguments.items():
            if name in kwargs:
                out[name] = hydrator.hydrate(kwargs[name], node)
            elif name not in sf.defaults:
                out[name] = None
        return out

    if inspect.iscoroutinefunction(target.bind()):
        async def _resolver(**kwargs):
            return await target(**_prepare(kwargs))
    else:
        def _resolver(**kwargs):
            return target(**_prepare(kwargs))

    _resolver.__name__ = sf.name
    _resolver.__qualname__ = sf.name
    _resolver.__signature__ = inspect.Signature(params, return_annotation=return_annotation)  # type: ignore[attr-defined]
    annotations = {p.name: p.annotation for p in params}
    annotations['return'] = return_annotation
    _resolver.__annotations__ = annotations
    return _resolver


def _root_type(name: str, fields: List[SchemaField]):
    namespace: Dict[str, Any] = {'__module__': __name__, '__doc__': f'controllerql root {name} type'}
    for sf in fields:
        if sf.name in namespace:
            raise ControllerQLError(f"Duplicate {name} field '{sf.name}'")
        make_field = strawberry.mutation if sf.kind == MUTATION else strawberry.field
        namespace[sf.name] = make_field(resolver=make_resolver(sf), description=sf.description)
    cls = type(name, (), namespace)
    return strawberry.type(cls, name=name)


def build_schema(
    *providers: QueryProvider,
    strawberry_config: Optional[StrawberryConfig] = None,
    **schema_kwargs: Any,
) -> strawberry.Schema:
    """Assemble a ``strawberry.Schema`` from the fields of ``providers``.

    Args:
        providers: Query providers, consulted in order.
        strawberry_config: Passed through to ``strawberry.Schema(config=...)``
            (e.g. ``StrawberryConfig(auto_camel_case=False)``).
        schema_kwargs: Extra keyword arguments for ``strawberry.Schema``
            (types, extensions, scalar_overrides, ...).

    Raises:
        ControllerQLError: no provider exposes a query field, or two fields
            share a name.
    """
    queries = [f for p in providers for f in p.list_queries()]
    mutations = [f for p in providers for f in p.list_mutations()]
    if not queries:
        raise ControllerQLError("No query field found; a GraphQL schema needs at least one query")
    _logger.info(
        "controllerql.schema: building schema with %d queries and %d mutations",
        len(queries), len(mutations),
    )
    query_type = _root_type('Query', queries)
    mutation_type = _root_type('Mutation', mutations) if mutations else None
    if strawberry_config is not None:
        schema_kwargs['config'] = strawberry_config
    return strawberry.Schema(query=query_type, mutation=mutation_type, **schema_kwargs)


__all__ = ['build_schema', 'make_resolver']
