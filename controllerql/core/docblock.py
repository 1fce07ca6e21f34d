"""Docstring type candidates for controller method parameters and returns.

Two docstring dialects are understood:

Sphinx field lists::

    :param int id: user id
    :type tags: str[] | None
    :rtype: list[Item]

Google sections::

    Args:
        id (int): user id
        tags (list[str] or None): optional tags

    Returns:
        Item[]: matching items

A type expression yields one candidate per top-level union member. ``None``
(or ``null``) is kept in the result as ``NoneType``; the resolver decides
what nullability means for the position.
"""
from __future__ import annotations
import inspect
import re
from typing import Any, Callable, Dict, ForwardRef, List, Optional, Protocol, Union

from ..exceptions import TypeExpressionError

NoneType = type(None)


class DocBlockTypeReader(Protocol):
    def param_types(self, method: Callable[..., Any], name: str) -> List[Any]: ...

    def return_types(self, method: Callable[..., Any]) -> List[Any]: ...


_BUILTINS: Dict[str, Any] = {
    'int': int,
    'integer': int,
    'str': str,
    'string': str,
    'float': float,
    'double': float,
    'bool': bool,
    'boolean': bool,
    'list': list,
    'array': list,
    'any': Any,
    'mixed': Any,
    'none': NoneType,
    'null': NoneType,
}
_LIST_GENERICS = {'list', 'array', 'sequence', 'iterable'}

_TOKEN_RE = re.compile(r"\s*(?:(\[\])|([A-Za-z_][\w.]*)|([\[\]|?,()]))")

_SPHINX_PARAM_RE = re.compile(r"^\s*:param\s+(?P<type>[^:]+?)\s+\**(?P<name>\w+)\s*:", re.M)
_SPHINX_TYPE_RE = re.compile(r"^\s*:type\s+\**(?P<name>\w+)\s*:\s*(?P<type>.+?)\s*$", re.M)
_SPHINX_RTYPE_RE = re.compile(r"^\s*:rtype\s*:\s*(?P<type>.+?)\s*$", re.M)
_GOOGLE_ARG_RE = re.compile(r"^\s+\**(?P<name>\w+)\s*\((?P<type>[^)]*)\)\s*:")
_GOOGLE_RETURN_RE = re.compile(r"^\s+(?P<type>[^:]+?)\s*:")
_GOOGLE_ARGS_HEADERS = ('args', 'arguments', 'parameters', 'params')
_GOOGLE_RETURNS_HEADERS = ('returns', 'return')


class _Parser:
    def __init__(self, text: str, namespace: Dict[str, Any]):
        self.tokens = self._tokenize(text)
        self.pos = 0
        self.namespace = namespace
        self.text = text

    @staticmethod
    def _tokenize(text: str) -> List[str]:
        out: List[str] = []
        pos = 0
        text = text.strip()
        while pos < len(text):
            m = _TOKEN_RE.match(text, pos)
            if not m or m.end() == pos:
                raise TypeExpressionError(f"Unexpected character {text[pos]!r} in type expression {text!r}")
            out.append(m.group(1) or m.group(2) or m.group(3))
            pos = m.end()
            while pos < len(text) and text[pos].isspace():
                pos += 1
        return out

    def peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self, expected: Optional[str] = None) -> str:
        tok = self.peek()
        if tok is None or (expected is not None and tok != expected):
            raise TypeExpressionError(f"Expected {expected or 'a type'} in type expression {self.text!r}")
        self.pos += 1
        return tok

    def parse(self) -> List[Any]:
        out = self.union()
        if self.peek() is not None:
            raise TypeExpressionError(f"Unexpected {self.peek()!r} in type expression {self.text!r}")
        return out

    def union(self) -> List[Any]:
        out = self.term()
        while self.peek() in ('|', 'or'):
            self.take()
            out.extend(self.term())
        return _dedupe(out)

    def term(self) -> List[Any]:
        nullable = False
        if self.peek() == '?':
            self.take()
            nullable = True
        out = self.atom()
        while self.peek() == '[]':
            self.take()
            out = [List[_combine(out)]]  # type: ignore[misc]
        if nullable:
            out = out + [NoneType]
        return out

    def atom(self) -> List[Any]:
        tok = self.take()
        if tok == '(':
            out = self.union()
            self.take(')')
            return out
        if not re.match(r"[A-Za-z_]", tok):
            raise TypeExpressionError(f"Unexpected {tok!r} in type expression {self.text!r}")
        if self.peek() == '[':
            self.take('[')
            args = [self.union()]
            while self.peek() == ',':
                self.take(',')
                args.append(self.union())
            self.take(']')
            return self._generic(tok, args)
        return [self._lookup(tok)]

    def _generic(self, name: str, args: List[List[Any]]) -> List[Any]:
        base = name.rsplit('.', 1)[-1].lower()
        if base in _LIST_GENERICS:
            # array<key, value> style: the element type is the last argument
            return [List[_combine(args[-1])]]  # type: ignore[misc]
        if base == 'optional' and len(args) == 1:
            return args[0] + [NoneType]
        if base == 'union':
            return [t for group in args for t in group]
        return [ForwardRef(f"{name}[...]")]

    def _lookup(self, name: str) -> Any:
        builtin = _BUILTINS.get(name.lower())
        if builtin is not None:
            return builtin
        head, *rest = name.split('.')
        if head not in self.namespace:
            return ForwardRef(name)
        obj = self.namespace[head]
        for part in rest:
            if not hasattr(obj, part):
                return ForwardRef(name)
            obj = getattr(obj, part)
        return obj


def _dedupe(items: List[Any]) -> List[Any]:
    out: List[Any] = []
    for it in items:
        if it not in out:
            out.append(it)
    return out


def _combine(candidates: List[Any]) -> Any:
    if len(candidates) == 1:
        return candidates[0]
    return Union[tuple(candidates)]  # type: ignore[return-value]


def parse_type_expression(text: str, namespace: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Parse a docstring type expression into a list of candidate annotations.

    Examples:
        ``"int|string"`` -> ``[int, str]``
        ``"?Item"`` -> ``[Item, NoneType]``
        ``"Item[] | null"`` -> ``[List[Item], NoneType]``
        ``"list[int | None]"`` -> ``[List[Optional[int]]]``
    """
    return _Parser(text, namespace or {}).parse()


def looks_like_type(text: str) -> bool:
    """True if ``text`` tokenizes as a type expression (no free prose)."""
    try:
        tokens = _Parser._tokenize(text)
    except TypeExpressionError:
        return False
    prev_name = False
    for tok in tokens:
        is_name = bool(re.match(r"[A-Za-z_]", tok)) and tok != 'or'
        if is_name and prev_name:
            return False
        prev_name = is_name
    return bool(tokens)


def _section_lines(doc: str, headers: tuple) -> List[str]:
    lines = doc.splitlines()
    out: List[str] = []
    in_section = False
    for line in lines:
        stripped = line.strip()
        if not in_section:
            if stripped.rstrip(':').lower() in headers and stripped.endswith(':') and line == line.lstrip():
                in_section = True
            continue
        if stripped and line == line.lstrip():
            break
        out.append(line)
    return out


def _namespace_of(func: Callable[..., Any]) -> Dict[str, Any]:
    func = inspect.unwrap(getattr(func, '__func__', func))
    return dict(getattr(func, '__globals__', {}) or {})


class DocstringTypeReader:
    """Reads type candidates from Sphinx or Google style docstrings.

    Names are resolved in the module globals of the decorated function, so
    ``:rtype: Item[]`` refers to whatever ``Item`` is in the controller's module.
    Unresolvable names become ``typing.ForwardRef`` candidates.
    """

    def _doc(self, method: Callable[..., Any]) -> str:
        return inspect.getdoc(method) or ''

    def _parse(self, text: str, method: Callable[..., Any]) -> List[Any]:
        text = re.sub(r",\s*optional\s*$", '', text.strip())
        return parse_type_expression(text, _namespace_of(method))

    def param_types(self, method: Callable[..., Any], name: str) -> List[Any]:
        doc = self._doc(method)
        if not doc:
            return []
        for m in _SPHINX_TYPE_RE.finditer(doc):
            if m.group('name') == name:
                return self._parse(m.group('type'), method)
        for m in _SPHINX_PARAM_RE.finditer(doc):
            if m.group('name') == name:
                return self._parse(m.group('type'), method)
        for line in _section_lines(doc, _GOOGLE_ARGS_HEADERS):
            m = _GOOGLE_ARG_RE.match(line)
            if m and m.group('name') == name:
                return self._parse(m.group('type'), method)
        return []

    def return_types(self, method: Callable[..., Any]) -> List[Any]:
        doc = self._doc(method)
        if not doc:
            return []
        m = _SPHINX_RTYPE_RE.search(doc)
        if m:
            return self._parse(m.group('type'), method)
        for line in _section_lines(doc, _GOOGLE_RETURNS_HEADERS):
            if not line.strip():
                continue
            m = _GOOGLE_RETURN_RE.match(line)
            if m and looks_like_type(m.group('type')):
                return self._parse(m.group('type'), method)
            break
        return []

    def description(self, method: Callable[..., Any]) -> Optional[str]:
        """First paragraph of the docstring, unless it is already a field list."""
        doc = self._doc(method).strip()
        if not doc:
            return None
        first = doc.split('\n\n', 1)[0].strip()
        head = first.splitlines()[0].rstrip(':').lower()
        if first.startswith(':') or head in _GOOGLE_ARGS_HEADERS + _GOOGLE_RETURNS_HEADERS:
            return None
        return ' '.join(line.strip() for line in first.splitlines() if not line.strip().startswith(':'))


__all__ = [
    'DocBlockTypeReader', 'DocstringTypeReader', 'NoneType',
    'TypeExpressionError', 'parse_type_expression', 'looks_like_type',
]
