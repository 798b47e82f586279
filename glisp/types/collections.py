"""Composite values and the Atom cell.

``List``, ``Vector`` and ``Map`` behave like the builtin ``list``/``dict`` but
carry three printer cache slots:

- ``elm_strs``: printed text of each element (a Map flattens key, value, ...)
- ``delimiters``: separators around the elements, one more than ``elm_strs``
- ``is_sugar``: set once the node is printed as a syntactic-sugar form

The slots start as None and are filled by ``glisp.printer.print_exp``.
"""

from __future__ import annotations

from typing import Optional

from glisp import SExpression


class List(list):
    """Parenthesised sequence: ``(a b c)``."""

    __slots__ = ("elm_strs", "delimiters", "is_sugar")

    def __init__(self, iterable=()):
        super().__init__(iterable)
        self.elm_strs: Optional[list[str]] = None
        self.delimiters: Optional[list[str]] = None
        self.is_sugar: Optional[bool] = None

    def __repr__(self):
        return f"List({list.__repr__(self)})"


class Vector(list):
    """Bracketed sequence: ``[a b c]``."""

    __slots__ = ("elm_strs", "delimiters", "is_sugar")

    def __init__(self, iterable=()):
        super().__init__(iterable)
        self.elm_strs: Optional[list[str]] = None
        self.delimiters: Optional[list[str]] = None
        self.is_sugar: Optional[bool] = None

    def __repr__(self):
        return f"Vector({list.__repr__(self)})"


class Map(dict):
    """Key-ordered mapping: ``{k v ...}``. Iterates in insertion order."""

    __slots__ = ("elm_strs", "delimiters", "is_sugar")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.elm_strs: Optional[list[str]] = None
        self.delimiters: Optional[list[str]] = None
        self.is_sugar: Optional[bool] = None

    def __repr__(self):
        return f"Map({dict.__repr__(self)})"


CACHED_NODE_TYPES = (List, Vector, Map)


def clear_print_cache(node: SExpression) -> None:
    """Drop the printer caches of ``node`` after its children were replaced in place."""
    if isinstance(node, CACHED_NODE_TYPES):
        node.elm_strs = None
        node.delimiters = None
        node.is_sugar = None


class Atom:
    """A mutable cell. Two atoms are equal only if they are the same object."""

    __slots__ = ("value",)

    def __init__(self, value: SExpression = None):
        self.value = value

    def reset(self, value: SExpression) -> SExpression:
        self.value = value
        return value

    def __repr__(self):
        return f"Atom({self.value!r})"
