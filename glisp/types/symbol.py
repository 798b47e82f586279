from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword:
    """A tag value such as ``:path``. Never equal to a Symbol of the same name."""

    __slots__ = ("id",)

    MARKER = ":"

    def __init__(self, name: str):
        if name.startswith(self.MARKER):
            name = name[1:]
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        return hash((Keyword, self.id))

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return self.MARKER + self.id


_symbols: dict[str, Symbol] = {}
_keywords: dict[str, Keyword] = {}


def symbol_for(name: str) -> Symbol:
    sym = _symbols.get(name)
    if sym is None:
        sym = _symbols[name] = Symbol(name)
    return sym


def keyword_for(name: str) -> Keyword:
    kw = _keywords.get(name)
    if kw is None:
        kw = _keywords[name] = Keyword(name)
    return kw
