"""Function and macro values carrying a parameter list and a body."""

from __future__ import annotations

from glisp import SExpression


class Lambda:
    """A user-defined function. ``body`` is None for opaque built-ins."""

    __slots__ = ("params", "body")

    type_name = "fn"

    def __init__(self, params: SExpression, body: SExpression = None):
        self.params: SExpression = params
        self.body: SExpression = body

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.type_name}>"


class Macro(Lambda):
    """A macro; identical to Lambda apart from how it prints."""

    __slots__ = ()

    type_name = "macro"
