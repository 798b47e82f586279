"""
  Structural printer

Renders a value back to source text. Composite nodes (List, Vector, Map)
keep the printed text of their elements and the delimiters between them in
cache slots, so formatting recorded on a node survives later prints as long
as the node object itself is kept.

    - numbers  -> canonical decimal form (1.0 -> "1")
    - strings  -> quoted and escaped when printing readably
    - keywords -> ":name"
    - (quote x)               -> 'x
    - (ui-annotate a x)       -> #ax
    - (with-meta-sugar m x)   -> ^mx
"""

from __future__ import annotations

import math
import numbers
from typing import NamedTuple, Optional

from glisp import SExpression
from glisp.types.collections import Atom, Vector, CACHED_NODE_TYPES
from glisp.types.lambda_fn import Lambda
from glisp.types.nil import is_nil
from glisp.types.symbol import Keyword, Symbol


class SugarInfo(NamedTuple):
    # Number of delimiter slots the sugar form occupies
    length: int
    prefix: str


SUGAR_INFO: dict[Symbol, SugarInfo] = {
    Symbol("quote"): SugarInfo(2, "'"),
    Symbol("ui-annotate"): SugarInfo(3, "#"),
    Symbol("with-meta-sugar"): SugarInfo(3, "^"),
}

NATIVE_FUNCTION = "<native function>"
UNDEFINED = "<undefined>"


def generate_default_delimiters(element_count: int) -> list[str]:
    if element_count == 0:
        return [""]
    return [""] + [" "] * (element_count - 1) + [""]


def _sugar_info(coll: SExpression) -> Optional[SugarInfo]:
    """Registry entry for a List headed by a sugar symbol with matching arity."""
    if not isinstance(coll, list) or isinstance(coll, Vector) or not coll:
        return None
    head = coll[0]
    if not isinstance(head, Symbol):
        return None
    info = SUGAR_INFO.get(head)
    if info is None or len(coll) != info.length:
        return None
    return info


def format_number(n) -> str:
    if isinstance(n, int):
        return str(n)
    n = float(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    if n == 0:
        return "0"

    # Shortest round-trip digits from repr, as d1d2...dk x 10^(point - k)
    mantissa, _, exponent = repr(abs(n)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    raw = int_part + frac_part
    stripped = raw.lstrip("0")
    point = len(int_part) + int(exponent or 0) - (len(raw) - len(stripped))
    digits = stripped.rstrip("0")
    k = len(digits)
    sign = "-" if n < 0 else ""

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exp_text = f"e{point - 1:+d}"
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + "." + digits[1:] + exp_text


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )


def _print_coll(coll, print_readably: bool) -> str:
    sugar = _sugar_info(coll)
    is_map = isinstance(coll, dict)
    cached = isinstance(coll, CACHED_NODE_TYPES)

    elm_strs = coll.elm_strs if cached else None
    if elm_strs is None:
        if is_map:
            elm_strs = []
            for key, value in coll.items():
                elm_strs.append(print_exp(key, print_readably))
                elm_strs.append(print_exp(value, print_readably))
        else:
            elm_strs = [print_exp(e, print_readably) for e in coll]
            if sugar:
                elm_strs[0] = ""
        if cached:
            coll.elm_strs = elm_strs

    delimiters = coll.delimiters if cached else None
    if delimiters is None:
        if is_map:
            delimiters = generate_default_delimiters(len(coll) * 2)
        elif sugar:
            delimiters = [""] * sugar.length
        else:
            delimiters = generate_default_delimiters(len(coll))
        if cached:
            coll.delimiters = delimiters

    if sugar and cached and coll.is_sugar is None:
        coll.is_sugar = True

    body = "".join(d + e for d, e in zip(delimiters, elm_strs)) + delimiters[-1]

    if is_map:
        return "{" + body + "}"
    if isinstance(coll, Vector):
        return "[" + body + "]"
    if sugar:
        return sugar.prefix + body
    return "(" + body + ")"


def print_exp(exp: SExpression, print_readably: bool = True) -> str:
    """Render ``exp`` as source text. Never raises."""
    # bool before numbers: bool is an int subclass
    if isinstance(exp, bool):
        return "true" if exp else "false"
    if isinstance(exp, (list, dict)):
        return _print_coll(exp, print_readably)
    if isinstance(exp, numbers.Real):
        return format_number(exp)
    if isinstance(exp, str):
        if print_readably:
            return '"' + _escape(exp) + '"'
        return exp
    if is_nil(exp):
        return "nil"
    if isinstance(exp, Symbol):
        return exp.id
    if isinstance(exp, Keyword):
        return Keyword.MARKER + exp.id
    if isinstance(exp, Atom):
        return f"(atom {print_exp(exp.value, print_readably)})"
    if isinstance(exp, Lambda):
        if exp.has_body:
            params = print_exp(exp.params, print_readably)
            body = print_exp(exp.body, print_readably)
            return f"({exp.type_name} {params} {body})"
        return NATIVE_FUNCTION
    if callable(exp):
        return NATIVE_FUNCTION
    return UNDEFINED
