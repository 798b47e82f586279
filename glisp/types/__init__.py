from glisp.types.symbol import Symbol, Keyword, symbol_for, keyword_for
from glisp.types.nil import Nil, NilType, is_nil
from glisp.types.collections import List, Vector, Map, Atom, clear_print_cache
from glisp.types.lambda_fn import Lambda, Macro

__all__ = [
    "Symbol", "Keyword", "symbol_for", "keyword_for",
    "Nil", "NilType", "is_nil",
    "List", "Vector", "Map", "Atom", "clear_print_cache",
    "Lambda", "Macro",
]
