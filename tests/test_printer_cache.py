import pytest

from glisp.printer import printer
from glisp.printer.printer import print_exp
from glisp.types.collections import List, Map, Vector, clear_print_cache
from glisp.types.symbol import Keyword, Symbol


@pytest.fixture
def counting_print(monkeypatch):
    """Counts every recursive print_exp call made while printing a node."""
    calls = []
    original = printer.print_exp

    def wrapper(exp, print_readably=True):
        calls.append(exp)
        return original(exp, print_readably)

    monkeypatch.setattr(printer, "print_exp", wrapper)
    return calls


def test_children_printed_once_across_repeated_prints(counting_print):
    child = Vector([1, 2])
    exp = List([Symbol("f"), child, "s"])

    first = print_exp(exp)
    calls_after_first = len(counting_print)
    second = print_exp(exp)

    assert first == second == '(f [1 2] "s")'
    assert sum(1 for c in counting_print if c is child) == 1
    assert len(counting_print) == calls_after_first


def test_cached_formatting_is_reused():
    exp = List([Symbol("f"), 1, 2])
    # Delimiters as recorded from user source
    exp.delimiters = ["", "   ", "\n  ", ""]
    assert print_exp(exp) == "(f   1\n  2)"
    assert print_exp(exp) == "(f   1\n  2)"


def test_cache_survives_mutation_until_cleared():
    exp = Vector([1, 2])
    assert print_exp(exp) == "[1 2]"
    exp[0] = 10
    assert print_exp(exp) == "[1 2]"
    clear_print_cache(exp)
    assert print_exp(exp) == "[10 2]"


def test_replaced_child_node_is_printed_fresh():
    inner = Vector([1])
    outer = Vector([inner])
    assert print_exp(outer) == "[[1]]"
    fresh = Vector([inner, Vector([2])])
    assert print_exp(fresh) == "[[1] [2]]"


def test_element_cache_keeps_first_print_mode():
    exp = Vector(["a"])
    assert print_exp(exp, True) == '["a"]'
    assert print_exp(exp, False) == '["a"]'


def test_map_cache_populated_once():
    m = Map({Keyword("a"): 1})
    print_exp(m)
    elm_strs = m.elm_strs
    print_exp(m)
    assert m.elm_strs is elm_strs
