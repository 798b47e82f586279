import io
import logging

import pytest

from glisp.errors import BlankInput, GlispError
from glisp.printer.console import Console, ConsolePrinter, parse_keyword_args
from glisp.types.collections import List, Vector
from glisp.types.nil import Nil
from glisp.types.symbol import Keyword, Symbol


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def console(out):
    """Console whose evaluator returns the form unchanged."""
    return Console(lambda form: form, ConsolePrinter(out))


def test_rep_prints_result(console, out):
    text = console.rep(List([Symbol("quote"), Symbol("x")]))
    assert text == "'x"
    assert out.getvalue() == "'x\n"


def test_rep_without_output(console, out):
    assert console.rep(Vector([1, "a"]), output=False) == '[1 "a"]'
    assert out.getvalue() == ""


def test_rep_unreadable_mode(out):
    console = Console(lambda form: form, ConsolePrinter(out), print_readably=False)
    console.rep("plain")
    assert out.getvalue() == "plain\n"


def test_rep_readable_mode_from_env(monkeypatch, out):
    monkeypatch.setenv("GLISP_PRINT_READABLY", "0")
    Console(lambda form: form, ConsolePrinter(out)).rep("plain")
    assert out.getvalue() == "plain\n"


def test_rep_reports_glisp_errors(out, glisp_caplog):
    def fail(form):
        raise GlispError("Parameters :user and :token must be specified.")

    assert Console(fail, ConsolePrinter(out)).rep(Symbol("publish")) is None
    assert out.getvalue() == ""
    errors = [r for r in glisp_caplog.records if r.levelno == logging.ERROR]
    assert errors[0].getMessage() == "Parameters :user and :token must be specified."


def test_rep_reports_unexpected_errors_with_traceback(out, glisp_caplog):
    def fail(form):
        raise ZeroDivisionError("boom")

    Console(fail, ConsolePrinter(out)).rep(1)
    message = glisp_caplog.records[-1].getMessage()
    assert "Traceback" in message and "ZeroDivisionError: boom" in message


def test_rep_ignores_blank_input(out, glisp_caplog):
    def blank(form):
        raise BlankInput()

    assert Console(blank, ConsolePrinter(out)).rep("") is None
    assert out.getvalue() == ""
    assert not glisp_caplog.records


def test_printer_channels(out, glisp_caplog):
    printer = ConsolePrinter(out)
    printer.log("Using saved API key")
    printer.pseudo_execute("(publish-gist)")
    printer.clear()
    assert glisp_caplog.records[0].levelno == logging.INFO
    assert out.getvalue() == "(publish-gist)\n\033[2J\033[H"


def test_parse_keyword_args():
    args = ["sketch", Keyword("user"), "me", Keyword("token"), "t"]
    assert parse_keyword_args(args) == {"_": "sketch", "user": "me", "token": "t"}


def test_parse_keyword_args_collects_repeated_values():
    args = [Keyword("size"), 1, 2, 3, Keyword("flag")]
    assert parse_keyword_args(args) == {"size": [1, 2, 3], "flag": Nil}


def test_parse_keyword_args_empty():
    assert parse_keyword_args([]) == {}
