"""
Console output channels and the read-eval-print step for already-read forms.

The evaluator is supplied by the caller; this module only decides how results
and errors reach the user.
"""

from __future__ import annotations

import logging
import sys
import traceback
from typing import Callable, Optional, TextIO

from glisp import SExpression
from glisp.config import get_print_readably
from glisp.errors import BlankInput, GlispError
from glisp.printer.printer import print_exp
from glisp.types.nil import Nil
from glisp.types.symbol import Keyword

logger = logging.getLogger(__name__)


class ConsolePrinter:
    """Output channels used by console commands."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream: TextIO = stream if stream is not None else sys.stdout

    def log(self, *args) -> None:
        logger.info(" ".join(str(a) for a in args))

    def return_(self, *args) -> None:
        self.stream.write(" ".join(str(a) for a in args) + "\n")

    def error(self, *args) -> None:
        logger.error(" ".join(str(a) for a in args))

    def pseudo_execute(self, command: str) -> None:
        self.stream.write(command + "\n")

    def clear(self) -> None:
        # Terminal escape: clear screen, cursor home
        self.stream.write("\033[2J\033[H")


class Console:
    """
    Evaluates forms with ``eval_fn`` and prints the results.

    Errors never escape ``rep``: glisp errors are reported by message,
    anything else with its traceback.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression], SExpression],
        printer: Optional[ConsolePrinter] = None,
        print_readably: Optional[bool] = None,
    ):
        self.eval_fn = eval_fn
        self.printer: ConsolePrinter = printer if printer is not None else ConsolePrinter()
        self.print_readably = get_print_readably() if print_readably is None else print_readably

    def rep(self, form: SExpression, output: bool = True) -> Optional[str]:
        try:
            result = self.eval_fn(form)
        except BlankInput:
            return None
        except GlispError as err:
            self.printer.error(err)
            return None
        except Exception:
            self.printer.error(traceback.format_exc())
            return None

        text = print_exp(result, self.print_readably)
        if output:
            self.printer.return_(text)
        return text


def parse_keyword_args(args: list[SExpression]) -> dict[str, SExpression]:
    """
    Group command arguments under the keyword preceding them.

    ``("sketch" :user "me" :token "t")`` -> ``{"_": "sketch", "user": "me", "token": "t"}``.
    Several values after one keyword are collected in a list; a keyword with
    no values maps to Nil.
    """
    ret: dict[str, SExpression] = {}
    counts: dict[str, int] = {"_": 0}
    keyword = "_"

    for arg in args:
        if isinstance(arg, Keyword):
            keyword = arg.id
            counts[keyword] = 0
            ret.setdefault(keyword, Nil)
            continue
        counts[keyword] += 1
        if counts[keyword] == 1:
            ret[keyword] = arg
        elif counts[keyword] == 2:
            ret[keyword] = [ret[keyword], arg]
        else:
            ret[keyword].append(arg)
    return ret
