from glisp.printer.printer import print_exp, SUGAR_INFO, format_number
from glisp.printer.console import Console, ConsolePrinter, parse_keyword_args

__all__ = [
    "print_exp", "SUGAR_INFO", "format_number",
    "Console", "ConsolePrinter", "parse_keyword_args",
]
