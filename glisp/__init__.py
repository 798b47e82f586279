# Core type aliases for glisp's data model.
# Atomic values use plain Python types (int, float, str, bool); composite
# values use the list/dict subclasses in glisp.types.collections so that
# they can carry printer caches.
#
# Naming guidance:
# - SExpression: a node of the expression/graphics tree.
# - PathType:    a Vector holding a flat run of path commands and points.

from typing import Any

SExpression = Any
PathType = list
SegmentType = list

# Aliases must exist before the submodules below import them
from glisp.printer.printer import print_exp  # noqa: E402
from glisp.path.segments import iterate_segments, is_path  # noqa: E402
from glisp.path.compiler import (  # noqa: E402
    get_svg_path_data,
    get_svg_path_data_recursive,
    convert_to_path2d,
)
from glisp.logging_config import setup_logging  # noqa: E402

__all__ = [
    "SExpression",
    "PathType",
    "SegmentType",
    "print_exp",
    "iterate_segments",
    "is_path",
    "get_svg_path_data",
    "get_svg_path_data_recursive",
    "convert_to_path2d",
    "setup_logging",
]
