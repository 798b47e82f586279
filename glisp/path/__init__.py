from glisp.path.segments import iterate_segments, is_path, K_PATH
from glisp.path.backend import Path2D, PathBackend
from glisp.path.compiler import (
    get_svg_path_data,
    get_svg_path_data_recursive,
    convert_to_path2d,
    iterate_paths,
    transform_path,
)

__all__ = [
    "iterate_segments", "is_path", "K_PATH",
    "Path2D", "PathBackend",
    "get_svg_path_data", "get_svg_path_data_recursive", "convert_to_path2d",
    "iterate_paths", "transform_path",
]
