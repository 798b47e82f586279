from glisp.types.collections import Vector
from glisp.types.symbol import Keyword


def K(name):
    return Keyword(name)


def V(*items):
    return Vector(items)
