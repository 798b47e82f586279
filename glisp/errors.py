

class GlispError(Exception):
    """ Base class for all glisp errors"""
    pass

class GlispPathError(GlispError):
    """ Raised when a value cannot be read as a path"""
    pass

class BlankInput(GlispError):
    """ Raised by an evaluator when there is nothing to evaluate"""
