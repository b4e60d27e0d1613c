"""Error classes and helpers"""

__all__ = ["EvalError", "LiteralError"]


class EvalError(Exception):
    """Internal invariant of a value was broken.

    Coercions are total, so this is never raised for well-formed values. It
    signals a bug in whatever built the value, such as a NaN number reaching
    the string formatter.
    """


class LiteralError(TypeError):
    """Exception raised when a literal cannot become a Value.

    Args:
        message: (str) Error description
        literal: (object | None) The offending literal

    Attributes:
        message: (str) Error description
        literal: (object | None) The offending literal
    """

    def __init__(self, message, literal=None):
        self.message = message
        self.literal = literal
        super().__init__(message)
