"""Runtime values stored in block projects."""

__all__ = ["Value", "sort_key"]

import functools
import math
import sys

import sb3value


class Value:
    """Untyped value as stored by a block project.

    Represents any of the three kinds of data a block input or variable can
    hold: numbers, text and booleans. The kind is the Python type of `data`,
    which is one of `float`, `str` or `bool`. Every other operation coerces
    between these kinds following the loose rules of the block runtime.

    Values are immutable. Equality and ordering are deliberately not the
    structural Python ones; use `compare` for the runtime's ordering.

    Args:
        data: (float | int | str | bool) The underlying data, defaults to
            empty text like an unfilled block input
    Attributes:
        data: (float | str | bool) The underlying data
    """
    __slots__ = ("data",)

    def __init__(self, data=""):
        if isinstance(data, Value):
            raise TypeError(f"Value init called with existing Value {data!r}")

        # bool is an int subclass, so it must be checked first
        if isinstance(data, (bool, float, str)):
            pass
        elif isinstance(data, int):
            try:
                data = float(data)
            except OverflowError:
                data = math.inf if data > 0 else -math.inf
        else:
            raise sb3value.LiteralError(
                f"Cannot use {type(data).__name__} as a Value", data
            )
        object.__setattr__(self, "data", data)

    def __setattr__(self, name, value):
        raise AttributeError(f"Value is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Value is immutable, cannot delete {name!r}")

    # Immutable, so copies can share the original
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Value, (self.data,))

    @property
    def is_num(self):
        """(bool) True if the value holds a number."""
        return isinstance(self.data, float)

    @property
    def is_string(self):
        """(bool) True if the value holds text."""
        return isinstance(self.data, str)

    @property
    def is_bool(self):
        """(bool) True if the value holds a boolean."""
        return isinstance(self.data, bool)

    def to_bool(self):
        """Interpret the value as a condition.

        Zero and NaN are false. Text is false when empty, exactly "0", or
        "false" in any letter case. Note "0.0" is text other than "0", so it
        is true.

        Returns:
            (bool) Truthiness of the value
        """
        data = self.data
        if isinstance(data, bool):
            return data
        if isinstance(data, float):
            return data != 0.0 and not math.isnan(data)
        if isinstance(data, str):
            if not data or data == "0":
                return False
            # Case folding is ASCII only
            return not (data.isascii() and data.lower() == "false")
        raise _unknown_payload(data)

    def try_to_num(self):
        """Interpret the value as a number, if it holds one.

        Returns:
            (float | None) The number, or None when the value is NaN or text
            that is not a number
        """
        data = self.data
        if isinstance(data, bool):
            return 1.0 if data else 0.0
        if isinstance(data, float):
            return None if math.isnan(data) else data
        if isinstance(data, str):
            return sb3value.str_to_num(data)
        raise _unknown_payload(data)

    def to_num(self):
        """(float) Interpret the value as a number, 0.0 when it has none."""
        num = self.try_to_num()
        return 0.0 if num is None else num

    def to_cow_str(self):
        """Interpret the value as text.

        Text values give back their own string, no copy is made. Numbers are
        formatted the way the JavaScript runtime prints them.

        Returns:
            (str) Text of the value
        Raises:
            EvalError: If the value is a NaN number, which the runtime never
                formats
        """
        data = self.data
        if isinstance(data, bool):
            return "true" if data else "false"
        if isinstance(data, float):
            return sb3value.num_to_str(data)
        if isinstance(data, str):
            return data
        raise _unknown_payload(data)

    to_str = to_cow_str

    def to_index(self):
        """Interpret the value as a position in a list.

        The text "last" addresses the final element. Anything else is taken
        as a 1-based number, truncated toward zero. Positions below 1 are not
        addressable.

        The runtime also knows "all", "random" and "any" as positions, those
        are not supported yet and give None.

        Returns:
            (Index | None) The 0-based position, or None
        """
        if isinstance(self.data, str) and self.data == "last":
            return sb3value.Last()

        num = self.try_to_num()
        if num is None or num < 1:
            return None
        # Infinity has no integer, it addresses the largest index there is
        position = sys.maxsize if math.isinf(num) else int(num)
        return sb3value.Nth(position - 1)

    def compare(self, other):
        """Order two values like the runtime's relational operators.

        When both values are numbers, or text that parses as one, they
        compare numerically. Otherwise their texts compare without regard
        to letter case.

        Args:
            other: (Value) Value to compare against
        Returns:
            (int) Negative, zero or positive as self is below, equal to or
            above other
        """
        lhs = self.try_to_num()
        rhs = other.try_to_num()
        if lhs is not None and rhs is not None:
            # NaN was already filtered out by try_to_num
            return (lhs > rhs) - (lhs < rhs)

        lhs = self.to_cow_str().lower()
        rhs = other.to_cow_str().lower()
        return (lhs > rhs) - (lhs < rhs)

    @classmethod
    def from_python(cls, value):
        """Convert a decoded project literal into a Value.

        Project files are JSON, so literals arrive as Python numbers, strings
        and booleans.

        Args:
            value: (float | int | str | bool) Literal to convert
        Returns:
            (Value) Value holding the literal
        Raises:
            TypeError: If value is already a Value
            LiteralError: If value is not a number, string or boolean
        """
        if isinstance(value, Value):
            raise TypeError("from_python called with existing Value")
        return cls(value)

    def __str__(self):
        return self.to_cow_str()

    def __repr__(self):
        return f"Value({self.data!r})"


# Key function ordering values with Value.compare, for sorted() and friends
sort_key = functools.cmp_to_key(Value.compare)


def _unknown_payload(data):
    return sb3value.EvalError(f"Unknown internal type for value: {type(data).__name__}")
