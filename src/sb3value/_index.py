"""List positions addressed by runtime values."""

__all__ = ["Index", "Last", "Nth"]

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Last:
    """The final element of whatever sequence is being addressed."""

    def __repr__(self):
        return "Last"


@dataclasses.dataclass(frozen=True, slots=True)
class Nth:
    """Element at a 0-based offset.

    The offset is already translated from the 1-based numbering users see.
    It is not checked against any sequence; the consumer does that.

    Attributes:
        n: (int) 0-based offset
    """
    n: int

    def __repr__(self):
        return f"Nth({self.n})"


Index = Last | Nth
