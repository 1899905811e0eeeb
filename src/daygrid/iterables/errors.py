"""Exceptions raised by the lazy-sequence toolkit."""


class SequenceError(Exception):
    """Base class for lazy-sequence errors."""


class UnderflowError(SequenceError):
    """A bounded take needed more elements than the source produced.

    Attributes:
        requested (int): Number of elements the caller asked for.
        produced (int): Number of elements the source actually produced.
    """

    def __init__(self, requested: int, produced: int):
        super().__init__(
            f"Trying to take {requested} elements, but the iterable only produced {produced}."
        )
        self.requested = requested
        self.produced = produced


class EmptyError(SequenceError):
    """The first element was requested from an already exhausted iterable."""

    def __init__(self) -> None:
        super().__init__("Trying to get the first element of an empty iterable.")


class LimitExceededError(SequenceError):
    """An iterable was longer than the caller allowed (possibly infinite).

    Attributes:
        limit (int): The element count at which counting stopped.
    """

    def __init__(self, limit: int):
        super().__init__(
            f"The iterable was longer than the specified limit of {limit} "
            "(possibly infinite)."
        )
        self.limit = limit
