"""Marker base for value objects."""


class ValueObject:
    """
    Immutable value compared by its fields.

    Subclasses are declared with ``@dataclass(frozen=True)``, which supplies
    field-wise equality and hashing, and check their own invariants in
    ``__post_init__``. Typed ids are the value objects of this codebase.
    """

    __slots__ = ()
