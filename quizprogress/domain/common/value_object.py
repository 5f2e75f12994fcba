"""
Value object base.

Subclasses are frozen dataclasses that validate in `__post_init__` (raising
ValidationError) and offer a `create` classmethod returning a Result for
untrusted input. Equality and hashing come from the dataclass fields.
"""


def is_whole_number(value: object) -> bool:
    """True for ints, False for bools and everything else."""
    return isinstance(value, int) and not isinstance(value, bool)


class ValueObject:
    """Marker base for immutable, attribute-compared domain values."""

    def to_primitive(self) -> object:
        """The single wrapped value, or a dict of all fields for composite values."""
        values = vars(self)
        if len(values) == 1:
            return next(iter(values.values()))
        return dict(values)
