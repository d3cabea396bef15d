"""
Base class for Value Objects.

Value objects are immutable and compared by their attributes, never by
identity. Subclasses are frozen dataclasses that validate in __post_init__.
"""


class ValueObject:
    """Base class for Value Objects in the domain model."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def to_primitive(self) -> object:
        """Return the wrapped value for single-attribute value objects."""
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
