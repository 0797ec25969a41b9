"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
