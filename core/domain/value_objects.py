"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class _Unset:
    """Marker for a field that was not supplied at all (as opposed to null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET = _Unset()


class RouteCode(Enum):
    """Stable short codes identifying each gated REST route."""

    LIST_GENERATORS = "006"
    GET_GENERATOR = "007"
    CREATE_GENERATOR = "008"
    UPDATE_GENERATOR = "009"

    def __str__(self) -> str:
        """Return route code as string."""
        return self.value


@dataclass(frozen=True)
class ActorId(ValueObject):
    """Identifier of the user performing a write (0 for anonymous callers)."""

    value: int

    def __post_init__(self):
        """Validate actor id."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid actor id: {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Invalid actor id: {self.value!r}")

    def __int__(self) -> int:
        """Return actor id as integer."""
        return self.value

    @classmethod
    def anonymous(cls) -> "ActorId":
        """Actor used when the caller is not authenticated."""
        return cls(0)
