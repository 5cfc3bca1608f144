"""Availability of an optional external dependency.

Each adapter is resolved once at startup into either ``Connected(handle)``
or ``Unavailable(reason)``. Callers check the variant instead of testing
for ``None``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Connected(Generic[T]):
    """The dependency is reachable through ``handle``."""

    handle: T

    @property
    def is_available(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """The dependency could not be configured or reached.

    Attributes:
        reason: Human-readable cause, used for logging
    """

    reason: str = ""

    @property
    def is_available(self) -> bool:
        return False


Availability = Union[Connected[T], Unavailable]
