"""Option type shared by Console implementations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SelectOption(Generic[T]):
    """One selectable entry: the label shown to the user and the value returned."""

    label: str
    value: T
