from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Option(Generic[T]):
    """An optional value: either ``Some(value)`` or ``Nothing``.

    Only the two low-level queries live here. They are not meant to be called
    by application code; use the functions in ``optionpy.combinators``.
    """

    def has_value(self) -> bool: raise NotImplementedError
    def raw_value(self) -> T: raise NotImplementedError


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def has_value(self) -> bool: return True
    def raw_value(self) -> T: return self.value


@dataclass(frozen=True)
class Nothing(Option[T]):
    # zero value factory, e.g. str, int, list; not part of equality
    zero: Optional[Callable[[], T]] = field(default=None, compare=False)

    def __repr__(self) -> str: return "Nothing"
    def has_value(self) -> bool: return False

    def raw_value(self) -> T:
        if self.zero is None:
            return None  # type: ignore[return-value]
        return self.zero()


NONE: Option = Nothing()


def some(value: T) -> Option[T]:
    return Some(value)


def none(zero: Optional[Callable[[], T]] = None) -> Option[T]:
    """Absent option. ``zero`` produces the value reported by ``raw_value()``."""
    if zero is None:
        return NONE
    return Nothing(zero)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
