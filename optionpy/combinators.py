"""Free functions over ``Option`` values.

Every function is pure: inputs are never mutated and callbacks are invoked at
most once, on the caller's thread. ``unwrap`` and ``expect`` are the only
functions that raise on their own account.
"""
from __future__ import annotations
from typing import Callable, Tuple, TypeVar

from .errors import UnwrapError
from .logger import get_logger
from .option import NONE, Option, Some
from .result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def is_some(o: Option[T]) -> bool:
    return o.has_value()


def is_none(o: Option[T]) -> bool:
    return not o.has_value()


# Extraction

def unwrap(o: Option[T]) -> T:
    """Return the contained value or raise ``UnwrapError``."""
    return expect(o, "option does not contain any value")


def expect(o: Option[T], msg: str) -> T:
    """Like ``unwrap`` with a caller-supplied error message."""
    if is_none(o):
        get_logger().debug("unwrap on empty option", reason=msg)
        raise UnwrapError(msg)
    return o.raw_value()


def unwrap_or(o: Option[T], d: T) -> T:
    if is_none(o):
        return d
    return o.raw_value()


def unwrap_or_default(o: Option[T]) -> T:
    # Nothing reports its zero value
    return o.raw_value()


def unwrap_or_else(o: Option[T], d: Callable[[], T]) -> T:
    if is_none(o):
        return d()
    return o.raw_value()


def to_nullable(o: Option[T]) -> T | None:
    return o.raw_value() if is_some(o) else None


# Transformation

def map(o: Option[T], f: Callable[[T], U]) -> Option[U]:
    if is_none(o):
        return NONE
    return Some(f(o.raw_value()))


def try_map(o: Option[T], f: Callable[[T], Result[E, U]]) -> Result[E, Option[U]]:
    """Apply a fallible ``f`` to the contained value.

    An empty option gives ``Ok(NONE)`` without calling ``f``. On ``Err`` the
    error is kept and any partial value ``f`` returned with it is dropped.
    """
    if is_none(o):
        return Ok(NONE)
    r = f(o.raw_value())
    if r.is_err():
        return Err(r.error)  # type: ignore[attr-defined]
    return Ok(Some(r.value))  # type: ignore[attr-defined]


def map_or(o: Option[T], d: U, f: Callable[[T], U]) -> U:
    if is_none(o):
        return d
    return f(o.raw_value())


def try_map_or(o: Option[T], d: U, f: Callable[[T], Result[E, U]]) -> Result[E, U]:
    """``Ok(d)`` when empty, otherwise whatever ``f`` returns, untouched.

    Unlike ``try_map``, an ``Err`` keeps the partial value ``f`` put in it.
    """
    if is_none(o):
        return Ok(d)
    return f(o.raw_value())


def map_or_else(o: Option[T], d: Callable[[], U], f: Callable[[T], U]) -> U:
    if is_none(o):
        return d()
    return f(o.raw_value())


def try_map_or_else(o: Option[T], d: Callable[[], U], f: Callable[[T], Result[E, U]]) -> Result[E, U]:
    if is_none(o):
        return Ok(d())
    return f(o.raw_value())


# Logical

def and_(o: Option[T], o2: Option[U]) -> Option[U]:
    if is_none(o):
        return o  # type: ignore[return-value]
    return o2


def and_then(o: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    if is_none(o):
        return o  # type: ignore[return-value]
    return f(o.raw_value())


def or_(o: Option[T], o2: Option[T]) -> Option[T]:
    if is_none(o):
        return o2
    return o


def or_else(o: Option[T], f: Callable[[], Option[T]]) -> Option[T]:
    if is_none(o):
        return f()
    return o


def xor(o: Option[T], o2: Option[T]) -> Option[T]:
    if is_some(o) and is_none(o2):
        return o
    if is_none(o) and is_some(o2):
        return o2
    if is_none(o):
        # both empty: keep o2's zero value
        return o2
    return NONE


def filter(o: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep ``o`` only if its value satisfies ``predicate``.

    A rejected value yields ``NONE``, which reports ``None`` as its zero
    value: a present option has no zero factory to carry over.
    """
    if is_none(o):
        return o
    if not predicate(o.raw_value()):
        return NONE
    return o


def equals(o1: Option[T], o2: Option[T]) -> bool:
    if is_some(o1) != is_some(o2):
        return False
    if is_none(o1):
        # zero values are not compared
        return True
    return o1.raw_value() == o2.raw_value()


def flatten(o: Option[Option[T]]) -> Option[T]:
    if is_none(o):
        return o  # type: ignore[return-value]
    return o.raw_value()


def zip(o: Option[T], o2: Option[U]) -> Option[Tuple[T, U]]:
    if is_some(o) and is_some(o2):
        return Some((o.raw_value(), o2.raw_value()))
    return NONE


# Result interop

def ok_or(o: Option[T], err: E) -> Result[E, T]:
    if is_none(o):
        return Err(err)
    return Ok(o.raw_value())


def ok_or_else(o: Option[T], f: Callable[[], E]) -> Result[E, T]:
    if is_none(o):
        return Err(f())
    return Ok(o.raw_value())


def from_result(r: Result[E, T]) -> Option[T]:
    if isinstance(r, Ok):
        return Some(r.value)
    return NONE
