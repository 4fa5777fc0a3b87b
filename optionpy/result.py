from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, Type, TypeVar

from .errors import OptionError

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Result(Generic[E, A]):
    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    # partial value produced alongside the error, if any
    value: Optional[A] = None
    def is_ok(self) -> bool: return False


def attempt(f: Callable[[A], B], *exc_types: Type[BaseException]) -> Callable[[A], Result[BaseException, B]]:
    """Adapt a raising function into one returning ``Ok``/``Err``.

    Only the listed exception types (``Exception`` when none are given) are
    turned into ``Err``; anything else propagates. ``OptionError`` always
    propagates: a failed ``unwrap`` inside ``f`` is never turned into data.
    """
    catch: Tuple[Type[BaseException], ...] = exc_types or (Exception,)

    def run(a: A) -> Result[BaseException, B]:
        try:
            return Ok(f(a))
        except OptionError:
            raise
        except catch as ex:
            return Err(ex)

    return run
