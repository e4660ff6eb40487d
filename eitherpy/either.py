from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from .errors import InvalidValueError

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
L2 = TypeVar("L2")
R2 = TypeVar("R2")


class Either(Generic[L, R]):
    """Holds exactly one of a left or a right value.

    Only ``Left`` and ``Right`` are ever instantiated. The absent side does not
    exist on an instance: reading ``.left`` on a ``Right`` raises
    ``AttributeError``, so ``hasattr`` reports it missing.
    """

    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    @property
    def left(self) -> L:
        if self.is_left():
            return self.value  # type: ignore[attr-defined]
        raise AttributeError("Right has no left value")

    @property
    def right(self) -> R:
        if self.is_right():
            return self.value  # type: ignore[attr-defined]
        raise AttributeError("Left has no right value")

    # folding

    def fold(self, right_fn: Callable[[R], T], left_fn: Callable[[L], T]) -> T:
        if self.is_right():
            return right_fn(self.value)  # type: ignore[attr-defined]
        return left_fn(self.value)  # type: ignore[attr-defined]

    def fold_left(self, left_fn: Callable[[L], R]) -> R:
        """Recover a right-typed value: the right value as is, else ``left_fn(left)``."""
        return self.fold(lambda r: r, left_fn)

    def fold_right(self, right_fn: Callable[[R], L]) -> L:
        """Recover a left-typed value: the left value as is, else ``right_fn(right)``."""
        return self.fold(right_fn, lambda l: l)

    # transformation

    def swap(self) -> "Either[R, L]":
        if self.is_right():
            return Left(self.value)  # type: ignore[attr-defined]
        return Right(self.value)  # type: ignore[attr-defined]

    def left_map(self, fn: Callable[[L], L2]) -> "Either[L2, R]":
        if self.is_left():
            return Left(fn(self.value))  # type: ignore[attr-defined]
        return Right(self.value)  # type: ignore[attr-defined]

    def right_map(self, fn: Callable[[R], R2]) -> "Either[L, R2]":
        if self.is_right():
            return Right(fn(self.value))  # type: ignore[attr-defined]
        return Left(self.value)  # type: ignore[attr-defined]

    def bimap(self, left_fn: Callable[[L], L2], right_fn: Callable[[R], R2]) -> "Either[L2, R2]":
        if self.is_right():
            return Right(right_fn(self.value))  # type: ignore[attr-defined]
        return Left(left_fn(self.value))  # type: ignore[attr-defined]

    map = right_map
    map_left = left_map

    def flat_map(self, fn: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        if self.is_right():
            return fn(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def get_or_else(self, default: R) -> R:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]

    # tracing; these return self, not a copy

    def trace_left(self, fn: Callable[[L], Any]) -> "Either[L, R]":
        if self.is_left():
            fn(self.value)  # type: ignore[attr-defined]
        return self

    def trace_right(self, fn: Callable[[R], Any]) -> "Either[L, R]":
        if self.is_right():
            fn(self.value)  # type: ignore[attr-defined]
        return self

    def trace(self, left_fn: Callable[[L], Any], right_fn: Callable[[R], Any]) -> "Either[L, R]":
        return self.trace_left(left_fn).trace_right(right_fn)

    def __str__(self) -> str:
        return self.fold(lambda r: f"Right({r})", lambda l: f"Left({l})")


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R
    def is_left(self) -> bool: return False


def left(value: L) -> Either[L, Any]:
    if value is None:
        raise InvalidValueError("Left")
    return Left(value)


def right(value: R) -> Either[Any, R]:
    if value is None:
        raise InvalidValueError("Right")
    return Right(value)


of = right


def attempt(f: Callable[[], R]) -> Either[Exception, R]:
    """Run ``f`` and capture a raised ``Exception`` as ``Left``, the result as ``Right``.

    The exception object itself is the left payload, traceback included.
    """
    try:
        return Right(f())
    except Exception as ex:
        return Left(ex)


async def from_async(p: Union[Awaitable[R], Callable[[], Awaitable[R]]]) -> Either[Exception, R]:
    """Await ``p`` (or the awaitable ``p()`` returns) and translate its outcome.

    Resolution becomes ``Right``, an exception becomes ``Left``. The returned
    coroutine itself never raises for a well-formed input; cancellation is
    left to propagate.
    """
    try:
        aw = p() if callable(p) else p
        return Right(await aw)
    except Exception as ex:
        return Left(ex)
