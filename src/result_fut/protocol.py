"""Structural contract for the async combinators carried by Ok and Err.

``ResultFut`` lists the async twins of the synchronous Result combinators.
Both variants satisfy it, so code that only needs the async surface can accept
any ``ResultFut`` without naming Ok or Err.

Every method follows one evaluation rule: branch on the active variant first,
then either await the step once on the matching payload or return without
awaiting anything. Exceptions raised by a step propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from result_fut.types.result import Err, Ok

__all__ = ["AsyncInspector", "AsyncPredicate", "AsyncStep", "ResultFut"]

type AsyncStep[In, Out] = Callable[[In], Awaitable[Out]]
type AsyncPredicate[In] = Callable[[In], Awaitable[bool]]
type AsyncInspector[In] = Callable[[In], Awaitable[object]]


@runtime_checkable
class ResultFut[T, E](Protocol):
    """Async combinators over a Result[T, E].

    | Method               | Step runs on | Skipped variant returns |
    |----------------------|--------------|-------------------------|
    | map_fut              | Ok           | the Err                 |
    | map_or_fut           | Ok           | default                 |
    | map_or_else_fut      | Ok and Err   | never skipped           |
    | map_err_fut          | Err          | the Ok                  |
    | inspect_fut          | Ok           | the Ok/Err itself       |
    | inspect_err_fut      | Err          | the Ok/Err itself       |
    | and_then_fut         | Ok           | the Err                 |
    | or_else_fut          | Err          | the Ok                  |
    | unwrap_or_else_fut   | Err          | the Ok value            |
    | is_ok_and_fut        | Ok           | False                   |
    | is_err_and_fut       | Err          | False                   |
    """

    async def map_fut[U](self, f: AsyncStep[T, U], /) -> Ok[U] | Err[E]: ...

    async def map_or_fut[U](self, default: U, f: AsyncStep[T, U], /) -> U: ...

    async def map_or_else_fut[U](self, default: AsyncStep[E, U], f: AsyncStep[T, U], /) -> U: ...

    async def map_err_fut[F](self, f: AsyncStep[E, F], /) -> Ok[T] | Err[F]: ...

    async def inspect_fut(self, f: AsyncInspector[T], /) -> Ok[T] | Err[E]: ...

    async def inspect_err_fut(self, f: AsyncInspector[E], /) -> Ok[T] | Err[E]: ...

    async def and_then_fut[U](self, f: AsyncStep[T, Ok[U] | Err[E]], /) -> Ok[U] | Err[E]: ...

    async def or_else_fut[F](self, f: AsyncStep[E, Ok[T] | Err[F]], /) -> Ok[T] | Err[F]: ...

    async def unwrap_or_else_fut(self, f: AsyncStep[E, T], /) -> T: ...

    async def is_ok_and_fut(self, f: AsyncPredicate[T], /) -> bool: ...

    async def is_err_and_fut(self, f: AsyncPredicate[E], /) -> bool: ...
