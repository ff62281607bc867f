"""AsyncResult type for chaining async combinators over a pending Result.

AsyncResult wraps an Awaitable[Result[T, E]] and exposes the same ``*_fut``
combinators as Ok and Err, so a pipeline of async steps reads as a single
expression that is awaited once.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .and_then_fut(validate_user)
        .map_fut(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from result_fut.types.result import Err, Ok, Result

__all__ = ["AsyncResult"]


class AsyncResult[T, E]:
    """Lazy wrapper for composing async combinators on a pending Result.

    Methods that produce a Result return a new AsyncResult; nothing runs until
    the chain is awaited. Methods that produce a plain value or a bool return
    a coroutine. Each link awaits the previous one and then delegates to the
    matching method on Ok or Err, so the short-circuit rules of those methods
    hold link by link.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        multiple times will raise RuntimeError. Wrap a Task/Future for
        multi-await scenarios.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def double(x: int) -> int:
            return x * 2

        async def main():
            result = await AsyncResult(get_data()).map_fut(double)
            assert result == Ok(84)
        ```
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to an existing Result.

        Args:
            result: A Result[T, E] value.

        Returns:
            AsyncResult wrapping a coroutine that returns the result.
        """

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def map_fut[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Await f on the Ok value; an Err passes through.

        Args:
            f: Async step to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return await result.map_fut(f)

        return AsyncResult(_mapped())

    def map_err_fut[F](self, f: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        """Await f on the Err value; an Ok passes through."""

        async def _mapped() -> Result[T, F]:
            result = await self._awaitable
            return await result.map_err_fut(f)

        return AsyncResult(_mapped())

    def inspect_fut(self, f: Callable[[T], Awaitable[object]]) -> AsyncResult[T, E]:
        """Await f on the Ok value for its side effect; the Result is unchanged."""

        async def _inspected() -> Result[T, E]:
            result = await self._awaitable
            return await result.inspect_fut(f)

        return AsyncResult(_inspected())

    def inspect_err_fut(self, f: Callable[[E], Awaitable[object]]) -> AsyncResult[T, E]:
        """Await f on the Err value for its side effect; the Result is unchanged."""

        async def _inspected() -> Result[T, E]:
            result = await self._awaitable
            return await result.inspect_err_fut(f)

        return AsyncResult(_inspected())

    def and_then_fut[U](
        self, f: Callable[[T], Awaitable[Result[U, E]]]
    ) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result.

        If Ok, awaits f(value) and returns its result.
        If Err, returns the Err unchanged.

        Args:
            f: Async function that takes T and returns Result[U, E].

        Returns:
            New AsyncResult with the chained result.

        Example:
            ```python
            async def fetch_details(id: int) -> Result[dict, str]:
                return Ok({"id": id, "name": "test"})

            async def example():
                result = await AsyncResult.from_ok(1).and_then_fut(fetch_details)
                assert result.is_ok()
            ```
        """

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            return await result.and_then_fut(f)

        return AsyncResult(_chained())

    def or_else_fut[F](
        self, f: Callable[[E], Awaitable[Result[T, F]]]
    ) -> AsyncResult[T, F]:
        """Recover from an Err with an async function.

        If Err, awaits f(error) and returns its result.
        If Ok, returns the Ok unchanged.

        Args:
            f: Async function that takes E and returns Result[T, F].

        Returns:
            New AsyncResult with the recovery result.
        """

        async def _recovered() -> Result[T, F]:
            result = await self._awaitable
            return await result.or_else_fut(f)

        return AsyncResult(_recovered())

    def map_or_fut[U](
        self, default: U, f: Callable[[T], Awaitable[U]]
    ) -> Coroutine[Any, Any, U]:
        """Coroutine producing f(value) for Ok or the default for Err."""

        async def _mapped() -> U:
            result = await self._awaitable
            return await result.map_or_fut(default, f)

        return _mapped()

    def map_or_else_fut[U](
        self,
        default: Callable[[E], Awaitable[U]],
        f: Callable[[T], Awaitable[U]],
    ) -> Coroutine[Any, Any, U]:
        """Coroutine producing f(value) for Ok or default(error) for Err."""

        async def _mapped() -> U:
            result = await self._awaitable
            return await result.map_or_else_fut(default, f)

        return _mapped()

    def unwrap_or_else_fut(self, f: Callable[[E], Awaitable[T]]) -> Coroutine[Any, Any, T]:
        """Unwrap with an async function computing the fallback from the error.

        Returns:
            Coroutine that produces the Ok value or the awaited f(error).
        """

        async def _unwrap() -> T:
            result = await self._awaitable
            return await result.unwrap_or_else_fut(f)

        return _unwrap()

    def is_ok_and_fut(self, f: Callable[[T], Awaitable[bool]]) -> Coroutine[Any, Any, bool]:
        """Coroutine producing the awaited predicate for Ok, False for Err."""

        async def _check() -> bool:
            result = await self._awaitable
            return await result.is_ok_and_fut(f)

        return _check()

    def is_err_and_fut(self, f: Callable[[E], Awaitable[bool]]) -> Coroutine[Any, Any, bool]:
        """Coroutine producing the awaited predicate for Err, False for Ok."""

        async def _check() -> bool:
            result = await self._awaitable
            return await result.is_err_and_fut(f)

        return _check()

    def __repr__(self) -> str:
        return f"AsyncResult({self._awaitable!r})"
