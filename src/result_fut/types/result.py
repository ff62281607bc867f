"""Result type: Ok[T] | Err[E] for explicit error handling.

Each variant carries the synchronous combinators and their async twins
(``*_fut``). The async twins take a step returning an awaitable and resolve
to exactly what the synchronous method returns for the awaited value. The
variant that does not match an operation returns without reaching an await.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeIs

import msgspec

from result_fut.errors import UnwrapError

__all__ = ["Err", "Ok", "Result"]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations, synchronously or with async steps.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, f: Callable[[T], bool]) -> bool:
        """Return the predicate applied to the contained value."""
        return f(self.value)

    def is_err_and(self, _f: Callable[[object], bool]) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, since Ok has no error to unwrap.
        """
        raise UnwrapError(self, f"Called unwrap_err on Ok: {self.value!r}")

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Ok."""
        raise UnwrapError(self, f"{msg}: {self.value!r}")

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[object], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value; default is not called."""
        return f(self.value)

    def map_err(self, _f: Callable[[object], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], object]) -> Ok[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[object], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[object], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> T:
        """Return the contained value."""
        return self.value

    def err(self) -> None:
        """Return None since this is Ok."""
        return None

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other since this is Ok."""
        return other

    def or_(self, _other: object) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value  # type: ignore[return-value]

    # --- async combinators ---

    async def map_fut[U](self, f: Callable[[T], Awaitable[U]]) -> Ok[U]:
        """Await f on the contained value and wrap the outcome in Ok.

        Args:
            f: Async step applied to the Ok value.

        Returns:
            Ok containing the awaited result of f.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            assert await Ok(5).map_fut(double) == Ok(10)
            ```
        """
        return Ok(await f(self.value))

    async def map_or_fut[U](self, default: U, f: Callable[[T], Awaitable[U]]) -> U:  # noqa: ARG002
        """Await f on the contained value, ignoring the default."""
        return await f(self.value)

    async def map_or_else_fut[U](
        self,
        default: Callable[[object], Awaitable[U]],  # noqa: ARG002
        f: Callable[[T], Awaitable[U]],
    ) -> U:
        """Await f on the contained value; default is never called."""
        return await f(self.value)

    async def map_err_fut(self, _f: Callable[[object], Awaitable[object]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    async def inspect_fut(self, f: Callable[[T], Awaitable[object]]) -> Ok[T]:
        """Await f on the contained value for its side effect, then return self.

        The awaited result of f is discarded.
        """
        await f(self.value)
        return self

    async def inspect_err_fut(self, _f: Callable[[object], Awaitable[object]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    async def and_then_fut[U, E](
        self, f: Callable[[T], Awaitable[Ok[U] | Err[E]]]
    ) -> Ok[U] | Err[E]:
        """Await a Result-returning step on the contained value.

        Args:
            f: Async step that takes T and returns Result[U, E].

        Returns:
            The Result produced by f, which may be Err.
        """
        return await f(self.value)

    async def or_else_fut(self, _f: Callable[[object], Awaitable[object]]) -> Ok[T]:
        """Return self unchanged since this is Ok; the recovery step never runs."""
        return self

    async def unwrap_or_else_fut(self, _f: Callable[[object], Awaitable[T]]) -> T:
        """Return the contained value without calling the fallback step."""
        return self.value

    async def is_ok_and_fut(self, f: Callable[[T], Awaitable[bool]]) -> bool:
        """Return the awaited predicate applied to the contained value."""
        return await f(self.value)

    async def is_err_and_fut(self, _f: Callable[[object], Awaitable[bool]]) -> bool:
        """Return False since this is Ok."""
        return False


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _f: Callable[[object], bool]) -> bool:
        """Return False since this is Err."""
        return False

    def is_err_and(self, f: Callable[[E], bool]) -> bool:
        """Return the predicate applied to the contained error."""
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapError(self, f"Called unwrap on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the contained error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(self, f"{msg}: {self.error!r}")

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def map(self, _f: Callable[[object], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_or[U](self, default: U, _f: Callable[[object], U]) -> U:
        """Return the default since this is Err."""
        return default

    def map_or_else[U](self, default: Callable[[E], U], _f: Callable[[object], U]) -> U:
        """Return default applied to the contained error."""
        return default(self.error)

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def inspect(self, _f: Callable[[object], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Err[E]:
        """Call f with the contained error and return self unchanged."""
        f(self.error)
        return self

    def and_then(self, _f: Callable[[object], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> None:
        """Return None since this is Err."""
        return None

    def err(self) -> E:
        """Return the contained error."""
        return self.error

    def and_(self, _other: object) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    # --- async combinators ---

    async def map_fut(self, _f: Callable[[object], Awaitable[object]]) -> Err[E]:
        """Return self unchanged since this is Err; the step never runs."""
        return self

    async def map_or_fut[U](self, default: U, _f: Callable[[object], Awaitable[U]]) -> U:
        """Return the default since this is Err."""
        return default

    async def map_or_else_fut[U](
        self,
        default: Callable[[E], Awaitable[U]],
        _f: Callable[[object], Awaitable[U]],
    ) -> U:
        """Await default on the contained error; f is never called."""
        return await default(self.error)

    async def map_err_fut[F](self, f: Callable[[E], Awaitable[F]]) -> Err[F]:
        """Await f on the contained error and wrap the outcome in Err.

        Args:
            f: Async step applied to the error value.

        Returns:
            Err containing the awaited result of f.
        """
        return Err(await f(self.error))

    async def inspect_fut(self, _f: Callable[[object], Awaitable[object]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    async def inspect_err_fut(self, f: Callable[[E], Awaitable[object]]) -> Err[E]:
        """Await f on the contained error for its side effect, then return self."""
        await f(self.error)
        return self

    async def and_then_fut(self, _f: Callable[[object], Awaitable[object]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    async def or_else_fut[T, F](
        self, f: Callable[[E], Awaitable[Ok[T] | Err[F]]]
    ) -> Ok[T] | Err[F]:
        """Await a recovery step on the contained error.

        Args:
            f: Async step that takes the error and returns a new Result.

        Returns:
            The Result produced by f; an Ok here is a recovered error.

        Example:
            ```python
            async def retry_cached(e: str) -> Result[int, str]:
                return Ok(0)

            assert await Err("miss").or_else_fut(retry_cached) == Ok(0)
            ```
        """
        return await f(self.error)

    async def unwrap_or_else_fut[T](self, f: Callable[[E], Awaitable[T]]) -> T:
        """Await f on the contained error and return its result as a plain value."""
        return await f(self.error)

    async def is_ok_and_fut(self, _f: Callable[[object], Awaitable[bool]]) -> bool:
        """Return False since this is Err."""
        return False

    async def is_err_and_fut(self, f: Callable[[E], Awaitable[bool]]) -> bool:
        """Return the awaited predicate applied to the contained error."""
        return await f(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]

