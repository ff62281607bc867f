"""Ready-made async steps for the ``*_fut`` combinators.

- safe_step: turn exceptions raised by an async function into Err values
- blocking: run a blocking callable in a worker thread
- log_ok / log_err: inspector steps emitting a structlog event

Example:
    ```python
    @safe_step(exceptions=(httpx.HTTPError,))
    async def fetch(url: str) -> bytes:
        ...

    body = await (
        AsyncResult.from_ok(url)
        .and_then_fut(fetch)
        .inspect_err_fut(log_err("fetch failed"))
        .map_fut(blocking(parse_payload))
    )
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any, overload

import anyio.to_thread
import wrapt

from result_fut._logging import get_logger
from result_fut.types.result import Err, Ok

__all__ = ["blocking", "log_err", "log_ok", "safe_step"]

_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@overload
def safe_step[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_step[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Ok[Any] | Err[E]]]]: ...


def safe_step[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that makes an async step return Ok/Err instead of raising.

    The combinators never catch what a step raises. Wrapping the step with
    safe_step is how a caller opts into exceptions as values, for example
    before handing it to and_then_fut or or_else_fut.

    Can be used with or without arguments:
        @safe_step
        async def risky(x): ...

        @safe_step(exceptions=(ValueError, TypeError))
        async def specific(x): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            result = await wrapped(*args, **kwargs)
            return Ok(result)
        except catch as e:
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper


def blocking[In, Out](func: Callable[[In], Out]) -> Callable[[In], Awaitable[Out]]:
    """Adapt a blocking callable into an async step.

    The call runs in anyio's worker thread pool, so the event loop keeps
    running while it blocks. Exceptions raised in the thread are re-raised
    at the await.

    Args:
        func: Blocking function of one argument.

    Returns:
        Async step calling func in a worker thread.

    Example:
        ```python
        text = await Ok(path).map_fut(blocking(Path.read_text))
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Out],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Out:
        return await anyio.to_thread.run_sync(functools.partial(wrapped, *args, **kwargs))

    return wrapper(func)


def _log_step(event: str, key: str, logger: Any, level: str) -> Callable[[Any], Awaitable[None]]:
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(sorted(_LEVELS))}")
    log = logger if logger is not None else get_logger("result_fut")

    async def _log(payload: Any) -> None:
        getattr(log, level)(event, **{key: payload})

    return _log


def log_ok(event: str, *, logger: Any = None, level: str = "info") -> Callable[[Any], Awaitable[None]]:
    """Build an inspector step that logs the Ok value.

    Args:
        event: Event name passed to the logger.
        logger: structlog logger to use. Defaults to the "result_fut" logger.
        level: Log method name ("debug", "info", "warning", "error", "critical").

    Returns:
        Async step for inspect_fut binding the payload as ``value``.

    Raises:
        ValueError: If level is not a known log method.
    """
    return _log_step(event, "value", logger, level)


def log_err(event: str, *, logger: Any = None, level: str = "warning") -> Callable[[Any], Awaitable[None]]:
    """Build an inspector step that logs the Err payload.

    Same arguments as log_ok; the payload is bound as ``error``.
    """
    return _log_step(event, "error", logger, level)
