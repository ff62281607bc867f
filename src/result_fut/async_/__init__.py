"""Async utilities: AsyncResult for chaining ``*_fut`` combinators.

Examples:
    >>> from result_fut.async_ import AsyncResult
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Ok({"id": id})
    >>>
    >>> async def get_id(d: dict) -> int:
    ...     return d["id"]
    >>>
    >>> async def main():
    ...     result = await AsyncResult(fetch(1)).map_fut(get_id)
"""

from result_fut.async_.result import AsyncResult

__all__ = ["AsyncResult"]
