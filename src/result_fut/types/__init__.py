"""Core types: Result, Ok, Err."""

from result_fut.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Result",
]
