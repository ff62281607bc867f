"""result-fut: async combinators for the Result type, Python 3.13+.

Ok and Err carry async twins of the synchronous combinators (map_fut,
and_then_fut, or_else_fut, ...). Each takes a step returning an awaitable,
awaits it at most once, and only when the matching variant is active.

Flat imports (preferred):
    from result_fut import Result, Ok, Err, AsyncResult
    from result_fut import safe_step, blocking, log_ok, log_err

Submodule imports (for organization):
    from result_fut.types import Result, Ok, Err
    from result_fut.async_ import AsyncResult
    from result_fut.protocol import ResultFut, AsyncStep
"""

# Types
from result_fut.types import Err, Ok, Result
from result_fut.errors import UnwrapError

# Contract
from result_fut.protocol import AsyncInspector, AsyncPredicate, AsyncStep, ResultFut

# Async
from result_fut.async_ import AsyncResult

# Steps
from result_fut.steps import blocking, log_err, log_ok, safe_step

# Configuration and logging
from result_fut._config import Config, get_config, init
from result_fut._logging import configure_logging, get_logger

__all__ = [
    "AsyncInspector",
    "AsyncPredicate",
    "AsyncResult",
    "AsyncStep",
    "Config",
    "Err",
    "Ok",
    "Result",
    "ResultFut",
    "UnwrapError",
    "blocking",
    "configure_logging",
    "get_config",
    "get_logger",
    "init",
    "log_err",
    "log_ok",
    "safe_step",
]
