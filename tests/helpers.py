"""Async steps shared by the combinator tests."""

import asyncio
from typing import Any

import pytest


class Recorder:
    """Async step that records each call and suspends once before returning."""

    def __init__(self, fn=lambda x: x):
        self.fn = fn
        self.calls: list[Any] = []

    async def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        await asyncio.sleep(0)
        return self.fn(arg)


async def never(_arg: Any) -> Any:
    """Async step that fails the test if it is ever invoked."""
    pytest.fail("step must not run for this variant")


def lift(fn):
    """Wrap a sync function as an async step."""

    async def step(arg: Any) -> Any:
        return fn(arg)

    return step
