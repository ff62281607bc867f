"""Tests for AsyncResult chaining."""

import asyncio

import pytest

from result_fut import AsyncResult, Err, Ok, Result
from tests.helpers import Recorder, lift, never


async def double(x: int) -> int:
    await asyncio.sleep(0)
    return x * 2


class TestAsyncResult:
    """Tests for AsyncResult wrapper."""

    @pytest.mark.asyncio
    async def test_await_ok(self):
        """Can await AsyncResult to get Ok."""

        async def get_ok() -> Result[int, str]:
            return Ok(42)

        result = await AsyncResult(get_ok())
        assert result == Ok(42)

    @pytest.mark.asyncio
    async def test_await_err(self):
        """Can await AsyncResult to get Err."""

        async def get_err() -> Result[int, str]:
            return Err("error")

        result = await AsyncResult(get_err())
        assert result == Err("error")

    @pytest.mark.asyncio
    async def test_from_ok(self):
        assert await AsyncResult.from_ok(42) == Ok(42)

    @pytest.mark.asyncio
    async def test_from_err(self):
        assert await AsyncResult.from_err("error") == Err("error")

    @pytest.mark.asyncio
    async def test_from_result(self):
        original = Err("error")
        assert await AsyncResult.from_result(original) is original

    @pytest.mark.asyncio
    async def test_map_fut_ok(self):
        assert await AsyncResult.from_ok(5).map_fut(double) == Ok(10)

    @pytest.mark.asyncio
    async def test_map_fut_err(self):
        assert await AsyncResult.from_err("error").map_fut(never) == Err("error")

    @pytest.mark.asyncio
    async def test_map_err_fut(self):
        upper = lift(str.upper)
        assert await AsyncResult.from_err("error").map_err_fut(upper) == Err("ERROR")
        assert await AsyncResult.from_ok(42).map_err_fut(never) == Ok(42)

    @pytest.mark.asyncio
    async def test_inspect_fut(self):
        step = Recorder()
        assert await AsyncResult.from_ok(1).inspect_fut(step) == Ok(1)
        assert await AsyncResult.from_err(2).inspect_fut(step) == Err(2)
        assert step.calls == [1]

    @pytest.mark.asyncio
    async def test_inspect_err_fut(self):
        step = Recorder()
        assert await AsyncResult.from_err(2).inspect_err_fut(step) == Err(2)
        assert await AsyncResult.from_ok(1).inspect_err_fut(step) == Ok(1)
        assert step.calls == [2]

    @pytest.mark.asyncio
    async def test_and_then_fut(self):
        async def fetch(x: int) -> Result[str, str]:
            await asyncio.sleep(0)
            return Ok(f"item-{x}")

        assert await AsyncResult.from_ok(5).and_then_fut(fetch) == Ok("item-5")
        assert await AsyncResult.from_err("original").and_then_fut(never) == Err("original")

    @pytest.mark.asyncio
    async def test_and_then_fut_chain_fails(self):
        async def validate(_x: int) -> Result[int, str]:
            return Err("validation failed")

        result = await AsyncResult.from_ok(5).and_then_fut(validate).map_fut(never)
        assert result == Err("validation failed")

    @pytest.mark.asyncio
    async def test_or_else_fut(self):
        async def recover(_e: str) -> Result[int, str]:
            await asyncio.sleep(0)
            return Ok(0)

        assert await AsyncResult.from_err("error").or_else_fut(recover) == Ok(0)
        assert await AsyncResult.from_ok(42).or_else_fut(never) == Ok(42)

    @pytest.mark.asyncio
    async def test_map_or_fut(self):
        assert await AsyncResult.from_ok(1).map_or_fut(3, lift(lambda x: x + 1)) == 2
        assert await AsyncResult.from_err(1).map_or_fut(3, never) == 3

    @pytest.mark.asyncio
    async def test_map_or_else_fut(self):
        dec = lift(lambda e: e - 1)
        inc = lift(lambda x: x + 1)
        assert await AsyncResult.from_ok(1).map_or_else_fut(dec, inc) == 2
        assert await AsyncResult.from_err(1).map_or_else_fut(dec, inc) == 0

    @pytest.mark.asyncio
    async def test_unwrap_or_else_fut(self):
        compute_default = lift(len)
        assert await AsyncResult.from_ok(42).unwrap_or_else_fut(never) == 42
        assert await AsyncResult.from_err("error").unwrap_or_else_fut(compute_default) == 5

    @pytest.mark.asyncio
    async def test_predicates(self):
        is_one = lift(lambda x: x == 1)
        assert await AsyncResult.from_ok(1).is_ok_and_fut(is_one) is True
        assert await AsyncResult.from_err(1).is_ok_and_fut(never) is False
        assert await AsyncResult.from_err(1).is_err_and_fut(is_one) is True
        assert await AsyncResult.from_ok(1).is_err_and_fut(never) is False

    @pytest.mark.asyncio
    async def test_chained_operations(self):
        """Multiple operations can be chained and awaited once."""

        async def fetch(id: int) -> Result[dict, str]:
            return Ok({"id": id, "name": f"user-{id}"})

        result = (
            await AsyncResult(fetch(1))
            .map_fut(lift(lambda d: d["name"]))
            .map_fut(lift(str.upper))
        )
        assert result == Ok("USER-1")

    @pytest.mark.asyncio
    async def test_chain_is_lazy(self):
        """Nothing runs until the chain is awaited."""
        step = Recorder()
        chain = AsyncResult.from_ok(1).map_fut(step).inspect_fut(step)
        await asyncio.sleep(0)
        assert step.calls == []
        assert await chain == Ok(1)
        assert step.calls == [1, 1]

    @pytest.mark.asyncio
    async def test_single_shot(self):
        """Awaiting a coroutine-backed AsyncResult twice raises."""
        ar = AsyncResult.from_ok(1)
        await ar
        with pytest.raises(RuntimeError):
            await ar

    @pytest.mark.asyncio
    async def test_exception_propagates(self):
        async def explode(_x):
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            await AsyncResult.from_ok(1).map_fut(explode).map_fut(never)

    def test_repr(self):
        ar = AsyncResult.from_ok(42)
        assert "AsyncResult" in repr(ar)
        ar._awaitable.close()
