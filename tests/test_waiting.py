"""
Tests for wait-for-postcondition helpers
"""

import pytest

from cart_verify.core.errors import SettlementTimeout
from cart_verify.utils.waiting import poll_until, wait_for_stable


class _Counter:
    """Async condition that becomes truthy after `ready_after` calls"""

    def __init__(self, ready_after: int, value="ready"):
        self.calls = 0
        self.ready_after = ready_after
        self.value = value

    async def __call__(self):
        self.calls += 1
        return self.value if self.calls >= self.ready_after else None


@pytest.mark.asyncio
async def test_poll_until_returns_check_value():
    check = _Counter(ready_after=3)
    result = await poll_until(check, timeout=1, interval=0.001)
    assert result == "ready"
    assert check.calls == 3


@pytest.mark.asyncio
async def test_poll_until_immediate():
    check = _Counter(ready_after=1)
    assert await poll_until(check, timeout=1, interval=0.001) == "ready"
    assert check.calls == 1


@pytest.mark.asyncio
async def test_poll_until_times_out():
    check = _Counter(ready_after=10_000)
    with pytest.raises(SettlementTimeout) as exc_info:
        await poll_until(check, timeout=0.05, interval=0.005, description="row detached")
    assert exc_info.value.description == "row detached"
    assert isinstance(exc_info.value, TimeoutError)


@pytest.mark.asyncio
async def test_wait_for_stable_waits_for_repeat():
    readings = iter([3, 2, 2])

    async def read():
        return next(readings)

    assert await wait_for_stable(read, timeout=1, interval=0.001) == 2


@pytest.mark.asyncio
async def test_wait_for_stable_accepts_zero():
    async def read():
        return 0

    assert await wait_for_stable(read, timeout=1, interval=0.001) == 0


@pytest.mark.asyncio
async def test_wait_for_stable_times_out_on_flapping_value():
    state = {"n": 0}

    async def read():
        state["n"] += 1
        return state["n"]

    with pytest.raises(SettlementTimeout):
        await wait_for_stable(read, timeout=0.05, interval=0.005)
