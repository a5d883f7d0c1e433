"""
Wait-for-postcondition helpers

The storefront applies adds and deletes some time after accepting them, so
callers poll for the visible effect instead of sleeping a fixed amount.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, TypeVar

from cart_verify.core.errors import SettlementTimeout

logger = logging.getLogger(__name__)

T = TypeVar('T')


async def poll_until(
    check: Callable[[], Awaitable[T]],
    *,
    timeout: float,
    interval: float = 0.25,
    description: str = 'condition',
) -> T:
    """
    Await check() until it returns something truthy and return that value.

    Args:
        check: Async callable checked on every poll
        timeout: Seconds before giving up
        interval: Seconds between polls
        description: Human readable postcondition, used in logs and errors

    Raises:
        SettlementTimeout: check never became truthy within timeout
    """
    deadline = time.monotonic() + timeout
    attempts = 0
    while True:
        attempts += 1
        result = await check()
        if result:
            if attempts > 1:
                logger.debug(f"WAIT: '{description}' settled after {attempts} polls")
            return result
        if time.monotonic() >= deadline:
            logger.warning(f"⏰ WAIT: '{description}' not reached after {timeout:.1f}s ({attempts} polls)")
            raise SettlementTimeout(description, timeout)
        await asyncio.sleep(interval)


async def wait_for_stable(
    read: Callable[[], Awaitable[T]],
    *,
    timeout: float,
    interval: float = 0.25,
    description: str = 'value to settle',
    readings: int = 2,
) -> T:
    """
    Poll read() until it returns the same value `readings` times in a row.

    Used where there is no single element to wait on, e.g. an empty cart
    whose row count is legitimately zero.
    """
    history = []

    async def _settled() -> Optional[list]:
        history.append(await read())
        tail = history[-readings:]
        if len(tail) == readings and all(value == tail[0] for value in tail):
            return tail
        return None

    tail = await poll_until(_settled, timeout=timeout, interval=interval, description=description)
    return tail[0]
