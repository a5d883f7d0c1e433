#!/usr/bin/env python3
"""
Cart Consistency Model - read cart rows and total, check they agree
Wraps a CartDriver with row lookups, deletions and the total == sum(rows) check
"""

import logging
from typing import List

from cart_verify.cart.driver import CartDriver
from cart_verify.cart.models import CartSnapshot, LineItem
from cart_verify.core.errors import InvariantViolation, MalformedRow, NotFound, OutOfRange
from cart_verify.utils.money import format_price, parse_price, parse_price_strict

logger = logging.getLogger(__name__)


class CartConsistencyModel:
    """
    High-level cart operations with built-in total verification.

    Positions are re-read from the driver on every call; nothing is cached
    between operations, so a deletion never leaves a stale index behind.
    """

    def __init__(self, driver: CartDriver, strict_prices: bool = False):
        """
        Args:
            driver: Collaborator that renders and mutates the cart
            strict_prices: Raise ParseDegraded on price text with no digits
                instead of reading it as 0
        """
        self.driver = driver
        self.strict_prices = strict_prices

    def _normalize(self, raw) -> int:
        if self.strict_prices:
            return parse_price_strict(raw)
        return parse_price(raw)

    # ----------------------------
    # Reads
    # ----------------------------
    async def item_count(self) -> int:
        return await self.driver.count_rows()

    async def line_item(self, position: int) -> LineItem:
        count = await self.item_count()
        if not 0 <= position < count:
            raise OutOfRange(position, count)
        return await self._read_row(position)

    async def _read_row(self, position: int) -> LineItem:
        name = await self.driver.row_name(position)
        if not name or not name.strip():
            raise MalformedRow(position)
        price = self._normalize(await self.driver.row_price_text(position))
        return LineItem(name=name, unit_price=price, position=position)

    async def total(self) -> int:
        return self._normalize(await self.driver.total_text())

    async def snapshot(self) -> CartSnapshot:
        count = await self.item_count()
        items = [await self._read_row(i) for i in range(count)]
        return CartSnapshot(items=tuple(items), reported_total=await self.total())

    async def price_of(self, name: str) -> int:
        snapshot = await self.snapshot()
        item = snapshot.find(name)
        if item is None:
            raise NotFound(name)
        return item.unit_price

    async def names(self) -> List[str]:
        return (await self.snapshot()).names

    # ----------------------------
    # Verification
    # ----------------------------
    async def verify_total_matches_sum(self) -> bool:
        return (await self.snapshot()).is_consistent

    async def assert_consistent(self) -> CartSnapshot:
        """Take a fresh snapshot and raise InvariantViolation if total != sum(rows)"""
        snapshot = await self.snapshot()
        if not snapshot.is_consistent:
            logger.error(
                f"❌ CART: total {format_price(snapshot.reported_total)} != "
                f"sum of {snapshot.count} row(s) {format_price(snapshot.line_sum)}"
            )
            raise InvariantViolation(snapshot)
        logger.info(f"✅ CART: {snapshot.count} row(s), total {format_price(snapshot.reported_total)} matches")
        return snapshot

    # ----------------------------
    # Mutations
    # ----------------------------
    async def delete_at(self, position: int) -> LineItem:
        """Delete the row at position and wait for the cart to settle. Returns the removed item."""
        count = await self.item_count()
        if not 0 <= position < count:
            raise NotFound(position)

        item = await self._read_row(position)
        logger.info(f"CART: deleting '{item.name}' at position {position} ({format_price(item.unit_price)})")
        await self.driver.delete_row(position)
        return item

    async def delete_by_name(self, name: str) -> LineItem:
        """Delete the first row named exactly `name`"""
        count = await self.item_count()
        for position in range(count):
            if await self.driver.row_name(position) == name:
                return await self.delete_at(position)
        logger.warning(f"CART: '{name}' not in cart ({count} row(s))")
        raise NotFound(name)

    async def delete_all_named(self, name: str) -> int:
        """Delete every row named `name`, re-scanning after each deletion"""
        removed = 0
        while True:
            try:
                await self.delete_by_name(name)
            except NotFound:
                return removed
            removed += 1

    async def clear_all(self) -> int:
        """Delete rows from the last position down until the cart is empty"""
        removed = 0
        count = await self.item_count()
        if count == 0:
            logger.info("CART: already empty")
            return 0

        while count > 0:
            await self.delete_at(count - 1)
            removed += 1
            count = await self.item_count()

        logger.info(f"✅ CART: cleared {removed} row(s)")
        return removed
