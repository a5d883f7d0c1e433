#!/usr/bin/env python3
"""
Cart Page - open the cart, read rows and total, delete rows
Implements the CartDriver protocol for the live storefront
"""

import logging
from typing import Optional, Tuple

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from cart_verify.core.errors import SettlementTimeout
from cart_verify.pages import selectors
from cart_verify.pages.base import StorefrontPage
from cart_verify.utils.waiting import poll_until, wait_for_stable

logger = logging.getLogger(__name__)

# Matching (count, total) reads required before the cart counts as settled.
# QUIET_READINGS applies when the page never reported network idle.
SETTLED_READINGS = 2
QUIET_READINGS = 6


class CartPage(StorefrontPage):

    def __init__(self, page, settings):
        super().__init__(page, settings)
        self.cart_link = page.locator(selectors.CART_LINK)
        self.rows = page.locator(selectors.CART_ROWS)
        self.total = page.locator(selectors.CART_TOTAL)

    def _cell(self, position: int, cell: int):
        return self.rows.nth(position).locator('td').nth(cell)

    async def open(self) -> int:
        """
        Open the cart and wait until rows and total stop changing.

        Rows are fetched one by one after the page loads and an empty cart
        never renders a row, so there is no single element to wait on.

        Returns:
            Number of rows once settled
        """
        logger.info("CART: opening cart")
        await self.cart_link.click(timeout=self.action_timeout)
        await self.wait_for_url(selectors.CART_PAGE_URL, "cart page")
        idle = await self.wait_for_network_idle()
        count, _ = await self.wait_settled(SETTLED_READINGS if idle else QUIET_READINGS)
        logger.info(f"CART: {count} row(s) rendered")
        return count

    async def _state(self) -> Tuple[int, str]:
        return await self.count_rows(), ((await self.total_text()) or '').strip()

    async def wait_settled(self, readings: int = SETTLED_READINGS) -> Tuple[int, str]:
        """Wait until (row count, total text) reads the same `readings` times in a row"""
        return await wait_for_stable(
            self._state,
            timeout=self.settings.expect_timeout,
            interval=self.settings.poll_interval,
            description='cart rows and total to settle',
            readings=readings,
        )

    # ----------------------------
    # CartDriver
    # ----------------------------
    async def count_rows(self) -> int:
        return await self.rows.count()

    async def row_name(self, position: int) -> str:
        return ((await self.text_of(self._cell(position, selectors.ROW_NAME_CELL))) or '').strip()

    async def row_price_text(self, position: int) -> Optional[str]:
        return await self.text_of(self._cell(position, selectors.ROW_PRICE_CELL))

    async def total_text(self) -> Optional[str]:
        if await self.total.count() == 0:
            return None
        return await self.total.text_content(timeout=self.action_timeout)

    async def delete_row(self, position: int) -> None:
        """
        Click the row's Delete link, then wait for the row to detach and the
        row count to drop by one. The storefront re-renders the whole table
        after a delete, so the old count can still be read briefly.
        """
        before = await self.count_rows()
        row = self.rows.nth(position)
        handle = await row.element_handle(timeout=self.action_timeout)

        await row.get_by_role('link', name=selectors.ROW_DELETE_LINK).click(timeout=self.action_timeout)

        try:
            await handle.wait_for_element_state('hidden', timeout=self.expect_timeout)
        except PlaywrightTimeoutError as e:
            raise SettlementTimeout(f"cart row {position} to detach", self.settings.expect_timeout) from e

        async def _dropped() -> bool:
            return await self.count_rows() == before - 1

        await poll_until(
            _dropped,
            timeout=self.settings.expect_timeout,
            interval=self.settings.poll_interval,
            description=f"cart row count {before} -> {before - 1}",
        )
        await self.wait_settled()
