"""
Catalog Page - home page, categories and product grid
"""

import logging
import re
from typing import List

from playwright.async_api import TimeoutError as PlaywrightTimeoutError, expect

from cart_verify.core.errors import NotFound, SettlementTimeout
from cart_verify.pages import selectors
from cart_verify.pages.base import StorefrontPage

logger = logging.getLogger(__name__)


class CatalogPage(StorefrontPage):

    def __init__(self, page, settings):
        super().__init__(page, settings)
        self.product_cards = page.locator(selectors.PRODUCT_CARDS)
        self.product_links = page.locator(f"{selectors.PRODUCT_CARDS} {selectors.PRODUCT_TITLE_LINK}")

    def category_link(self, name: str):
        return self.page.get_by_role('link', name=name, exact=True)

    async def goto_home(self):
        """Open the storefront home page and wait for categories and products"""
        logger.info(f"CATALOG: opening {self.settings.base_url}")
        await self.page.goto(self.settings.base_url + '/', wait_until='domcontentloaded')
        try:
            await expect(self.page).to_have_title(selectors.HOME_TITLE, timeout=self.expect_timeout)
        except AssertionError as e:
            raise SettlementTimeout("storefront home page title", self.settings.expect_timeout) from e

        await self.wait_visible(self.category_link(selectors.DEFAULT_CATEGORY), "category links visible")
        await self.wait_visible(self.product_cards.first, "at least one product card visible")

    async def open_category(self, name: str = selectors.DEFAULT_CATEGORY):
        """
        Click a category and wait for the grid to re-render.

        The old cards stay on screen until the category request returns, so
        wait for the previous first card to go away before trusting the grid.
        """
        logger.info(f"CATALOG: opening category '{name}'")
        previous = None
        if await self.product_cards.count():
            previous = await self.product_cards.first.element_handle(timeout=self.action_timeout)

        await self.category_link(name).click(timeout=self.action_timeout)

        if previous is not None:
            try:
                await previous.wait_for_element_state('hidden', timeout=self.expect_timeout)
            except PlaywrightTimeoutError as e:
                raise SettlementTimeout(f"product grid for '{name}' to replace previous cards",
                                        self.settings.expect_timeout) from e
        await self.wait_visible(self.product_cards.first, "at least one product card visible")

    async def open_laptops(self):
        await self.open_category(selectors.DEFAULT_CATEGORY)

    async def product_names(self) -> List[str]:
        return [name.strip() for name in await self.product_links.all_text_contents()]

    async def open_product_by_index(self, idx: int) -> str:
        """Open the product at idx in the grid and return its name"""
        count = await self.product_links.count()
        if not 0 <= idx < count:
            raise NotFound(idx)

        link = self.product_links.nth(idx)
        name = ((await self.text_of(link)) or '').strip()
        logger.info(f"CATALOG: opening product #{idx} '{name}'")
        await link.click(timeout=self.action_timeout)
        await self.wait_for_url(selectors.PRODUCT_PAGE_URL, f"product page for '{name}'")
        return name

    async def open_product_by_name(self, name: str):
        """Open the product whose title is exactly `name`"""
        link = self.product_links.filter(has_text=re.compile(rf'^\s*{re.escape(name)}\s*$'))
        if await link.count() == 0:
            logger.warning(f"CATALOG: '{name}' not in grid")
            raise NotFound(name)

        logger.info(f"CATALOG: opening product '{name}'")
        await link.first.click(timeout=self.action_timeout)
        await self.wait_for_url(selectors.PRODUCT_PAGE_URL, f"product page for '{name}'")
