"""
Storefront session - one browser page plus its page objects and cart model
"""

import logging
from typing import NamedTuple

from playwright.async_api import Page

from cart_verify.cart.consistency import CartConsistencyModel
from cart_verify.cart.models import CartSnapshot
from cart_verify.core.config import VerifySettings
from cart_verify.pages import CartPage, CatalogPage, ProductDetailPage
from cart_verify.pages.selectors import DEFAULT_CATEGORY
from cart_verify.utils.money import format_price

logger = logging.getLogger(__name__)


class AddedProduct(NamedTuple):
    name: str
    price: int


class StorefrontSession:
    """
    Everything one scenario needs, bound to a single page.

    Sessions never share state; run parallel scenarios on separate browser
    contexts, one session each.
    """

    def __init__(self, page: Page, settings: VerifySettings):
        self.page = page
        self.settings = settings
        self.catalog = CatalogPage(page, settings)
        self.product = ProductDetailPage(page, settings)
        self.cart = CartPage(page, settings)
        self.model = CartConsistencyModel(self.cart, strict_prices=settings.strict_prices)

    async def add_product(self, name: str, category: str = DEFAULT_CATEGORY) -> AddedProduct:
        """Navigate to `name` in `category`, add it to the cart and acknowledge the alert"""
        await self.catalog.goto_home()
        await self.catalog.open_category(category)
        await self.catalog.open_product_by_name(name)
        return await self._add_open_product()

    async def add_product_by_index(self, idx: int, category: str = DEFAULT_CATEGORY) -> AddedProduct:
        await self.catalog.goto_home()
        await self.catalog.open_category(category)
        await self.catalog.open_product_by_index(idx)
        return await self._add_open_product()

    async def _add_open_product(self) -> AddedProduct:
        shown_name = await self.product.wait_loaded()
        price = await self.product.get_price()
        await self.product.add_to_cart_expect_alert()

        logger.info(f"🛒 SESSION: added '{shown_name}' at {format_price(price)}")
        return AddedProduct(shown_name, price)

    async def open_cart(self) -> CartSnapshot:
        """Open the cart and check its total straight away"""
        await self.cart.open()
        return await self.model.assert_consistent()

    async def clear_cart(self) -> int:
        await self.cart.open()
        removed = await self.model.clear_all()
        await self.model.assert_consistent()
        return removed
