"""
Product Detail Page - name, price and add to cart
"""

import logging

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from cart_verify.core.errors import AddToCartFailed, SettlementTimeout
from cart_verify.pages import selectors
from cart_verify.pages.base import StorefrontPage
from cart_verify.utils.money import parse_price
from cart_verify.utils.waiting import poll_until

logger = logging.getLogger(__name__)


class ProductDetailPage(StorefrontPage):

    def __init__(self, page, settings):
        super().__init__(page, settings)
        self.add_to_cart_link = page.get_by_role('link', name=selectors.ADD_TO_CART_LINK)
        self.product_name = page.locator(selectors.PRODUCT_NAME)
        self.price_container = page.locator(selectors.PRODUCT_PRICE)

    async def wait_loaded(self) -> str:
        """Product details are filled in by script after navigation; wait for the name"""
        return await poll_until(
            self.get_name,
            timeout=self.settings.expect_timeout,
            interval=self.settings.poll_interval,
            description='product name rendered',
        )

    async def get_name(self) -> str:
        return ((await self.text_of(self.product_name)) or '').strip()

    async def get_price(self) -> int:
        return parse_price(await self.text_of(self.price_container))

    async def add_to_cart_expect_alert(self, message: str = selectors.PRODUCT_ADDED_MESSAGE):
        """
        Click "Add to cart" and acknowledge the confirmation alert.

        The alert is always accepted, even when its text is unexpected, so the
        session is never left blocked on an open dialog.

        Raises:
            AddToCartFailed: alert text does not contain `message`
            SettlementTimeout: no alert appeared
        """
        try:
            async with self.page.expect_event('dialog', timeout=self.expect_timeout) as dialog_info:
                await self.add_to_cart_link.click(timeout=self.action_timeout)
            dialog = await dialog_info.value
        except PlaywrightTimeoutError as e:
            raise SettlementTimeout('add-to-cart confirmation alert', self.settings.expect_timeout) from e

        text = dialog.message
        await dialog.accept()
        if message not in text:
            logger.error(f"❌ PRODUCT: unexpected add-to-cart alert: {text!r}")
            raise AddToCartFailed(message, text)

        logger.info(f"✅ PRODUCT: added to cart ({text})")

