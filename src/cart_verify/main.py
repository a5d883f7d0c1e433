import asyncio
import logging
import sys
from typing import List, Optional

from playwright.async_api import async_playwright

from cart_verify.core.config import CartVerifyConfig, VerifySettings
from cart_verify.core.errors import CartVerifyError, InvariantViolation
from cart_verify.core.logging_setup import configure_logging
from cart_verify.session import StorefrontSession
from cart_verify.utils.money import format_price

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS = ['Sony vaio i5', 'Sony vaio i7']


class CartAudit:
    """
    Main entry point for cart verification.
    Launches the configured browser and hands out isolated sessions.

    Usage:
        async with CartAudit() as audit:
            session = await audit.new_session()
            await session.add_product('Sony vaio i5')
            await session.open_cart()
    """

    def __init__(self, settings: Optional[VerifySettings] = None):
        """
        Args:
            settings: Resolved settings; loaded from the environment when omitted
        """
        self.settings = settings or CartVerifyConfig.load()
        self._playwright = None
        self._browser = None
        self._contexts = []

    async def __aenter__(self):
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.settings.browser)
        logger.info(f"🚀 Launching {self.settings.browser} (headless={self.settings.headless})")
        try:
            self._browser = await launcher.launch(headless=self.settings.headless)
        except Exception:
            await self._playwright.stop()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        for context in self._contexts:
            await context.close()
        self._contexts.clear()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

    async def new_session(self) -> StorefrontSession:
        """Open a fresh browser context (own cookies, own cart) and wrap it in a session"""
        context = await self._browser.new_context(base_url=self.settings.base_url)
        context.set_default_timeout(self.settings.action_timeout_ms)
        self._contexts.append(context)
        page = await context.new_page()
        return StorefrontSession(page, self.settings)


async def run_smoke(products: List[str], settings: Optional[VerifySettings] = None) -> int:
    """
    Add products, verify the cart, delete the first row, verify again, clear.

    Returns:
        Process exit code (0 = consistent, 1 = total mismatch, 2 = operational failure)
    """
    async with CartAudit(settings) as audit:
        session = await audit.new_session()
        try:
            for name in products:
                await session.add_product(name)

            snapshot = await session.open_cart()
            logger.info(f"Cart: {snapshot.names} total {format_price(snapshot.reported_total)}")

            if snapshot.count:
                removed = await session.model.delete_at(0)
                logger.info(f"Removed '{removed.name}'")
                await session.model.assert_consistent()

            await session.model.clear_all()
            await session.model.assert_consistent()
        except InvariantViolation as e:
            logger.error(f"❌ Cart total mismatch: {e}")
            return 1
        except CartVerifyError as e:
            logger.error(f"❌ Verification could not complete: {e}")
            return 2

    logger.info("✅ Cart stayed consistent through add, delete and clear")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Usage:
      python -m cart_verify [product name] [product name] ...
    """
    argv = sys.argv[1:] if argv is None else argv
    settings = CartVerifyConfig.load()
    configure_logging(settings.log_level)
    return asyncio.run(run_smoke(argv or DEFAULT_PRODUCTS, settings))
