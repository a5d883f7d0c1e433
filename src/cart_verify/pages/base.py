import logging
from typing import Optional

from playwright.async_api import Locator, Page, TimeoutError as PlaywrightTimeoutError

from cart_verify.core.config import VerifySettings
from cart_verify.core.errors import SettlementTimeout

logger = logging.getLogger(__name__)


class StorefrontPage:
    """Shared plumbing for storefront page objects: page, settings and timeout translation"""

    def __init__(self, page: Page, settings: VerifySettings):
        self.page = page
        self.settings = settings

    @property
    def action_timeout(self) -> int:
        return self.settings.action_timeout_ms

    @property
    def expect_timeout(self) -> int:
        return self.settings.expect_timeout_ms

    async def wait_visible(self, locator: Locator, description: str):
        try:
            await locator.wait_for(state='visible', timeout=self.expect_timeout)
        except PlaywrightTimeoutError as e:
            raise SettlementTimeout(description, self.settings.expect_timeout) from e

    async def wait_for_url(self, pattern: str, description: str):
        try:
            await self.page.wait_for_url(pattern, timeout=self.expect_timeout)
        except PlaywrightTimeoutError as e:
            raise SettlementTimeout(description, self.settings.expect_timeout) from e

    async def wait_for_network_idle(self) -> bool:
        """Best-effort idle wait; ajax-heavy pages may never go fully idle. Returns False on timeout."""
        try:
            await self.page.wait_for_load_state('networkidle', timeout=self.expect_timeout)
        except PlaywrightTimeoutError:
            logger.info("STATE: Network idle timeout, continuing with element waits")
            return False
        return True

    async def text_of(self, locator: Locator) -> Optional[str]:
        try:
            return await locator.text_content(timeout=self.action_timeout)
        except PlaywrightTimeoutError as e:
            raise SettlementTimeout(f"text of {locator}", self.action_timeout / 1000) from e
