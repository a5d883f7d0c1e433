import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class VerifySettings(BaseModel):
    """Resolved settings for one verification run."""

    base_url: str = 'https://demoblaze.com'
    browser: str = 'chromium'
    headless: bool = True
    action_timeout_ms: int = Field(default=15000, gt=0)
    expect_timeout_ms: int = Field(default=10000, gt=0)
    poll_interval_ms: int = Field(default=250, gt=0)
    strict_prices: bool = False
    log_level: str = 'INFO'

    @property
    def expect_timeout(self) -> float:
        """Postcondition timeout in seconds (for poll_until)"""
        return self.expect_timeout_ms / 1000

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000


class CartVerifyConfig:
    """
    Central configuration management for cart verification.
    Handles environment variables, paths, and browser settings.
    """

    @staticmethod
    def get_base_url():
        return os.getenv("STOREFRONT_BASE_URL", "https://demoblaze.com").rstrip('/')

    @staticmethod
    def get_browser():
        browser = os.getenv("BROWSER", "chromium").strip().lower()
        if browser not in ('chromium', 'firefox', 'webkit'):
            raise ValueError(f"Unsupported BROWSER '{browser}' (use chromium, firefox or webkit)")
        return browser

    @staticmethod
    def load() -> VerifySettings:
        return VerifySettings(
            base_url=CartVerifyConfig.get_base_url(),
            browser=CartVerifyConfig.get_browser(),
            headless=_env_bool("HEADLESS", "true"),
            action_timeout_ms=int(os.getenv("ACTION_TIMEOUT_MS", "15000")),
            expect_timeout_ms=int(os.getenv("EXPECT_TIMEOUT_MS", "10000")),
            poll_interval_ms=int(os.getenv("POLL_INTERVAL_MS", "250")),
            strict_prices=_env_bool("STRICT_PRICES", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
