"""Page object for the application home page."""

import logging

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from browser.helpers import get_page_title

from .locators import Locator

logger = logging.getLogger(__name__)


class HomePage:
    """Home page of the system under test.

    The driver is borrowed: it is created and closed by the caller (usually
    ``BrowserController``) and must stay open while this object is used.
    """

    def __init__(self, driver: Page) -> None:
        self.driver = driver
        self.txt_home_page_validation = Locator.xpath("//div[text()='Google']")

    def get_home_page_title(self) -> str:
        """Current page title with surrounding whitespace removed."""
        return get_page_title(self.driver).strip()

    def get_current_page_title(self) -> str:
        return get_page_title(self.driver)

    def is_displayed(self, timeout: float | None = None) -> bool:
        """Whether the home page heading becomes visible within ``timeout`` seconds.

        Without a positive timeout the check is immediate, since Playwright reads
        a zero timeout as "wait forever". Driver errors other than a timeout
        propagate.
        """
        element = self.txt_home_page_validation.resolve(self.driver)
        if timeout is None or timeout <= 0:
            return element.is_visible()
        try:
            element.wait_for(state="visible", timeout=timeout * 1000)
        except PlaywrightTimeoutError:
            logger.info("Home page heading not visible after %.1fs", timeout)
            return False
        return True
