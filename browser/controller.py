"""Playwright browser controller that owns the driver lifecycle."""

import logging
from dataclasses import dataclass
from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from config import FrameworkConfig
from errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BROWSER = "chromium"

# BROWSER identifier -> (Playwright engine, release channel)
_BROWSERS: dict[str, tuple[str, str | None]] = {
    "chromium": ("chromium", None),
    "chrome": ("chromium", "chrome"),
    "msedge": ("chromium", "msedge"),
    "edge": ("chromium", "msedge"),
    "firefox": ("firefox", None),
    "webkit": ("webkit", None),
    "safari": ("webkit", None),
}


def resolve_browser(name: str) -> tuple[str, str | None]:
    """Map a BROWSER identifier to a Playwright engine and channel."""
    try:
        return _BROWSERS[name.strip().lower()]
    except KeyError:
        supported = ", ".join(sorted(_BROWSERS))
        raise ConfigurationError("BROWSER", f"unsupported browser {name!r} (supported: {supported})") from None


@dataclass(frozen=True, slots=True)
class ViewportSize:
    """Browser viewport dimensions."""

    width: int = 1280
    height: int = 720


class BrowserController:
    """Starts and stops a Playwright session and hands out its page."""

    __slots__ = (
        "_browser",
        "_browser_name",
        "_context",
        "_download_dir",
        "_headless",
        "_implicit_timeout",
        "_page",
        "_playwright",
        "_viewport",
    )

    def __init__(
        self,
        browser_name: str = DEFAULT_BROWSER,
        headless: bool = True,
        viewport: ViewportSize | None = None,
        implicit_timeout: int | None = None,
        download_dir: str | None = None,
    ) -> None:
        resolve_browser(browser_name)
        self._browser_name = browser_name
        self._headless = headless
        self._viewport = viewport or ViewportSize()
        self._implicit_timeout = implicit_timeout
        self._download_dir = download_dir
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @classmethod
    def from_config(cls, config: FrameworkConfig, headless: bool = True) -> "BrowserController":
        """Build a controller from BROWSER, IMPLICIT_WAIT and the download directory."""
        implicit_timeout = config.implicit_timeout if config.is_set("IMPLICIT_WAIT") else None
        if implicit_timeout is not None and implicit_timeout < 0:
            raise ConfigurationError("IMPLICIT_WAIT", f"must not be negative, got {implicit_timeout}")
        return cls(
            browser_name=config.browser or DEFAULT_BROWSER,
            headless=headless,
            implicit_timeout=implicit_timeout,
            download_dir=config.default_downloading_directory,
        )

    @property
    def viewport(self) -> ViewportSize:
        return self._viewport

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._page

    def start(self) -> Page:
        """Launch the browser and open a page.

        A failed launch stops the Playwright driver before re-raising.
        """
        engine, channel = resolve_browser(self._browser_name)
        pw = sync_playwright().start()
        self._playwright = pw

        try:
            launch_kwargs: dict = {"headless": self._headless}
            if channel:
                launch_kwargs["channel"] = channel
            if self._download_dir:
                Path(self._download_dir).mkdir(parents=True, exist_ok=True)
                launch_kwargs["downloads_path"] = self._download_dir

            self._browser = getattr(pw, engine).launch(**launch_kwargs)
            self._context = self._browser.new_context(
                viewport={"width": self._viewport.width, "height": self._viewport.height},
                accept_downloads=bool(self._download_dir),
            )
            # 0 means "no timeout" to Playwright, so a zero wait keeps its default.
            if self._implicit_timeout is not None and self._implicit_timeout > 0:
                self._context.set_default_timeout(self._implicit_timeout * 1000)
            self._page = self._context.new_page()
        except BaseException:
            logger.exception("Browser launch failed (%s)", self._browser_name)
            self.stop()
            raise

        logger.info(
            "Browser started (%s, headless=%s, viewport=%dx%d)",
            self._browser_name, self._headless, self._viewport.width, self._viewport.height,
        )
        return self._page

    def stop(self) -> None:
        """Close browser and cleanup."""
        if self._context:
            self._context.close()
        if self._browser:
            self._browser.close()
        if self._playwright:
            self._playwright.stop()
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None
        logger.info("Browser stopped")

    def __enter__(self) -> "BrowserController":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def navigate(self, url: str) -> None:
        """Navigate to URL and wait for load."""
        logger.info("Navigating to %s", url)
        self.page.goto(url, wait_until="load")

    def screenshot(self, path: Path) -> Path:
        """Save a viewport screenshot as PNG."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path))
        logger.info("Screenshot saved to %s", path)
        return path
