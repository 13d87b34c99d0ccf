import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from playwright.async_api import Browser, Page, async_playwright

from settings import ScraperConfig

logger = logging.getLogger(__name__)

# Runs before any page script on every document load in the page.
HIDE_WEBDRIVER_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', {
  get: () => undefined,
});
"""


@asynccontextmanager
async def launch_browser(
    config: ScraperConfig,
    playwright_factory: Callable = async_playwright,
) -> AsyncIterator[Browser]:
    """Start Chromium and yield it, closing it on the way out.

    If the launch itself fails there is no browser to close and the error
    propagates as is.
    """
    async with playwright_factory() as p:
        browser = await p.chromium.launch(
            headless=config.headless,
            args=list(config.launch_args),
        )
        logger.debug("Chromium launched (headless=%s)", config.headless)
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug("Chromium closed")


async def configure_page(page: Page, config: ScraperConfig) -> None:
    """Apply viewport, webdriver masking and extra headers to ``page``."""
    await page.set_viewport_size(config.viewport)
    await page.add_init_script(HIDE_WEBDRIVER_SCRIPT)
    await page.set_extra_http_headers(dict(config.extra_headers))


async def open_page(browser: Browser, config: ScraperConfig) -> Page:
    # Playwright binds the user agent to the page's context, so it has to be
    # given when the page is opened.
    page = await browser.new_page(user_agent=config.user_agent)
    await configure_page(page, config)
    return page
