import logging

from playwright.async_api import Page

from settings import ScraperConfig

logger = logging.getLogger(__name__)


async def navigate(page: Page, url: str, config: ScraperConfig) -> None:
    """Load ``url`` and wait until the baseline element is attached.

    Both steps share ``config.timeout``; a timeout raises
    ``playwright.async_api.TimeoutError``.
    """
    await page.goto(url, wait_until="networkidle", timeout=config.timeout)
    # "attached" only requires the element to exist; an empty body has no box
    # and would never count as visible.
    await page.wait_for_selector(
        config.wait_selector, state="attached", timeout=config.timeout
    )
    logger.debug("Page ready: %s", page.url)
