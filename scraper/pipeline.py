import logging
from typing import Callable, List, Optional

from playwright.async_api import async_playwright

from settings import ScraperConfig, load_config

from .browser import launch_browser, open_page
from .extractor import extract_items
from .models import ScrapedItem
from .navigator import navigate

logger = logging.getLogger(__name__)


async def scrape(
    url: str,
    config: Optional[ScraperConfig] = None,
    *,
    playwright_factory: Callable = async_playwright,
) -> List[ScrapedItem]:
    """Scrape ``url`` once with a fresh browser.

    The browser is closed before this returns or raises. Errors are logged
    and re-raised unchanged.
    """
    config = config or load_config()
    logger.info(f"Starting scrape of: {url}")
    try:
        async with launch_browser(config, playwright_factory) as browser:
            page = await open_page(browser, config)

            logger.info("Navigating to page...")
            await navigate(page, url, config)

            logger.info("Extracting data...")
            items = await extract_items(page, config.item_selector)
    except Exception as e:
        logger.error(f"Scraping failed: {str(e)}")
        raise

    logger.info(f"Extracted {len(items)} items")
    return items
