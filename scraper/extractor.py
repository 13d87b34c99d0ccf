import logging
from typing import List

from playwright.async_api import Page

from .models import ScrapedItem

logger = logging.getLogger(__name__)

# Evaluated inside the page; only plain objects come back.
EXTRACT_SCRIPT = """
(selector) => {
  const text = (el) => (el && el.textContent ? el.textContent.trim() : '');
  return Array.from(document.querySelectorAll(selector)).map((item) => {
    const link = item.querySelector('a');
    return {
      title: text(item.querySelector('h1, h2, h3, .title')),
      description: text(item.querySelector('p, .description, .summary')),
      url: (link && link.href) || window.location.href,
      timestamp: new Date().toISOString(),
    };
  });
}
"""


async def extract_items(page: Page, selector: str) -> List[ScrapedItem]:
    """Return the items matching ``selector`` in document order."""
    raw_items = await page.evaluate(EXTRACT_SCRIPT, selector)
    items = [ScrapedItem.from_raw(raw) for raw in raw_items]
    logger.debug("Page returned %d raw records", len(items))
    return items
