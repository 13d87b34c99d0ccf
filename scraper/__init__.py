from .models import ScrapedItem
from .browser import configure_page, launch_browser, open_page
from .navigator import navigate
from .extractor import EXTRACT_SCRIPT, extract_items
from .pipeline import scrape

__all__ = [
    "ScrapedItem",
    "configure_page",
    "launch_browser",
    "open_page",
    "navigate",
    "EXTRACT_SCRIPT",
    "extract_items",
    "scrape",
]
