import asyncio
from datetime import datetime

import pytest
from playwright.async_api import async_playwright

from scraper.browser import open_page
from scraper.pipeline import scrape
from settings import ScraperConfig

PAGE = """<!doctype html>
<html><body>
<article><h2>  First  </h2><p> One </p><a href="/first">more</a></article>
<div class="item"><span class="title">Second</span></div>
<div data-item><h3>Third</h3><p class="summary">Three</p></div>
<div class="item"><h2>Same</h2></div>
<div class="item"><h2>Same</h2></div>
<div class="item"><a>no href</a></div>
</body></html>
"""


@pytest.fixture(scope="module")
def chromium():
    async def launch_once():
        async with async_playwright() as p:
            browser = await p.chromium.launch(args=list(ScraperConfig().launch_args))
            await browser.close()

    try:
        asyncio.run(launch_once())
    except Exception as e:
        pytest.skip(f"chromium not available: {e}")


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


def test_scrape_local_page(chromium, tmp_path):
    html = tmp_path / "items.html"
    html.write_text(PAGE, encoding="utf-8")
    url = html.as_uri()

    items = asyncio.run(scrape(url, ScraperConfig(timeout=10_000)))

    assert [i.title for i in items] == ["First", "Second", "Third", "Same", "Same", ""]
    assert items[0].description == "One"
    assert items[0].url.endswith("/first")
    assert items[1].description == ""
    assert items[1].url == url
    assert items[2].description == "Three"

    first_same, second_same = items[3], items[4]
    assert (first_same.title, first_same.description, first_same.url) == (
        second_same.title, second_same.description, second_same.url
    )
    assert _parse(first_same.timestamp) <= _parse(second_same.timestamp)

    untitled = items[5]
    assert untitled.title == ""
    assert untitled.description == ""
    assert untitled.url == url


def test_page_without_items(chromium, tmp_path):
    html = tmp_path / "empty.html"
    html.write_text("<html><body></body></html>", encoding="utf-8")
    assert asyncio.run(scrape(html.as_uri(), ScraperConfig(timeout=10_000))) == []


def test_configured_page_hides_webdriver(chromium, tmp_path):
    html = tmp_path / "blank.html"
    html.write_text("<html><body>x</body></html>", encoding="utf-8")
    config = ScraperConfig()

    async def launch_once():
        async with async_playwright() as p:
            browser = await p.chromium.launch(args=list(config.launch_args))
            try:
                page = await open_page(browser, config)
                await page.goto(html.as_uri())
                return (
                    await page.evaluate("navigator.webdriver"),
                    await page.evaluate("navigator.userAgent"),
                    page.viewport_size,
                )
            finally:
                await browser.close()

    webdriver, user_agent, viewport = asyncio.run(launch_once())
    assert webdriver is None
    assert user_agent == config.user_agent
    assert viewport == {"width": 1920, "height": 1080}
