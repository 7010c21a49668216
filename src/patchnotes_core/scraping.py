from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright

DEFAULT_BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def parse_latest_item_href(html: str, selector: str) -> Optional[str]:
    """Return the href of the first element matching ``selector``."""
    soup = BeautifulSoup(html, "html.parser")
    el = soup.select_one(selector)
    if el is None:
        return None
    href = el.get("href")
    if not href or not str(href).strip():
        return None
    return str(href).strip()


def parse_content_text(html: str, selector: str) -> Optional[str]:
    """Return the visible text of the first element matching ``selector``."""
    soup = BeautifulSoup(html, "html.parser")
    node = soup.select_one(selector)
    if node is None:
        return None
    for tag in node(["script", "style", "noscript"]):
        tag.decompose()
    text = node.get_text("\n", strip=True)
    return text or None


@dataclass
class ForumScraper:
    """Headless-browser access to the monitored forum.

    Each call launches its own Chromium instance and closes it again on every
    exit path; nothing is shared between calls.
    """

    forum_url: str
    base_url: str
    thread_link_selector: str = "a.thread-subject"
    content_selector: str = "div.content-main"
    navigation_timeout_sec: float = 60.0
    browser_args: List[str] = field(default_factory=lambda: list(DEFAULT_BROWSER_ARGS))

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    async def _render(self, url: str, wait_for: str | None = None) -> str:
        timeout_ms = int(self.navigation_timeout_sec * 1000)
        async with async_playwright() as p:
            self._log.info("Launching browser for %s", url)
            browser = await p.chromium.launch(headless=True, args=self.browser_args)
            try:
                page = await browser.new_page()
                await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
                if wait_for:
                    await page.wait_for_selector(wait_for, timeout=timeout_ms)
                return await page.content()
            finally:
                self._log.info("Closing browser")
                await browser.close()

    async def fetch_latest_item_url(self) -> Optional[str]:
        html = await self._render(self.forum_url)
        href = parse_latest_item_href(html, self.thread_link_selector)
        if not href:
            self._log.error("No latest thread found on %s", self.forum_url)
            return None
        url = urljoin(self.base_url, href)
        self._log.info("Latest thread URL: %s", url)
        return url

    async def fetch_page_text(self, url: str) -> Optional[str]:
        html = await self._render(url, wait_for=self.content_selector)
        text = parse_content_text(html, self.content_selector)
        if not text:
            self._log.error("No content found in %s on %s", self.content_selector, url)
            return None
        return text
