from __future__ import annotations

from patchnotes_core.scraping import ForumScraper
from ..config import settings


def build_forum_scraper() -> ForumScraper:
    return ForumScraper(
        forum_url=settings.forum_url,
        base_url=settings.forum_base_url,
        thread_link_selector=settings.thread_link_selector,
        content_selector=settings.content_selector,
        navigation_timeout_sec=settings.navigation_timeout_sec,
        browser_args=list(settings.browser_args),
    )
