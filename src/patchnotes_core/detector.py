from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .scraping import ForumScraper
from .types import SourceItem


class ChangeDetector:
    """Reports the identity of the newest forum item.

    Comparison against previously seen items is left to the dispatcher.
    """

    def __init__(self, scraper: ForumScraper, *, timeout_sec: float = 90.0):
        self._scraper = scraper
        self._timeout = timeout_sec
        self._log = logging.getLogger(__name__)

    async def detect_latest(self) -> Optional[SourceItem]:
        try:
            url = await asyncio.wait_for(self._scraper.fetch_latest_item_url(), timeout=self._timeout)
        except asyncio.TimeoutError:
            self._log.error("Timed out after %.0fs fetching latest thread URL", self._timeout)
            return None
        except Exception:
            self._log.exception("Error fetching latest thread URL")
            return None
        if not url:
            return None
        return SourceItem(url=url)
