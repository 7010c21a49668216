from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .errors import ExtractionFailure
from .metrics import extractions_total
from .providers.base import GenerationProvider
from .scraping import ForumScraper
from .types import NormalizedDocument


class ContentExtractor:
    def __init__(self, scraper: ForumScraper, generator: GenerationProvider, *, timeout_sec: float = 90.0):
        self._scraper = scraper
        self._generator = generator
        self._timeout = timeout_sec
        self._log = logging.getLogger(__name__)

    async def _fetch_raw(self, url: str) -> str:
        try:
            raw = await asyncio.wait_for(self._scraper.fetch_page_text(url), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise ExtractionFailure(f"timed out after {self._timeout:.0f}s loading {url}") from e
        raw = (raw or "").strip()
        if not raw:
            raise ExtractionFailure(f"no content extracted from {url}")
        return raw

    async def extract(self, url: str, generation_credential: str) -> Optional[NormalizedDocument]:
        """Scrape ``url`` and format it with the generation service.

        Returns None on any failure; the cause is logged, never raised.
        """
        try:
            raw = await self._fetch_raw(url)
            formatted = await self._generator.format(raw, generation_credential)
            formatted = (formatted or "").strip()
            if not formatted:
                raise ExtractionFailure("generation service returned no content")
        except ExtractionFailure as e:
            self._log.error("Extraction failed for %s: %s", url, e)
            extractions_total.labels(status="failed").inc()
            return None
        except Exception:
            self._log.exception("Error fetching patch notes content from %s", url)
            extractions_total.labels(status="failed").inc()
            return None
        extractions_total.labels(status="ok").inc()
        return NormalizedDocument(source_url=url, formatted_text=formatted)
