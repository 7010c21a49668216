from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .chunking import chunk_text
from .delivery import DeliveryClient
from .detector import ChangeDetector
from .errors import DeliveryFailure
from .extractor import ContentExtractor
from .metrics import cycle_duration_seconds, cycles_total, deliveries_total
from .registry import DestinationRegistry
from .types import CycleOutcome, CycleReport, Destination, OnDemandOutcome


@dataclass
class LatestItemState:
    """URL of the newest item seen by this process. Written only by the Dispatcher."""

    url: Optional[str] = None


def build_header(mention: str, title: str, url: str) -> str:
    head = f"{mention} **{title}:**" if mention else f"**{title}:**"
    return f"{head}\n{url}"


class Dispatcher:
    def __init__(
        self,
        detector: ChangeDetector,
        extractor: ContentExtractor,
        registry: DestinationRegistry,
        delivery: DeliveryClient,
        state: Optional[LatestItemState] = None,
        *,
        max_chunk_len: int = 2000,
        new_post_title: str = "New Star Citizen Patch Notes",
        latest_post_title: str = "Latest Star Citizen Patch Notes",
    ):
        self.detector = detector
        self.extractor = extractor
        self.registry = registry
        self.delivery = delivery
        self.state = state or LatestItemState()
        self.max_chunk_len = max_chunk_len
        self.new_post_title = new_post_title
        self.latest_post_title = latest_post_title
        self._cycle_lock = asyncio.Lock()
        self._log = logging.getLogger(__name__)

    @property
    def latest_url(self) -> Optional[str]:
        return self.state.url

    @property
    def busy(self) -> bool:
        return self._cycle_lock.locked()

    async def baseline(self) -> Optional[str]:
        """Adopt whatever is newest right now without delivering it."""
        async with self._cycle_lock:
            item = await self.detector.detect_latest()
            if item is not None:
                self.state.url = item.url
                self._log.info("Baseline latest thread: %s", item.url)
            else:
                self._log.warning("Could not determine baseline thread; first detected thread will be posted")
            return self.state.url

    async def run_cycle(self) -> CycleReport:
        if self._cycle_lock.locked():
            self._log.warning("Previous cycle still running; skipping")
            cycles_total.labels(outcome=CycleOutcome.BUSY.value).inc()
            return CycleReport(CycleOutcome.BUSY, url=self.state.url)
        async with self._cycle_lock:
            started = time.perf_counter()
            report = await self._run_cycle_locked()
            cycle_duration_seconds.observe(time.perf_counter() - started)
        cycles_total.labels(outcome=report.outcome.value).inc()
        return report

    async def _run_cycle_locked(self) -> CycleReport:
        self._log.info("Checking for updates...")
        destinations = self.registry.all()
        if not destinations:
            self._log.warning("No servers configured. Run /setup to configure the bot.")
            return CycleReport(CycleOutcome.NO_DESTINATIONS, url=self.state.url)

        item = await self.detector.detect_latest()
        if item is None:
            return CycleReport(CycleOutcome.DETECTION_FAILED, url=self.state.url)
        if item.url == self.state.url:
            return CycleReport(CycleOutcome.NO_CHANGE, url=item.url)

        self._log.info("New thread detected: %s", item.url)
        # Mark seen before extracting: a failing item is attempted once, not forever
        self.state.url = item.url
        # One extraction per item; the first configured credential pays for it
        doc = await self.extractor.extract(item.url, destinations[0].generation_credential)
        if doc is None:
            self._log.error("Could not extract patch notes for %s; skipping this thread", item.url)
            return CycleReport(CycleOutcome.EXTRACTION_FAILED, url=item.url)

        chunks = chunk_text(doc.formatted_text, self.max_chunk_len)
        results = await asyncio.gather(
            *(self._deliver_to(d, doc.source_url, chunks, self.new_post_title) for d in destinations)
        )
        report = CycleReport(CycleOutcome.DELIVERED, url=item.url)
        for dest, ok in zip(destinations, results):
            (report.delivered if ok else report.failed).append(dest.id)
        return report

    async def _deliver_to(self, dest: Destination, url: str, chunks: Sequence[str], title: str) -> bool:
        try:
            handle = await self.delivery.resolve_target(dest.delivery_target)
            if handle is None:
                raise DeliveryFailure(f"channel {dest.delivery_target} could not be resolved")
            header = build_header(self.delivery.mention(dest.notification_tag), title, url)
            for text in [header, *chunks]:
                if not await self.delivery.send(handle, text):
                    raise DeliveryFailure(f"channel {dest.delivery_target} rejected a message")
        except DeliveryFailure as e:
            self._log.error("Error posting to server %s: %s", dest.id, e)
            deliveries_total.labels(status="failed").inc()
            return False
        except Exception:
            self._log.exception("Error posting to server %s", dest.id)
            deliveries_total.labels(status="failed").inc()
            return False
        self._log.info("Patch notes posted in server %s (%d part(s))", dest.id, len(chunks))
        deliveries_total.labels(status="ok").inc()
        return True

    async def deliver_latest(self, destination_id: str) -> OnDemandOutcome:
        """Re-extract the held latest item and post it to one destination."""
        dest = self.registry.get(destination_id)
        if dest is None:
            return OnDemandOutcome.NOT_CONFIGURED
        url = self.state.url
        if not url:
            return OnDemandOutcome.NOTHING_YET
        doc = await self.extractor.extract(url, dest.generation_credential)
        if doc is None:
            return OnDemandOutcome.FAILED
        chunks = chunk_text(doc.formatted_text, self.max_chunk_len)
        ok = await self._deliver_to(dest, doc.source_url, chunks, self.latest_post_title)
        return OnDemandOutcome.DELIVERED if ok else OnDemandOutcome.FAILED
