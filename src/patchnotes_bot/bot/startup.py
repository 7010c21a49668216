from __future__ import annotations

import discord

from ..config import settings
from ..infrastructure.ai import build_generation_provider
from ..infrastructure.delivery import DiscordDelivery
from ..infrastructure.forum import build_forum_scraper
from .client import PatchNotesBot
from .services import BotServices
from patchnotes_core.detector import ChangeDetector
from patchnotes_core.dispatcher import Dispatcher, LatestItemState
from patchnotes_core.extractor import ContentExtractor
from patchnotes_core.registry import DestinationRegistry
from patchnotes_core.scheduler import PollingLoop
from patchnotes_core.store import JsonDestinationStore


def build_services(client: discord.Client) -> BotServices:
    registry = DestinationRegistry(JsonDestinationStore(settings.config_file))
    scraper = build_forum_scraper()
    dispatcher = Dispatcher(
        detector=ChangeDetector(scraper, timeout_sec=settings.scrape_timeout),
        extractor=ContentExtractor(scraper, build_generation_provider(), timeout_sec=settings.scrape_timeout),
        registry=registry,
        delivery=DiscordDelivery(client),
        state=LatestItemState(),
        max_chunk_len=settings.max_chunk_len,
        new_post_title=settings.new_post_title,
        latest_post_title=settings.latest_post_title,
    )
    poller = PollingLoop(dispatcher, interval_sec=settings.poll_interval_sec)
    return BotServices(registry=registry, dispatcher=dispatcher, poller=poller)


def build_bot() -> PatchNotesBot:
    return PatchNotesBot(build_services)
