from __future__ import annotations

import logging
from typing import Any, Optional

import discord

from patchnotes_core.delivery import DeliveryClient
from ..util.text import role_mention

log = logging.getLogger(__name__)


class DiscordDelivery(DeliveryClient):
    """Sends through a discord.py client; channels are looked up per send."""

    def __init__(self, client: discord.Client):
        self.client = client

    async def resolve_target(self, target_id: str) -> Optional[Any]:
        try:
            channel_id = int(target_id)
        except (TypeError, ValueError):
            log.error("Invalid channel id %r", target_id)
            return None
        channel = self.client.get_channel(channel_id)
        if channel is not None:
            return channel
        try:
            return await self.client.fetch_channel(channel_id)
        except (discord.NotFound, discord.Forbidden) as e:
            log.warning("Channel %s unavailable: %s", channel_id, e)
            return None
        except discord.HTTPException as e:
            log.error("Error fetching channel %s: %s", channel_id, e)
            return None

    async def send(self, handle: Any, text: str) -> bool:
        try:
            await handle.send(text)
        except discord.HTTPException as e:
            log.error("Send to channel %s failed: %s", getattr(handle, "id", "?"), e)
            return False
        return True

    def mention(self, tag: Optional[str]) -> str:
        return role_mention(tag)
