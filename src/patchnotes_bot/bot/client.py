from __future__ import annotations

import logging
from typing import Callable, Optional

import discord
from aiohttp import web
from discord.ext import commands

from ..commands.loader import load_all_cogs
from ..config import settings
from ..infrastructure.health_http import start_health_server
from .services import BotServices

log = logging.getLogger(__name__)


class PatchNotesBot(commands.Bot):
    def __init__(self, services_factory: Callable[[discord.Client], BotServices]):
        intents = discord.Intents.default()
        # Slash commands only; no prefix commands
        super().__init__(command_prefix=commands.when_mentioned, intents=intents)
        self.services = services_factory(self)
        self._allowed_guild_ids = set(int(g) for g in (getattr(settings, "guild_ids", []) or []))
        self._pipeline_started = False
        self._health_runner: Optional[web.AppRunner] = None

    async def setup_hook(self):
        await load_all_cogs(self)
        if self._allowed_guild_ids:
            guild_objs = [discord.Object(id=int(g)) for g in self._allowed_guild_ids]
            for gobj in guild_objs:
                self.tree.copy_global_to(guild=gobj)
            # Clear global and sync to remove any global registrations
            self.tree.clear_commands(guild=None)
            await self.tree.sync(guild=None)
            for gobj in guild_objs:
                await self.tree.sync(guild=gobj)
        else:
            await self.tree.sync()
        log.info("Application commands synced")
        port = getattr(settings, "health_http_port", None)
        if port:
            self._health_runner = await start_health_server(int(port), ready=lambda: self.services.poller.running)

    async def on_message(self, message: discord.Message):
        """Do not process legacy prefix commands."""
        return

    async def on_ready(self):
        log.info("Bot is ready as %s", self.user)
        status = getattr(settings, "bot_status", None)
        if status:
            await self.change_presence(activity=discord.Game(name=status))
        # on_ready fires again after reconnects
        if self._pipeline_started:
            return
        self._pipeline_started = True
        await self.services.dispatcher.baseline()
        self.services.poller.start()

    async def close(self):
        await self.services.poller.stop()
        if self._health_runner is not None:
            await self._health_runner.cleanup()
        await super().close()
