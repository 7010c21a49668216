from __future__ import annotations

import asyncio
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from patchnotes_core.errors import ConfigError
from ..infrastructure.permissions import require_admin
from ..util.text import channel_mention, role_mention

log = logging.getLogger(__name__)


def setup_confirmation(channel_id: int, role_id: Optional[int]) -> str:
    text = f"Patch notes will now be posted in {channel_mention(channel_id)}"
    if role_id:
        text += f" and will ping {role_mention(str(role_id))}"
    return text + "."


class ConfigureCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="setup", description="Set up the bot to post patch notes and configure OpenAI")
    @app_commands.guild_only()
    @require_admin()
    @app_commands.describe(
        channel="The channel where the bot should post patch notes",
        openai_key="Your OpenAI API key (required)",
        pingrole="The role to ping when new patch notes are posted (optional)",
    )
    async def setup_destination(
        self,
        interaction: discord.Interaction,
        channel: discord.TextChannel,
        openai_key: str,
        pingrole: Optional[discord.Role] = None,
    ):
        await interaction.response.defer(ephemeral=True)
        registry = self.bot.services.registry  # type: ignore[attr-defined]
        try:
            await asyncio.to_thread(
                registry.put,
                str(interaction.guild_id),
                str(channel.id),
                openai_key,
                str(pingrole.id) if pingrole else None,
            )
        except ConfigError as e:
            log.error("Setup rejected for server %s: %s", interaction.guild_id, e)
            await interaction.followup.send(
                "An OpenAI API key is required to set up the bot. Please provide one.", ephemeral=True
            )
            return
        except Exception:
            log.exception("Error handling /setup command")
            await interaction.followup.send("An error occurred while processing your request.", ephemeral=True)
            return
        await interaction.followup.send(
            setup_confirmation(channel.id, pingrole.id if pingrole else None), ephemeral=True
        )

    @app_commands.command(name="reset", description="Stop posting patch notes in this server and forget its settings")
    @app_commands.guild_only()
    @require_admin()
    async def reset_destination(self, interaction: discord.Interaction):
        await interaction.response.defer(ephemeral=True)
        registry = self.bot.services.registry  # type: ignore[attr-defined]
        try:
            removed = await asyncio.to_thread(registry.remove, str(interaction.guild_id))
        except Exception:
            log.exception("Error handling /reset command")
            await interaction.followup.send("An error occurred while processing your request.", ephemeral=True)
            return
        if removed:
            await interaction.followup.send("Configuration reset. Patch notes will no longer be posted here.", ephemeral=True)
        else:
            await interaction.followup.send("This server was not configured.", ephemeral=True)


async def setup(bot: commands.Bot):
    await bot.add_cog(ConfigureCog(bot))
