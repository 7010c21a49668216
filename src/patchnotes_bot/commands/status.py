from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from ..config import settings
from ..util.text import channel_mention, clip_discord_message


class StatusCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="status", description="Show what the bot is watching and where it posts")
    async def status(self, interaction: discord.Interaction):
        services = self.bot.services  # type: ignore[attr-defined]
        dest = services.registry.get(str(interaction.guild_id)) if interaction.guild_id else None
        lines = [
            f"latest thread: {services.dispatcher.latest_url or '(none detected yet)'}",
            f"polling: every {int(settings.poll_interval_sec)}s ({'running' if services.poller.running else 'stopped'})",
            f"servers configured: {len(services.registry)}",
        ]
        if dest is not None:
            lines.append(f"this server posts to: {channel_mention(dest.delivery_target)}")
        elif interaction.guild_id:
            lines.append("this server: not configured (run /setup)")
        await interaction.response.send_message(clip_discord_message("\n".join(lines)), ephemeral=True)


async def setup(bot: commands.Bot):
    await bot.add_cog(StatusCog(bot))
