from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from patchnotes_core.types import OnDemandOutcome

log = logging.getLogger(__name__)

NOT_CONFIGURED_REPLY = "This server is not configured. Please run `/setup` first."

ON_DEMAND_REPLIES = {
    OnDemandOutcome.DELIVERED: "Patch notes have been posted.",
    OnDemandOutcome.NOTHING_YET: "No patch notes have been detected yet. Please try again later.",
    OnDemandOutcome.FAILED: "Could not fetch the latest patch notes. Please try again later.",
    OnDemandOutcome.NOT_CONFIGURED: NOT_CONFIGURED_REPLY,
}


class PatchNotesCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="patchnotes", description="Fetch the latest Star Citizen patch notes")
    @app_commands.guild_only()
    async def patchnotes(self, interaction: discord.Interaction):
        services = self.bot.services  # type: ignore[attr-defined]
        guild_id = str(interaction.guild_id)
        if services.registry.get(guild_id) is None:
            await interaction.response.send_message(NOT_CONFIGURED_REPLY, ephemeral=True)
            return

        await interaction.response.defer(thinking=True)
        try:
            outcome = await services.dispatcher.deliver_latest(guild_id)
        except Exception:
            log.exception("Error handling /patchnotes command")
            await interaction.followup.send("An unexpected error occurred while processing your request.")
            return
        await interaction.followup.send(ON_DEMAND_REPLIES[outcome])


async def setup(bot: commands.Bot):
    await bot.add_cog(PatchNotesCog(bot))
