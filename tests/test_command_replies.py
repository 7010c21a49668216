from __future__ import annotations

from patchnotes_core.types import OnDemandOutcome
from patchnotes_bot.commands.configure import setup_confirmation
from patchnotes_bot.commands.patchnotes import ON_DEMAND_REPLIES, NOT_CONFIGURED_REPLY
from patchnotes_bot.util.text import clip_discord_message


def test_setup_confirmation_with_and_without_role():
    assert setup_confirmation(42, None) == "Patch notes will now be posted in <#42>."
    assert setup_confirmation(42, 7) == "Patch notes will now be posted in <#42> and will ping <@&7>."


def test_on_demand_replies_are_distinct():
    assert set(ON_DEMAND_REPLIES) == set(OnDemandOutcome)
    texts = [ON_DEMAND_REPLIES[o] for o in OnDemandOutcome]
    assert len(set(texts)) == len(texts)
    assert ON_DEMAND_REPLIES[OnDemandOutcome.NOT_CONFIGURED] == NOT_CONFIGURED_REPLY
    assert "try again" in ON_DEMAND_REPLIES[OnDemandOutcome.FAILED]


def test_clip_discord_message():
    assert clip_discord_message("short") == "short"
    clipped = clip_discord_message("x" * 3000)
    assert len(clipped) == 1900
    assert clipped.endswith("...")
