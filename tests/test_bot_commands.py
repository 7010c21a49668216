from __future__ import annotations

import asyncio
from types import SimpleNamespace

from patchnotes_bot.bot.client import PatchNotesBot
from patchnotes_bot.commands.configure import ConfigureCog
from patchnotes_core.registry import DestinationRegistry
from patchnotes_core.store import JsonDestinationStore


class _FakeResponse:
    def __init__(self):
        self.deferred = False

    async def defer(self, **_):
        self.deferred = True


class _FakeFollowup:
    def __init__(self):
        self.sent = []

    async def send(self, content, **_):
        self.sent.append(content)


def _interaction(guild_id=111):
    return SimpleNamespace(guild_id=guild_id, response=_FakeResponse(), followup=_FakeFollowup())


def _cog(registry):
    return ConfigureCog(SimpleNamespace(services=SimpleNamespace(registry=registry)))  # type: ignore[arg-type]


def _setup(cog, interaction, key, role=None):
    channel = SimpleNamespace(id=42)
    return asyncio.run(ConfigureCog.setup_destination.callback(cog, interaction, channel, key, role))


def _reset(cog, interaction):
    return asyncio.run(ConfigureCog.reset_destination.callback(cog, interaction))


def test_setup_stores_destination_and_confirms(tmp_path):
    registry = DestinationRegistry(JsonDestinationStore(tmp_path / "config.json"))
    inter = _interaction()
    _setup(_cog(registry), inter, "sk-abc", SimpleNamespace(id=7))
    assert inter.response.deferred
    assert inter.followup.sent == ["Patch notes will now be posted in <#42> and will ping <@&7>."]
    d = registry.get("111")
    assert (d.delivery_target, d.notification_tag, d.generation_credential) == ("42", "7", "sk-abc")


def test_setup_without_key_replies_key_required(tmp_path):
    registry = DestinationRegistry(JsonDestinationStore(tmp_path / "config.json"))
    inter = _interaction()
    _setup(_cog(registry), inter, "  ")
    assert inter.followup.sent == ["An OpenAI API key is required to set up the bot. Please provide one."]
    assert registry.get("111") is None


def test_setup_storage_error_replies_generic_failure(tmp_path):
    store = JsonDestinationStore(tmp_path / "config.json")
    registry = DestinationRegistry(store)

    def boom(_):
        raise OSError("read-only filesystem")

    store.save_all = boom  # type: ignore[method-assign]
    inter = _interaction()
    _setup(_cog(registry), inter, "sk-abc")
    assert inter.followup.sent == ["An error occurred while processing your request."]
    assert registry.get("111") is None


def test_reset_replies_for_configured_and_unconfigured(tmp_path):
    registry = DestinationRegistry(JsonDestinationStore(tmp_path / "config.json"))
    registry.put("111", "42", "sk-abc")
    cog = _cog(registry)

    first = _interaction()
    _reset(cog, first)
    assert first.followup.sent == ["Configuration reset. Patch notes will no longer be posted here."]
    assert registry.get("111") is None

    second = _interaction()
    _reset(cog, second)
    assert second.followup.sent == ["This server was not configured."]


class _RecordingDispatcher:
    def __init__(self, calls):
        self.calls = calls

    async def baseline(self):
        self.calls.append("baseline")
        return None


class _RecordingPoller:
    def __init__(self, calls):
        self.calls = calls
        self.running = False

    def start(self):
        self.calls.append("start")
        self.running = True


def test_reconnect_does_not_restart_pipeline():
    calls = []

    def services_factory(_client):
        return SimpleNamespace(
            registry=None, dispatcher=_RecordingDispatcher(calls), poller=_RecordingPoller(calls)
        )

    async def scenario():
        bot = PatchNotesBot(services_factory)

        async def change_presence(**_):
            calls.append("presence")

        bot.change_presence = change_presence  # type: ignore[method-assign]
        await bot.on_ready()
        await bot.on_ready()

    asyncio.run(scenario())
    assert [c for c in calls if c != "presence"] == ["baseline", "start"]
