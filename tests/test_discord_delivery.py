from __future__ import annotations

import asyncio
from types import SimpleNamespace

import discord

from patchnotes_bot.infrastructure.delivery import DiscordDelivery


def _http_error(cls, status):
    return cls(SimpleNamespace(status=status, reason="error"), "error")


class _FakeChannel:
    def __init__(self, id, error=None):
        self.id = id
        self.sent = []
        self.error = error

    async def send(self, text):
        if self.error is not None:
            raise self.error
        self.sent.append(text)


class _FakeClient:
    def __init__(self, cached=None, remote=None, fetch_error=None):
        self.cached = cached or {}
        self.remote = remote or {}
        self.fetch_error = fetch_error
        self.fetched = []

    def get_channel(self, channel_id):
        return self.cached.get(channel_id)

    async def fetch_channel(self, channel_id):
        self.fetched.append(channel_id)
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.remote[channel_id]


def test_resolve_prefers_cache_then_fetches():
    cached = _FakeChannel(1)
    remote = _FakeChannel(2)
    client = _FakeClient(cached={1: cached}, remote={2: remote})
    d = DiscordDelivery(client)  # type: ignore[arg-type]
    assert asyncio.run(d.resolve_target("1")) is cached
    assert asyncio.run(d.resolve_target("2")) is remote
    assert client.fetched == [2]


def test_resolve_deleted_or_forbidden_channel_is_none():
    for err in (_http_error(discord.NotFound, 404), _http_error(discord.Forbidden, 403)):
        d = DiscordDelivery(_FakeClient(fetch_error=err))  # type: ignore[arg-type]
        assert asyncio.run(d.resolve_target("5")) is None


def test_resolve_invalid_id_is_none():
    d = DiscordDelivery(_FakeClient())  # type: ignore[arg-type]
    assert asyncio.run(d.resolve_target("not-a-snowflake")) is None


def test_send_reports_rejection():
    d = DiscordDelivery(_FakeClient())  # type: ignore[arg-type]
    ok = _FakeChannel(1)
    assert asyncio.run(d.send(ok, "hello")) is True
    assert ok.sent == ["hello"]
    bad = _FakeChannel(2, error=_http_error(discord.Forbidden, 403))
    assert asyncio.run(d.send(bad, "hello")) is False


def test_mention_formats_role():
    d = DiscordDelivery(_FakeClient())  # type: ignore[arg-type]
    assert d.mention("123") == "<@&123>"
    assert d.mention(None) == ""
