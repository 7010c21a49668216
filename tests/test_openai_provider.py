from __future__ import annotations

import asyncio
from types import SimpleNamespace

from llama_index.core.llms import MessageRole

from patchnotes_core.providers.base import DEFAULT_SYSTEM_PROMPT, GenerationConfig
from patchnotes_core.providers.openai_provider import OpenAIProvider


class _FakeLLM:
    def __init__(self, content):
        self.content = content
        self.seen = None

    async def achat(self, messages, **_):
        self.seen = messages
        return SimpleNamespace(message=SimpleNamespace(content=self.content))


class _StubProvider(OpenAIProvider):
    def create_llm(self, *, api_key: str):  # type: ignore[override]
        self.keys.append(api_key)  # type: ignore[attr-defined]
        return self.llm  # type: ignore[attr-defined]


def _stub(content):
    p = _StubProvider(config=GenerationConfig())
    object.__setattr__(p, "llm", _FakeLLM(content))
    object.__setattr__(p, "keys", [])
    return p


def test_messages_carry_system_prompt_and_instruction():
    p = OpenAIProvider(config=GenerationConfig())
    msgs = p.build_messages("Alpha 3.24 notes")
    assert [m.role for m in msgs] == [MessageRole.SYSTEM, MessageRole.USER]
    assert msgs[0].content == DEFAULT_SYSTEM_PROMPT
    user = msgs[1].content
    assert "release date/time" in user
    assert "TECHNICAL CATEGORY" in user
    assert "markdown" in user
    assert user.endswith("\n\nAlpha 3.24 notes")


def test_format_uses_per_call_key_and_trims():
    p = _stub("\n  **Patch** notes \n")
    assert asyncio.run(p.format("raw", "sk-one")) == "**Patch** notes"
    assert asyncio.run(p.format("raw", "sk-two")) == "**Patch** notes"
    assert p.keys == ["sk-one", "sk-two"]


def test_format_empty_reply_is_none():
    assert asyncio.run(_stub("   ").format("raw", "sk")) is None
    assert asyncio.run(_stub(None).format("raw", "sk")) is None


def test_create_llm_applies_config():
    cfg = GenerationConfig(llm_model="gpt-4o-mini", max_tokens=3500)
    llm = OpenAIProvider(config=cfg).create_llm(api_key="sk-test")
    assert llm.model == "gpt-4o-mini"
    assert llm.max_tokens == 3500
    assert llm.api_key == "sk-test"
