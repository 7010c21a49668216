from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from llama_index.core.llms import ChatMessage, MessageRole
from llama_index.llms.openai import OpenAI

from .base import GenerationConfig, GenerationProvider


@dataclass(frozen=True)
class OpenAIProvider(GenerationProvider):
    config: GenerationConfig

    def create_llm(self, *, api_key: str) -> OpenAI:
        kwargs = {}
        if self.config.api_base:
            kwargs["api_base"] = self.config.api_base
        return OpenAI(
            model=self.config.llm_model,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            api_key=api_key,
            **kwargs,
        )

    def build_messages(self, raw_text: str) -> List[ChatMessage]:
        return [
            ChatMessage(role=MessageRole.SYSTEM, content=self.config.system_prompt),
            ChatMessage(role=MessageRole.USER, content=self.config.build_prompt(raw_text)),
        ]

    async def format(self, raw_text: str, credential: str) -> Optional[str]:
        # A client per call: each destination brings its own key
        llm = self.create_llm(api_key=credential)
        resp = await llm.achat(self.build_messages(raw_text))
        content = resp.message.content or ""
        content = content.strip()
        return content or None
