from __future__ import annotations

from patchnotes_core.providers.base import (
    DEFAULT_INSTRUCTION,
    DEFAULT_SYSTEM_PROMPT,
    GenerationConfig,
    GenerationProvider,
)
from patchnotes_core.providers.openai_provider import OpenAIProvider
from ..config import settings


def build_generation_provider() -> GenerationProvider:
    cfg = GenerationConfig(
        llm_model=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
        temperature=settings.temperature,
        api_base=settings.llm_api_base,
        system_prompt=settings.generation_system_prompt or DEFAULT_SYSTEM_PROMPT,
        instruction=settings.generation_instruction or DEFAULT_INSTRUCTION,
    )
    return OpenAIProvider(config=cfg)
