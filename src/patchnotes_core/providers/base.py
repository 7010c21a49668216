from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant that formats patch notes for Star Citizen."

DEFAULT_INSTRUCTION = (
    "You are a helpful assistant that formats patch notes for Star Citizen. "
    "Don't include a release date/time! Besides this, YOU MUST INCLUDE EVERYTHING "
    "FROM THE TITLE AT THE TOP TO THE END OF THE TECHNICAL CATEGORY! Make sure to show "
    "any special requests or any testing/feedback focus. Include all Known issues, "
    "Features & Gameplay, Bug Fixes, and Technical. Use markdown for formatting:"
)


@dataclass(frozen=True)
class GenerationConfig:
    llm_model: str = "gpt-4o-mini"
    max_tokens: int = 3500
    temperature: float = 0.1
    api_base: str | None = None
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    instruction: str = DEFAULT_INSTRUCTION

    def build_prompt(self, raw_text: str) -> str:
        return f"{self.instruction}\n\n{raw_text}"


class GenerationProvider(ABC):
    @abstractmethod
    async def format(self, raw_text: str, credential: str) -> Optional[str]:  # pragma: no cover
        """Transform scraped text into deliverable markdown.

        ``credential`` is the API key of the destination the text is produced
        for. Returns None when the service gave back nothing usable.
        """
        raise NotImplementedError
