from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class DeliveryClient(ABC):
    """Chat-platform side of delivery."""

    @abstractmethod
    async def resolve_target(self, target_id: str) -> Optional[Any]:
        """Look up a sendable handle; None when the target no longer exists."""
        raise NotImplementedError

    @abstractmethod
    async def send(self, handle: Any, text: str) -> bool:
        raise NotImplementedError

    def mention(self, tag: Optional[str]) -> str:
        return tag or ""
