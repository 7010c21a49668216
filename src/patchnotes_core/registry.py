from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .errors import ConfigError
from .store import JsonDestinationStore
from .types import Destination


class DestinationRegistry:
    """In-memory view of configured destinations, persisted on every change.

    Mutations build a new mapping, persist it, then swap it in, so readers
    always see one complete snapshot and a failed write leaves state as it was.
    """

    def __init__(self, store: JsonDestinationStore):
        self._store = store
        self._lock = threading.Lock()
        self._log = logging.getLogger(__name__)
        self._entries: Dict[str, Destination] = dict(store.load_all())

    def put(
        self,
        id: str,
        delivery_target: str,
        generation_credential: Optional[str],
        notification_tag: Optional[str] = None,
    ) -> Destination:
        if not generation_credential or not generation_credential.strip():
            raise ConfigError("An OpenAI API key is required to set up the bot.")
        dest = Destination(
            id=str(id),
            delivery_target=str(delivery_target),
            generation_credential=generation_credential.strip(),
            notification_tag=str(notification_tag) if notification_tag else None,
        )
        with self._lock:
            updated = dict(self._entries)
            updated[dest.id] = dest
            self._store.save_all(updated)
            self._entries = updated
        self._log.info(
            "Destination %s configured: target=%s tag=%s credential provided=%s",
            dest.id,
            dest.delivery_target,
            dest.notification_tag or "None",
            bool(dest.generation_credential),
        )
        return dest

    def remove(self, id: str) -> bool:
        with self._lock:
            if str(id) not in self._entries:
                return False
            updated = dict(self._entries)
            del updated[str(id)]
            self._store.save_all(updated)
            self._entries = updated
        self._log.info("Configuration reset for destination %s", id)
        return True

    def get(self, id: str) -> Optional[Destination]:
        return self._entries.get(str(id))

    def all(self) -> List[Destination]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
