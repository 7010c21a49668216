from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping

from .types import Destination

log = logging.getLogger(__name__)


def _to_record(d: Destination) -> dict:
    return {
        "channelId": d.delivery_target,
        "pingRoleId": d.notification_tag,
        "openAiKey": d.generation_credential,
    }


def _from_record(dest_id: str, rec: Mapping) -> Destination | None:
    target = rec.get("channelId")
    key = rec.get("openAiKey")
    if not target or not key:
        return None
    tag = rec.get("pingRoleId")
    return Destination(
        id=str(dest_id),
        delivery_target=str(target),
        generation_credential=str(key),
        notification_tag=str(tag) if tag else None,
    )


class JsonDestinationStore:
    """Whole-document JSON persistence for the destination registry.

    Layout: ``{destination_id: {"channelId", "pingRoleId", "openAiKey"}}``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_all(self) -> Dict[str, Destination]:
        if not self.path.exists():
            log.info("No configuration found at %s. Run /setup to configure the bot.", self.path)
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        out: Dict[str, Destination] = {}
        for dest_id, rec in (data or {}).items():
            if not isinstance(rec, Mapping):
                log.warning("Skipping destination %s: record is not an object", dest_id)
                continue
            d = _from_record(dest_id, rec)
            if d is None:
                log.warning("Skipping destination %s: channel or API key missing", dest_id)
                continue
            out[d.id] = d
        log.info("Loaded %d destination(s) from %s", len(out), self.path)
        return out

    def save_all(self, destinations: Mapping[str, Destination]) -> None:
        payload = {k: _to_record(v) for k, v in destinations.items()}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write next to the target so os.replace stays on one filesystem
        fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=4)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        log.info("Configuration saved (%d destination(s))", len(payload))
