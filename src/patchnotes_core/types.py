from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class SourceItem:
    url: str


@dataclass(frozen=True)
class Destination:
    id: str
    delivery_target: str
    generation_credential: str
    notification_tag: Optional[str] = None


@dataclass(frozen=True)
class NormalizedDocument:
    source_url: str
    formatted_text: str


class CycleOutcome(str, Enum):
    BUSY = "busy"
    NO_DESTINATIONS = "no_destinations"
    DETECTION_FAILED = "detection_failed"
    NO_CHANGE = "no_change"
    EXTRACTION_FAILED = "extraction_failed"
    DELIVERED = "delivered"


@dataclass
class CycleReport:
    outcome: CycleOutcome
    url: Optional[str] = None
    delivered: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class OnDemandOutcome(str, Enum):
    NOT_CONFIGURED = "not_configured"
    NOTHING_YET = "nothing_yet"
    FAILED = "failed"
    DELIVERED = "delivered"
