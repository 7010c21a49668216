from .types import (
    SourceItem,
    Destination,
    NormalizedDocument,
    CycleOutcome,
    CycleReport,
    OnDemandOutcome,
)
from .errors import PatchNotesError, ConfigError, DetectionFailure, ExtractionFailure, DeliveryFailure
from .chunking import chunk_text
from .scraping import ForumScraper
from .providers.base import GenerationProvider, GenerationConfig
from .providers.openai_provider import OpenAIProvider
from .detector import ChangeDetector
from .extractor import ContentExtractor
from .store import JsonDestinationStore
from .registry import DestinationRegistry
from .delivery import DeliveryClient
from .dispatcher import Dispatcher, LatestItemState
from .scheduler import PollingLoop

__all__ = [
    "SourceItem",
    "Destination",
    "NormalizedDocument",
    "CycleOutcome",
    "CycleReport",
    "OnDemandOutcome",
    "PatchNotesError",
    "ConfigError",
    "DetectionFailure",
    "ExtractionFailure",
    "DeliveryFailure",
    "chunk_text",
    "ForumScraper",
    "GenerationProvider",
    "GenerationConfig",
    "OpenAIProvider",
    "ChangeDetector",
    "ContentExtractor",
    "JsonDestinationStore",
    "DestinationRegistry",
    "DeliveryClient",
    "Dispatcher",
    "LatestItemState",
    "PollingLoop",
]
