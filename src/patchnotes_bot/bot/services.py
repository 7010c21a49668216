from __future__ import annotations

from dataclasses import dataclass

from patchnotes_core.dispatcher import Dispatcher
from patchnotes_core.registry import DestinationRegistry
from patchnotes_core.scheduler import PollingLoop


@dataclass
class BotServices:
    registry: DestinationRegistry
    dispatcher: Dispatcher
    poller: PollingLoop
