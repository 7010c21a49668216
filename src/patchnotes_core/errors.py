from __future__ import annotations


class PatchNotesError(Exception):
    """Base class for pipeline errors."""


class ConfigError(PatchNotesError):
    """A destination cannot be configured as requested (e.g. missing credential)."""


class DetectionFailure(PatchNotesError):
    """The latest forum item could not be identified."""


class ExtractionFailure(PatchNotesError):
    """Page text was empty or the generation step produced nothing."""


class DeliveryFailure(PatchNotesError):
    """A destination's target could not be resolved or rejected a message."""
