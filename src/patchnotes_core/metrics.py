from __future__ import annotations

from prometheus_client import Counter, Histogram

# Poll cycles
cycles_total = Counter(
    "patchnotes_cycles_total", "Poll cycles by outcome", labelnames=("outcome",)
)
cycle_duration_seconds = Histogram(
    "patchnotes_cycle_duration_seconds", "Duration of a detect/extract/deliver cycle"
)

# Extraction (scrape + generation)
extractions_total = Counter(
    "patchnotes_extractions_total", "Extraction attempts by status", labelnames=("status",)
)

# Per-destination delivery
deliveries_total = Counter(
    "patchnotes_deliveries_total", "Destination deliveries by status", labelnames=("status",)
)
