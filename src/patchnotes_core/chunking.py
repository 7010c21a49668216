from __future__ import annotations

from typing import List


def chunk_text(text: str, max_len: int = 2000) -> List[str]:
    """Split text into consecutive slices of at most ``max_len`` characters.

    Every slice except the last is exactly ``max_len`` long and joining the
    slices reproduces ``text``. Empty text yields no chunks.
    """
    if max_len < 1:
        raise ValueError(f"max_len must be >= 1, got {max_len}")
    return [text[i : i + max_len] for i in range(0, len(text), max_len)]
