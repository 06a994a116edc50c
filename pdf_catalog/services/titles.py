# pdf_catalog/services/titles.py
from __future__ import annotations
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_MARKERS

import logging


def detect_title(text: str, markers: Sequence[str] = DEFAULT_MARKERS) -> Optional[str]:
    """Return the first line containing any marker (case-sensitive), or None."""
    markers = [m for m in markers if m]
    if not markers:
        return None
    for ln in text.splitlines():
        if any(m in ln for m in markers):
            logging.debug(f"[TITLE] marker hit: '{ln[:120]}'")
            return ln
    return None


class TitleDetector:
    def __init__(self, markers: Iterable[str] = DEFAULT_MARKERS):
        self.markers = tuple(markers)

    def detect(self, text: str) -> Optional[str]:
        return detect_title(text, self.markers)
