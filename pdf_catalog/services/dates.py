# pdf_catalog/services/dates.py
from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Sequence
import re

from ..config import MONTHS_PT

# "15 de março de 24"; normalized glyph-spaced text arrives as "15demarçode24"
_NAMED_RE = re.compile(r"(\d{1,2})\s*de\s*([^\d\s]+)\s*de\s*(\d{2,4})")
_NUMERIC_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2,4})")

DateStrategy = Callable[[str, int], Optional[int]]


def resolve_year(year_str: str, current_year: int) -> Optional[int]:
    """Two-digit years up to the current two-digit year land in 2000s, the rest in 1900s.

    Assumes no document is older than ~100 years or dated in the future.
    """
    if len(year_str) == 4:
        return int(year_str)
    if len(year_str) != 2:
        return None
    yy = int(year_str)
    return 2000 + yy if yy <= current_year % 100 else 1900 + yy


def utc_midnight(year: int, month: int, day: int) -> Optional[int]:
    try:
        dt = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None
    return int(dt.timestamp())


def _month_number(name: str) -> Optional[int]:
    name = name.lower()
    for idx, m in enumerate(MONTHS_PT, start=1):
        if m == name:
            return idx
    return None


def parse_named_date(line: str, current_year: int) -> Optional[int]:
    for m in _NAMED_RE.finditer(line):
        month = _month_number(m.group(2))
        year = resolve_year(m.group(3), current_year)
        if month is None or year is None:
            continue
        ts = utc_midnight(year, month, int(m.group(1)))
        if ts is not None:
            return ts
    return None


def parse_numeric_date(line: str, current_year: int) -> Optional[int]:
    for m in _NUMERIC_RE.finditer(line):
        year = resolve_year(m.group(3), current_year)
        if year is None:
            continue
        ts = utc_midnight(year, int(m.group(2)), int(m.group(1)))
        if ts is not None:
            return ts
    return None


DEFAULT_STRATEGIES: tuple[DateStrategy, ...] = (parse_named_date, parse_numeric_date)


class DateExtractor:
    """Tries each strategy over every line, in priority order; first valid date wins."""

    def __init__(self, strategies: Sequence[DateStrategy] = DEFAULT_STRATEGIES,
                 current_year: Optional[int] = None):
        self.strategies: List[DateStrategy] = list(strategies)
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year if self._current_year is not None else date.today().year

    def extract_line(self, line: str) -> Optional[int]:
        year = self.current_year
        for strategy in self.strategies:
            ts = strategy(line, year)
            if ts is not None:
                return ts
        return None

    def extract(self, text: str) -> Optional[int]:
        year = self.current_year
        lines = text.splitlines()
        for strategy in self.strategies:
            for ln in lines:
                ts = strategy(ln, year)
                if ts is not None:
                    return ts
        return None
