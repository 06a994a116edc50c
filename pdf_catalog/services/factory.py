from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union
import hashlib

from ..config import DEFAULT_MARKERS, LINK_TEMPLATE
from ..domain.catalog import Catalog
from ..domain.errors import MalformedFilename
from ..domain.record import Record
from .dates import DateExtractor
from .titles import TitleDetector

import logging


def make_record_id(title: str) -> str:
    return hashlib.sha256(title.encode("utf-8")).hexdigest()


def resolve_link(path: Union[str, Path], template: str = LINK_TEMPLATE) -> str:
    """Build the retrieval link from a '<identifier>_<key>.<ext>' filename."""
    parts = Path(path).stem.split("_")
    if len(parts) != 2 or not all(parts):
        raise MalformedFilename(str(path))
    ident, key = parts
    return template.format(id=ident, key=key)


@dataclass(frozen=True, slots=True)
class BuildResult:
    record: Record
    duplicate: bool = False


class RecordFactory:
    def __init__(self, markers: Sequence[str] = DEFAULT_MARKERS,
                 dates: Optional[DateExtractor] = None,
                 link_template: str = LINK_TEMPLATE):
        self.titles = TitleDetector(markers)
        self.dates = dates or DateExtractor()
        self.link_template = link_template

    def build(self, text: str, source: Union[str, Path], catalog: Catalog) -> BuildResult:
        """Turn normalized text into a candidate record.

        A title already in the catalog gives a duplicate result with no title, date, id or link;
        the catalog itself is never touched here. Raises MalformedFilename when the
        source name cannot produce a link.
        """
        title = self.titles.detect(text)
        found_date = self.dates.extract(text)

        if title is not None and catalog.has_title(title):
            logging.warning(f"[BUILD] duplicate entry with title '{title}'")
            return BuildResult(
                record=Record(id="", title=None, date=None, content=text, link=""),
                duplicate=True,
            )

        link = resolve_link(source, self.link_template)
        rec_id = make_record_id(title) if title is not None else ""
        return BuildResult(record=Record(id=rec_id, title=title, date=found_date, content=text, link=link))
