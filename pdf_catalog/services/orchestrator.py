# pdf_catalog/services/orchestrator.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional
import shutil

from ..config import Config, normalize_extension
from ..domain.catalog import Catalog
from ..domain.errors import DirectoryAccessError, ExtractionFailure, MalformedFilename
from ..domain.record import Record
from ..io.repository import open_store
from .dates import DateExtractor
from .factory import RecordFactory
from .normalizer import normalize
from .text_extractor import TextExtractor, build_extractor

import logging

State = Literal[
    "archived",           # appended to the catalog, file moved to the archive
    "archive_failed",     # appended to the catalog, move failed; file still in intake
    "duplicate",          # title already catalogued; nothing changed
    "rejected",           # malformed filename or untitled; nothing changed
    "extraction_failed",  # converter failed; nothing changed
    "failed",             # unexpected error while handling the file
]


@dataclass(slots=True)
class FileOutcome:
    path: Path
    state: State
    record: Optional[Record] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.state in ("archived", "archive_failed")

    def to_json(self) -> Dict[str, Any]:
        return {
            "file": self.path.name,
            "state": self.state,
            "reason": self.reason,
            "record": self.record.to_json() if (self.record and self.accepted) else None,
        }


@dataclass(slots=True)
class RunReport:
    outcomes: List[FileOutcome] = field(default_factory=list)
    catalog_size: int = 0

    def counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for o in self.outcomes:
            out[o.state] = out.get(o.state, 0) + 1
        return out

    def to_json(self) -> Dict[str, Any]:
        return {
            "catalog_size": self.catalog_size,
            "counts": self.counts(),
            "files": [o.to_json() for o in self.outcomes],
        }


class Pipeline:
    """Holds the long-lived pieces (store, converter, factory) and runs one intake batch."""

    def __init__(self, cfg: Config, store=None, extractor: Optional[TextExtractor] = None,
                 dates: Optional[DateExtractor] = None):
        self.cfg = cfg
        self.store = store if store is not None else open_store(cfg.catalog_path)
        self.extractor = extractor if extractor is not None else build_extractor(cfg)
        self.factory = RecordFactory(markers=cfg.markers, dates=dates, link_template=cfg.link_template)
        self.intake_dir = Path(cfg.intake_dir)
        self.archive_dir = Path(cfg.archive_dir)

    def discover(self) -> List[Path]:
        ext = normalize_extension(self.cfg.extension)
        try:
            found = [p for p in self.intake_dir.iterdir() if p.is_file() and p.suffix.lower() == ext]
        except OSError as e:
            raise DirectoryAccessError(f"cannot read intake directory {self.intake_dir}: {e}") from e
        found.sort(key=lambda p: p.name)
        logging.info(f"[INTAKE] discovered {len(found)} '{ext}' files in {self.intake_dir}")
        return found

    def process_file(self, path: Path, catalog: Catalog) -> FileOutcome:
        # Discovered -> TextExtracted
        try:
            raw = self.extractor.extract(path)
        except ExtractionFailure as e:
            logging.error(f"[INTAKE] {path.name}: {e}")
            return FileOutcome(path, "extraction_failed", reason=str(e))

        text = normalize(raw)

        # TextExtracted -> RecordBuilt
        try:
            built = self.factory.build(text, path, catalog)
        except MalformedFilename as e:
            logging.error(f"[INTAKE] {path.name}: error generating link: {e}")
            return FileOutcome(path, "rejected", reason=str(e))

        if built.duplicate:
            return FileOutcome(path, "duplicate", record=built.record, reason="duplicate title")

        rec = built.record
        if rec.title:
            logging.info(f"[INTAKE] {path.name}: title found: {rec.title}")
        else:
            logging.info(f"[INTAKE] {path.name}: no title found")
            if not self.cfg.keep_untitled:
                return FileOutcome(path, "rejected", record=rec, reason="no title found")
        if rec.date is None:
            logging.info(f"[INTAKE] {path.name}: no date found")
        else:
            logging.info(f"[INTAKE] {path.name}: date found: {rec.date}")

        # RecordBuilt -> Archived
        catalog.append(rec)
        try:
            shutil.move(str(path), str(self.archive_dir / path.name))
        except OSError as e:
            # the entry stays in the catalog; next run sees the file as a duplicate
            logging.error(f"[INTAKE] {path.name}: error moving file: {e}")
            return FileOutcome(path, "archive_failed", record=rec, reason=f"move failed: {e}")
        return FileOutcome(path, "archived", record=rec)

    def run(self) -> RunReport:
        catalog = self.store.load()
        files = self.discover()

        report = RunReport()
        for path in files:
            try:
                outcome = self.process_file(path, catalog)
            except Exception as e:
                logging.exception(f"[INTAKE] {path.name}: unexpected failure")
                outcome = FileOutcome(path, "failed", reason=f"{e.__class__.__name__}: {e}")
            report.outcomes.append(outcome)

        self.store.save(catalog)
        report.catalog_size = len(catalog)
        logging.info(f"[INTAKE] done: {report.counts()} catalog_size={report.catalog_size}")
        return report
