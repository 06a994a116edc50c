from __future__ import annotations
import json
from pathlib import Path
from typing import Optional, Union

from ..domain.catalog import Catalog
from ..domain.errors import SerializationError

import logging


def dump_catalog(catalog: Catalog) -> str:
    return json.dumps(catalog.to_json(), ensure_ascii=False, indent=2)


def parse_catalog(raw: str, source: str = "<memory>") -> Catalog:
    try:
        return Catalog.from_json(json.loads(raw))
    except (ValueError, TypeError, KeyError) as e:
        # json.JSONDecodeError is a ValueError
        raise SerializationError(f"corrupt catalog {source}: {e.__class__.__name__}: {e}") from e


class CatalogStore:
    """The catalog file: loaded once per run, rewritten in full at the end."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Catalog:
        if not self.path.exists():
            logging.info(f"[STORE] no catalog at {self.path}; starting empty")
            return Catalog()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SerializationError(f"cannot read catalog {self.path}: {e}") from e
        catalog = parse_catalog(raw, str(self.path))
        logging.info(f"[STORE] loaded {len(catalog)} entries ({len(catalog.titles)} titles) from {self.path}")
        return catalog

    def save(self, catalog: Catalog) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump_catalog(catalog), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise SerializationError(f"cannot write catalog {self.path}: {e}") from e
        logging.info(f"[STORE] wrote {len(catalog)} entries to {self.path}")


class MemoryCatalogStore:
    """Same contract as CatalogStore, keeping the serialized document in memory."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw

    def load(self) -> Catalog:
        if self.raw is None:
            return Catalog()
        return parse_catalog(self.raw)

    def save(self, catalog: Catalog) -> None:
        self.raw = dump_catalog(catalog)


def open_store(path: Optional[Union[str, Path]]):
    return CatalogStore(path) if path else MemoryCatalogStore()
