from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Set, Union

from .record import Record


@dataclass(slots=True)
class Catalog:
    """Ordered, append-only record collection with an index of the titles already seen."""
    records: List[Record] = field(default_factory=list)
    titles: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.records and not self.titles:
            self.titles = {r.title for r in self.records if r.title}

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def has_title(self, title: str | None) -> bool:
        return bool(title) and title in self.titles

    def append(self, record: Record) -> None:
        if record.title and record.title in self.titles:
            raise ValueError(f"duplicate title in catalog: {record.title!r}")
        self.records.append(record)
        if record.title:
            self.titles.add(record.title)

    def to_json(self) -> Dict[str, Any]:
        return {"entries": [r.to_json() for r in self.records]}

    @staticmethod
    def from_json(d: Union[Dict[str, Any], List[Any]]) -> "Catalog":
        # the database loader reads a bare list, the parser writes {"entries": [...]}
        if isinstance(d, dict):
            if "entries" not in d:
                raise KeyError("catalog object has no 'entries' list")
            entries = d["entries"]
        elif isinstance(d, list):
            entries = d
        else:
            raise TypeError(f"catalog must be an object or a list, got {type(d).__name__}")
        if not isinstance(entries, list):
            raise TypeError("catalog 'entries' must be a list")
        cat = Catalog()
        for x in entries:
            # keep prior data as-is even if an older run stored a repeated title
            rec = Record.from_json(x)
            cat.records.append(rec)
            if rec.title:
                cat.titles.add(rec.title)
        return cat
