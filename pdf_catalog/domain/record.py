from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(slots=True)
class Record:
    id: str                  # sha256 hex of the title, "" when no title was found
    title: Optional[str]
    date: Optional[int]      # epoch seconds, UTC midnight
    content: str
    link: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "content": self.content,
            "link": self.link,
        }

    @staticmethod
    def from_json(d: Dict[str, Any]) -> "Record":
        if not isinstance(d, dict):
            raise TypeError(f"record must be an object, got {type(d).__name__}")
        date = d.get("date")
        if date is not None and (isinstance(date, bool) or not isinstance(date, int)):
            raise TypeError(f"record date must be an integer timestamp, got {date!r}")
        title = d.get("title")
        if title is not None and not isinstance(title, str):
            raise TypeError(f"record title must be a string, got {title!r}")
        for key in ("id", "content", "link"):
            value = d.get(key)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"record {key} must be a string, got {value!r}")
        content = d.get("content")
        if content is None or d.get("link") is None:
            raise KeyError("record needs both content and link")
        return Record(
            id=d.get("id") or "",
            title=title,
            date=date,
            content=content,
            link=d["link"],
        )
