from __future__ import annotations
from typing import List
from ..domain.record import Record
from ..domain.catalog import Catalog
from ..services.factory import make_record_id

def validate_record(rec: Record) -> List[str]:
    issues: List[str] = []
    if not rec.link:
        issues.append("link is empty")
    if not rec.content.strip():
        issues.append("content is empty")
    if rec.title:
        if rec.id != make_record_id(rec.title):
            issues.append(f"id does not match title hash for '{rec.title[:80]}'")
    elif rec.id:
        issues.append("id set on a record without title")
    return issues

def validate_catalog(catalog: Catalog) -> List[str]:
    issues: List[str] = []
    seen: set[str] = set()
    for idx, rec in enumerate(catalog.records):
        if rec.title:
            if rec.title in seen:
                issues.append(f"entry {idx}: duplicate title '{rec.title[:80]}'")
            seen.add(rec.title)
        issues.extend(f"entry {idx}: {msg}" for msg in validate_record(rec))
    return issues
