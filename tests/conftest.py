"""Shared fixtures: a scratch intake layout and a fake text converter."""

from pathlib import Path
from typing import Dict, Union

import pytest

from pdf_catalog.config import Config
from pdf_catalog.domain.errors import ExtractionFailure


class FakeExtractor:
    """Maps file names to canned pdftotext output; unknown names fail like a non-zero exit."""

    def __init__(self, texts: Dict[str, str]):
        self.texts = dict(texts)
        self.calls = []

    def extract(self, path: Union[str, Path]) -> str:
        name = Path(path).name
        self.calls.append(name)
        if name not in self.texts:
            raise ExtractionFailure(str(path), "pdftotext exited with status 1", returncode=1)
        return self.texts[name]


@pytest.fixture
def layout(tmp_path: Path) -> Config:
    for d in ("in", "old", "out"):
        (tmp_path / d).mkdir()
    return Config(
        intake_dir=str(tmp_path / "in"),
        archive_dir=str(tmp_path / "old"),
        catalog_path=str(tmp_path / "out" / "entries.json"),
    )


def drop_pdf(cfg: Config, name: str) -> Path:
    p = Path(cfg.intake_dir) / name
    p.write_bytes(b"%PDF-1.4\n%fake\n")
    return p
