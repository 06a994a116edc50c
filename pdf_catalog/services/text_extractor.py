# pdf_catalog/services/text_extractor.py
from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union
import subprocess

import fitz  # PyMuPDF

from ..config import Config
from ..domain.errors import ExtractionFailure


class TextExtractor(Protocol):
    def extract(self, path: Union[str, Path]) -> str: ...


class PdfToTextExtractor:
    """Runs poppler's pdftotext and reads the text from its stdout."""

    def __init__(self, cmd: str = "pdftotext"):
        self.cmd = cmd

    def extract(self, path: Union[str, Path]) -> str:
        try:
            proc = subprocess.run(
                [self.cmd, "-q", str(path), "-"],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise ExtractionFailure(str(path), f"{e.__class__.__name__}: {e}") from e
        if proc.returncode != 0:
            raise ExtractionFailure(str(path), f"{self.cmd} exited with status {proc.returncode}",
                                    returncode=proc.returncode)
        return proc.stdout.decode("utf-8", errors="replace")


class PyMuPDFExtractor:
    """Reads the digital text layer with PyMuPDF. Scanned pages come back empty (no OCR)."""

    def __init__(self, page_separator: str = "\n\n"):
        self.page_separator = page_separator

    def extract(self, path: Union[str, Path]) -> str:
        try:
            with fitz.open(str(path)) as doc:
                pages = [self._extract_text_digital(page) for page in doc]
        except Exception as e:
            raise ExtractionFailure(str(path), f"{e.__class__.__name__}: {e}") from e
        return self.page_separator.join(pages)

    def _extract_text_digital(self, page: fitz.Page) -> str:
        txt = page.get_text("text") or ""
        return txt.strip()


def build_extractor(cfg: Config) -> TextExtractor:
    if cfg.extractor == "pdftotext":
        return PdfToTextExtractor(cfg.pdftotext_cmd)
    if cfg.extractor == "pymupdf":
        return PyMuPDFExtractor()
    raise ValueError(f"unknown extractor '{cfg.extractor}'")
