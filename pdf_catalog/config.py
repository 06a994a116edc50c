from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_MARKERS: Tuple[str, ...] = ("RESOLUÇÃO", "Cronograma", "Calendário", "Calendario")

LINK_TEMPLATE = "https://sig.unb.br/sigrh/downloadArquivo?idArquivo={id}&key={key}"

MONTHS_PT: Tuple[str, ...] = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

EXTRACTORS = ("pdftotext", "pymupdf")

@dataclass(slots=True)
class Config:
    intake_dir: str = "in"                       # PDFs waiting to be catalogued
    archive_dir: str = "old"                     # accepted PDFs end up here
    catalog_path: Optional[str] = "out/entries.json"
    extension: str = ".pdf"
    markers: Tuple[str, ...] = field(default=DEFAULT_MARKERS)
    extractor: str = "pdftotext"
    pdftotext_cmd: str = "pdftotext"
    link_template: str = LINK_TEMPLATE
    keep_untitled: bool = True                   # False: leave untitled PDFs in intake


def normalize_extension(ext: str | None) -> str:
    if not ext:
        return ".pdf"
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"
