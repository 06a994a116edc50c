# pdf_catalog/services/normalizer.py
from __future__ import annotations
import re
from typing import List

# pdftotext on some institutional PDFs emits "R E S O L U Ç Ã O  N º  1 2":
# one space between glyphs, two or more between words.
_WIDE_GAP = re.compile(r"\s{2,}")
_GLYPH_GAP = re.compile(r"(?<=\S)\s(?=\S)")
# a line made only of single glyphs: "R E S O L U Ç Ã O"
_GLYPH_ONLY = re.compile(r"^\s*\S(\s\S)+\s*$")

_LINE_BREAKS = "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


def _collapse_once(line: str) -> str:
    if not (_WIDE_GAP.search(line) or _GLYPH_ONLY.match(line)):
        return line
    line = _GLYPH_GAP.sub("", line)
    return _WIDE_GAP.sub(" ", line)


def normalize_line(line: str) -> str:
    # "A  B" collapses to "A B", which is itself glyph-only; repeat until stable.
    # every pass that changes the line shortens it
    while True:
        out = _collapse_once(line)
        if out == line:
            return out
        line = out


def normalize_lines(text: str) -> List[str]:
    return [normalize_line(ln) for ln in text.splitlines()]


def normalize(text: str) -> str:
    """Collapse PDF-to-text spacing artifacts line by line.

    Line order and line count are preserved, including a trailing line break.
    """
    out = "\n".join(normalize_lines(text))
    if text and text[-1] in _LINE_BREAKS:
        out += "\n"
    return out
