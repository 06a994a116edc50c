import stat
import sys

import fitz
import pytest

from pdf_catalog.config import Config
from pdf_catalog.domain.errors import ExtractionFailure
from pdf_catalog.services.text_extractor import PdfToTextExtractor, PyMuPDFExtractor, build_extractor


def fake_cmd(tmp_path, body):
    script = tmp_path / "fake-pdftotext"
    script.write_text("#!/bin/sh\n" + body + "\n")
    script.chmod(script.stat().st_mode | stat.S_IEXEC)
    return str(script)


posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="shell script converter")


@posix_only
def test_pdftotext_reads_stdout(tmp_path):
    cmd = fake_cmd(tmp_path, 'printf "RESOLU\\303\\207\\303\\203O N 1\\n"')
    assert PdfToTextExtractor(cmd).extract(tmp_path / "1_a.pdf") == "RESOLUÇÃO N 1\n"


@posix_only
def test_pdftotext_nonzero_exit(tmp_path):
    cmd = fake_cmd(tmp_path, "exit 3")
    with pytest.raises(ExtractionFailure) as exc:
        PdfToTextExtractor(cmd).extract(tmp_path / "1_a.pdf")
    assert exc.value.returncode == 3


def test_pdftotext_missing_binary(tmp_path):
    with pytest.raises(ExtractionFailure):
        PdfToTextExtractor(str(tmp_path / "no-such-binary")).extract(tmp_path / "1_a.pdf")


def test_pymupdf_reads_text_layer(tmp_path):
    path = tmp_path / "1_a.pdf"
    doc = fitz.open()
    doc.new_page().insert_text((72, 72), "Cronograma 2024")
    doc.new_page().insert_text((72, 72), "12/01/2023")
    doc.save(str(path))
    doc.close()

    text = PyMuPDFExtractor().extract(path)
    assert "Cronograma 2024" in text
    assert text.index("Cronograma 2024") < text.index("12/01/2023")


def test_pymupdf_rejects_garbage(tmp_path):
    path = tmp_path / "1_a.pdf"
    path.write_bytes(b"not a pdf at all")
    with pytest.raises(ExtractionFailure):
        PyMuPDFExtractor().extract(path)


def test_build_extractor():
    assert isinstance(build_extractor(Config(extractor="pymupdf")), PyMuPDFExtractor)
    ex = build_extractor(Config(pdftotext_cmd="/opt/poppler/pdftotext"))
    assert isinstance(ex, PdfToTextExtractor) and ex.cmd == "/opt/poppler/pdftotext"
    with pytest.raises(ValueError):
        build_extractor(Config(extractor="ocr"))
