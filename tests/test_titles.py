from pdf_catalog.services.titles import TitleDetector, detect_title

MARKERS = ("RESOLUÇÃO", "Cronograma", "Calendário", "Calendario")


def test_first_matching_line_wins():
    text = "UNIVERSIDADE DE BRASÍLIA\nCronograma de provas\nRESOLUÇÃO Nº 1/2023\n"
    assert detect_title(text, MARKERS) == "Cronograma de provas"


def test_marker_order_does_not_rank_lines():
    text = "Calendario 2024\nRESOLUÇÃO Nº 2"
    assert detect_title(text, ("RESOLUÇÃO", "Calendario")) == "Calendario 2024"


def test_match_is_case_sensitive():
    assert detect_title("resolução do conselho", MARKERS) is None


def test_no_marker_no_title():
    assert detect_title("nothing to see\nhere", MARKERS) is None
    assert detect_title("RESOLUÇÃO", ()) is None


def test_detector_uses_configured_markers():
    assert TitleDetector(["EDITAL"]).detect("x\nEDITAL 3/2024\nRESOLUÇÃO") == "EDITAL 3/2024"
