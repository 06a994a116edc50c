from pdf_catalog.domain.catalog import Catalog
from pdf_catalog.domain.record import Record
from pdf_catalog.io.validators import validate_catalog, validate_record
from pdf_catalog.services.factory import make_record_id


def good(title="RESOLUÇÃO 1"):
    return Record(id=make_record_id(title), title=title, date=None, content="texto", link="l")


def test_clean_record_has_no_issues():
    assert validate_record(good()) == []
    assert validate_record(Record(id="", title=None, date=None, content="x", link="l")) == []


def test_record_issues():
    bad = Record(id="deadbeef", title="T", date=None, content=" ", link="")
    issues = validate_record(bad)
    assert "link is empty" in issues
    assert "content is empty" in issues
    assert any("id does not match" in i for i in issues)
    assert validate_record(Record(id="x", title=None, date=None, content="c", link="l")) == [
        "id set on a record without title"
    ]


def test_catalog_duplicate_titles_reported():
    # bypass Catalog.append, as a hand-edited file would
    cat = Catalog(records=[good(), good()])
    issues = validate_catalog(cat)
    assert issues == ["entry 1: duplicate title 'RESOLUÇÃO 1'"]
