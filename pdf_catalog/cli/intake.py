# pdf_catalog/cli/intake.py
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import Config, DEFAULT_MARKERS, EXTRACTORS, LINK_TEMPLATE
from ..domain.errors import DirectoryAccessError, SerializationError
from ..io.repository import CatalogStore
from ..io.validators import validate_catalog
from ..services.orchestrator import Pipeline


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Catalogue the PDFs waiting in the intake folder.")
    ap.add_argument("--intake-dir", default="in")
    ap.add_argument("--archive-dir", default="old")
    ap.add_argument("--catalog", default="out/entries.json")
    ap.add_argument("--extension", default=".pdf")
    ap.add_argument("--marker", action="append", dest="markers",
                    help="title marker (repeatable); defaults to %s" % ", ".join(DEFAULT_MARKERS))
    ap.add_argument("--extractor", choices=EXTRACTORS, default="pdftotext")
    ap.add_argument("--pdftotext-cmd", default="pdftotext")
    ap.add_argument("--link-template", default=LINK_TEMPLATE)
    ap.add_argument("--skip-untitled", action="store_true",
                    help="leave PDFs without a title in the intake folder instead of cataloguing them")
    ap.add_argument("--create-folders", action="store_true",
                    help="create the intake, archive and catalog folders if missing")
    ap.add_argument("--json", action="store_true", help="print the run report as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        intake_dir=args.intake_dir,
        archive_dir=args.archive_dir,
        catalog_path=args.catalog,
        extension=args.extension,
        markers=tuple(args.markers) if args.markers else DEFAULT_MARKERS,
        extractor=args.extractor,
        pdftotext_cmd=args.pdftotext_cmd,
        link_template=args.link_template,
        keep_untitled=not args.skip_untitled,
    )


def create_folders(cfg: Config) -> None:
    for folder in (Path(cfg.intake_dir), Path(cfg.archive_dir), Path(cfg.catalog_path).parent):
        if not folder.exists():
            folder.mkdir(parents=True, exist_ok=True)
            print(f"Created '{folder}' folder.")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    cfg = config_from_args(args)
    if args.create_folders:
        create_folders(cfg)

    pipe = Pipeline(cfg, store=CatalogStore(cfg.catalog_path))
    try:
        report = pipe.run()
    except (DirectoryAccessError, SerializationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    issues = validate_catalog(pipe.store.load())
    if issues:
        print(f"Catalog warnings: {issues}")

    if args.json:
        print(json.dumps(report.to_json(), ensure_ascii=False, indent=2))
    else:
        for o in report.outcomes:
            print(f"[{o.path.name}] {o.state}" + (f": {o.reason}" if o.reason else ""))
        print(f"Processed {len(report.outcomes)} files; catalog has {report.catalog_size} entries.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
