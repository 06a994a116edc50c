# api/main.py
from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.responses import JSONResponse
import uvicorn

from pdf_catalog.config import Config, normalize_extension
from pdf_catalog.domain.errors import SerializationError
from pdf_catalog.io.repository import open_store
from pdf_catalog.services.orchestrator import Pipeline
from pdf_catalog.services.text_extractor import TextExtractor


def create_app(cfg: Optional[Config] = None, store=None,
               extractor: Optional[TextExtractor] = None) -> FastAPI:
    cfg = cfg or Config()
    pipe = Pipeline(cfg, store=store if store is not None else open_store(cfg.catalog_path),
                    extractor=extractor)
    app = FastAPI(title="PDF Catalog Intake", version="1.0.0")
    app.state.pipeline = pipe

    @app.post("/extract")
    async def extract_pdf(pdf: UploadFile = File(...)):
        ext = normalize_extension(cfg.extension)
        name = Path(pdf.filename or "").name
        if not name.lower().endswith(ext):
            raise HTTPException(status_code=400, detail=f"File must be a '{ext}' document")

        try:
            catalog = pipe.store.load()
            intake = Path(cfg.intake_dir)
            intake.mkdir(parents=True, exist_ok=True)
            target = intake / name
            target.write_bytes(await pdf.read())

            outcome = pipe.process_file(target, catalog)
            if outcome.accepted:
                pipe.store.save(catalog)
            return JSONResponse(content=outcome.to_json())

        except SerializationError as e:
            logging.exception("Catalog unavailable")
            raise HTTPException(status_code=500, detail=f"Catalog unavailable: {e}")
        except OSError as e:
            logging.exception("Upload failed")
            raise HTTPException(status_code=500, detail=f"Upload failed: {e.__class__.__name__}: {e}")

    @app.get("/entries")
    def list_entries():
        try:
            catalog = pipe.store.load()
        except SerializationError as e:
            logging.exception("Catalog unavailable")
            raise HTTPException(status_code=500, detail=f"Catalog unavailable: {e}")
        return JSONResponse(content=catalog.to_json())

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("pdf_catalog.api.main:app", host="0.0.0.0", port=8000, reload=True)

# uvicorn pdf_catalog.api.main:app --reload --host 0.0.0.0 --port 8000
