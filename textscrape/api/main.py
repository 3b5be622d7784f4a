"""FastAPI service for key/value extraction."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, File, HTTPException, UploadFile

from ..config import load_config
from ..errors import UnsupportedFormatError
from ..io.loaders import detect_format
from ..log import configure_logging
from ..pipeline.extract import extract_text

LOGGER = logging.getLogger("textscrape.api")


def _get_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def create_app() -> FastAPI:
    config = load_config()
    io_cfg = config.get("io", {})
    log_dir = _get_env("TEXTSCRAPE_LOG_DIR")
    if log_dir:
        configure_logging("textscrape-api", log_dir, fmt=config.get("logging", {}).get("format", "%(asctime)s - %(message)s"))

    app = FastAPI(title="textscrape API")

    @app.post("/extract")
    async def extract(file: UploadFile = File(...), fmt: str | None = None) -> dict:
        payload = await file.read()
        if not payload:
            raise HTTPException(status_code=400, detail="Empty file payload.")

        encoding = _get_env("TEXTSCRAPE_ENCODING") or io_cfg.get("encoding", "utf-8")
        try:
            text = payload.decode(encoding)
        except UnicodeDecodeError as exc:
            LOGGER.warning("Undecodable upload %s: %s", file.filename, exc)
            raise HTTPException(status_code=400, detail=f"Payload is not valid {encoding} text.") from exc

        try:
            if fmt is None:
                fmt = detect_format(Path(file.filename or ""), io_cfg.get("extensions", {}))
            result = extract_text(text, fmt, source=file.filename)
        except UnsupportedFormatError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return result.to_dict()

    return app


app = create_app()
