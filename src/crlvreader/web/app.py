"""FastAPI application exposing CRLV extraction."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from crlvreader.config import AppConfig
from crlvreader.errors import READ_FAILURE_MESSAGE, DocumentReadError, ExtractionFailed
from crlvreader.extraction.engine import CrlvExtractor
from crlvreader.extraction.layout import get_layout, layout_names
from crlvreader.ingestion.pdf_loader import decode_base64_document

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="CRLV Reader", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class ParsePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_bytes_base64: str = Field(alias="documentBytesBase64")


def _build_extractor(config: AppConfig) -> CrlvExtractor:
    return CrlvExtractor(
        config.resolve_layout(),
        page_number=config.page_number,
        verify_layout=config.verify_layout,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 422 is reserved for documents without registration data
    LOGGER.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": READ_FAILURE_MESSAGE, "errors": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "layout": AppConfig().layout_name}


@app.get("/layouts")
async def list_layouts() -> dict[str, Any]:
    return {"layouts": {name: get_layout(name).describe() for name in layout_names()}}


@app.post("/crlv/parse")
async def parse_document(payload: ParsePayload) -> Dict[str, Any]:
    config = AppConfig()
    encoded = payload.document_bytes_base64.strip()
    if not encoded:
        raise HTTPException(status_code=400, detail=READ_FAILURE_MESSAGE)

    # base64 inflates by 4/3; reject obviously oversized payloads before decoding
    if len(encoded) * 3 // 4 > config.max_document_bytes + 2:
        raise HTTPException(status_code=413, detail="Document too large")

    try:
        data = decode_base64_document(encoded)
    except DocumentReadError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if len(data) > config.max_document_bytes:
        raise HTTPException(status_code=413, detail="Document too large")

    extractor = _build_extractor(config)
    try:
        document = await asyncio.to_thread(extractor.parse, data)
    except DocumentReadError as exc:
        LOGGER.error("Could not read uploaded document: %s", exc.detail)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ExtractionFailed as exc:
        LOGGER.info("Uploaded document has no registration data")
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {"success": True, "data": document.to_dict()}
