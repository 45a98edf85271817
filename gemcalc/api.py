from __future__ import annotations
import logging

from fastapi import FastAPI, Query, HTTPException
from pydantic import BaseModel

from . import __version__
from .gematria import GematriaOverflowError, value

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="gemcalc", version=__version__)

class GematriaOut(BaseModel):
    text: str
    gematria: int

@app.get("/healthz")
def healthz():
    return {"ok": True, "version": __version__}

@app.get("/gematria", response_model=GematriaOut)
def api_gematria(
    text: str = Query(..., min_length=1, description="טקסט בעברית לחישוב גימטריה"),
):
    try:
        v = value(text)
    except GematriaOverflowError as e:
        logger.warning("gematria overflow for input of %d chars (partial=%d)", len(text), e.value)
        raise HTTPException(status_code=422, detail=str(e))
    return GematriaOut(text=text, gematria=v)
