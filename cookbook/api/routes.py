# cookbook/api/routes.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from cookbook.api.schemas import EntryIn, ParseRequest, ParseResponse, RecipeSummaryResponse
from cookbook.core.config import PARSE_FAILURE_DETAIL
from cookbook.domain.errors import BlankName

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state
# -------------------------
def _from_state(request: Request, attr: str):
    obj = getattr(request.app.state, attr, None)
    if obj is None:
        raise RuntimeError(f"{attr} not initialized. Check app startup wiring.")
    return obj


def get_parse_uc(request: Request):
    return _from_state(request, "parse_uc")


def get_add_entry_uc(request: Request):
    return _from_state(request, "add_entry_uc")


def get_entry_uc(request: Request):
    return _from_state(request, "get_entry_uc")


def get_summary_uc(request: Request):
    return _from_state(request, "summary_uc")


# -------------------------
# /parse
# -------------------------
@router.post("/parse", response_model=ParseResponse)
def parse(req: ParseRequest, parse_uc=Depends(get_parse_uc)) -> Any:
    try:
        return {"msg": parse_uc(req.input)}
    except BlankName:
        return PlainTextResponse(PARSE_FAILURE_DETAIL, status_code=400)


# -------------------------
# /entry
# -------------------------
@router.post("/entry")
def add_entry(req: EntryIn, add_entry_uc=Depends(get_add_entry_uc)) -> Any:
    try:
        add_entry_uc(req.model_dump())
        return {}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /entry error")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/entry")
def get_entry(name: str = Query(...), entry_uc=Depends(get_entry_uc)) -> Any:
    try:
        return entry_uc(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# -------------------------
# /summary
# -------------------------
@router.get("/summary", response_model=RecipeSummaryResponse)
def summary(name: str = Query(...), summary_uc=Depends(get_summary_uc)) -> Any:
    try:
        return summary_uc(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecursionError:
        log.exception("Recipe nesting too deep: %s", name)
        raise HTTPException(status_code=400, detail=f"Recipe nesting too deep: {name}")
    except Exception as e:
        log.exception("Processing /summary error")
        raise HTTPException(status_code=500, detail=str(e))
