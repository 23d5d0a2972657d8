# Name: api_router.py
# Description: JSON API exposing the analysis session
# Date: 2026-10-16

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from phishguard.models.analysis import AnalyzeRequest, SessionSnapshot
from phishguard.routers.dependencies import get_session
from phishguard.services.session import AnalysisSession

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["analysis"],
)


@router.get("/session", response_model=SessionSnapshot)
async def get_session_state(session: AnalysisSession = Depends(get_session)) -> SessionSnapshot:
    """Current input, result, error, in-flight flag and history."""
    return session.snapshot()


@router.post("/analyze", response_model=SessionSnapshot)
async def analyze_endpoint(
    request: AnalyzeRequest,
    session: AnalysisSession = Depends(get_session),
) -> SessionSnapshot:
    """
    Analyze an email for phishing.

    A failed analysis is reported through the snapshot's error field,
    not through the HTTP status.
    """
    if session.analyzing:
        raise HTTPException(status_code=409, detail="An analysis is already in progress")
    if not request.email_text.strip():
        raise HTTPException(status_code=422, detail="Email text must not be empty")
    
    start_time = time.perf_counter()
    logger.info(f"[REQUEST] analyze chars={len(request.email_text)}")
    
    await session.analyze(request.email_text)
    snapshot = session.snapshot()
    
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"[RESPONSE] analyze ok={snapshot.result is not None} "
        f"history={snapshot.total_scanned} elapsed={elapsed_ms:.0f}ms"
    )
    return snapshot


@router.post("/clear", response_model=SessionSnapshot)
async def clear_endpoint(session: AnalysisSession = Depends(get_session)) -> SessionSnapshot:
    """Reset input, result and error. History is kept."""
    session.clear_all()
    return session.snapshot()


@router.post("/history/{item_id}/select", response_model=SessionSnapshot)
async def select_history_endpoint(
    item_id: str,
    session: AnalysisSession = Depends(get_session),
) -> SessionSnapshot:
    """Restore a past result as the current view."""
    if not session.select_history(item_id):
        raise HTTPException(status_code=404, detail=f"History item {item_id} not found")
    return session.snapshot()
