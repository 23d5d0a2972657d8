# Name: ui_router.py
# Description: Router for the server-rendered browser UI
# Date: 2026-10-16

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from phishguard.core.config import settings
from phishguard.routers.dependencies import get_session
from phishguard.services.gemini_service import get_gemini_status
from phishguard.services.presentation import (
    LEARN_MORE_URL,
    SECURITY_TIPS,
    format_timestamp,
    render_markdown,
    risk_badge_class,
    security_score,
    verdict_label,
)
from phishguard.services.session import AnalysisSession

logger = logging.getLogger(__name__)

INPUT_ANCHOR = "email-input"

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["markdown"] = render_markdown
templates.env.filters["time_of_day"] = format_timestamp
templates.env.filters["risk_badge"] = risk_badge_class

router = APIRouter(
    prefix="",
    tags=["ui"],
)


def _redirect_home(anchor: Optional[str] = None) -> RedirectResponse:
    url = f"/#{anchor}" if anchor else "/"
    return RedirectResponse(url=url, status_code=303)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, session: AnalysisSession = Depends(get_session)):
    """Render the analysis page from the current session state."""
    result = session.result
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "session": session,
            "result": result,
            "score": security_score(result) if result is not None else None,
            "verdict": verdict_label(result) if result is not None else None,
            "history": session.history.items(),
            "threats_detected": session.history.phishing_count(),
            "scroll_to_result": session.consume_scroll_cue(),
            "scroll_delay_ms": settings.scroll_delay_ms,
            "gemini": get_gemini_status(),
            "tips": SECURITY_TIPS,
            "learn_more_url": LEARN_MORE_URL,
        },
    )


@router.post("/analyze")
async def analyze_form(
    email_text: str = Form(""),
    session: AnalysisSession = Depends(get_session),
):
    """Analyze the submitted email, then redisplay the page."""
    if session.analyzing:
        logger.info("[UI] Submission ignored - analysis in progress")
        return _redirect_home()
    
    if not email_text.strip():
        session.set_input(email_text)
        return _redirect_home()
    
    await session.analyze(email_text)
    return _redirect_home()


@router.post("/clear")
async def clear_form(session: AnalysisSession = Depends(get_session)):
    """Reset input, result and error."""
    session.clear_all()
    return _redirect_home()


@router.post("/history/{item_id}")
async def select_history_form(item_id: str, session: AnalysisSession = Depends(get_session)):
    """Show a past result again."""
    if not session.select_history(item_id):
        raise HTTPException(status_code=404, detail=f"History item {item_id} not found")
    # Bring the restored input back into view
    return _redirect_home(INPUT_ANCHOR)
