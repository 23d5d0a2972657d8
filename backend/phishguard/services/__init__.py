# Name: __init__.py
# Description: Export all services for convenient importing
# Date: 2026-10-16

from phishguard.services.gemini_service import (
    initialize_gemini,
    get_gemini_status,
    get_classifier,
    build_prompt,
    build_config,
    parse_analysis_result,
    GeminiClassifier,
)
from phishguard.services.history import HistoryStore
from phishguard.services.session import AnalysisSession
from phishguard.services.presentation import (
    security_score,
    verdict_label,
    risk_badge_class,
    render_markdown,
    format_timestamp,
)

__all__ = [
    # Gemini AI
    "initialize_gemini",
    "get_gemini_status",
    "get_classifier",
    "build_prompt",
    "build_config",
    "parse_analysis_result",
    "GeminiClassifier",
    # Session
    "HistoryStore",
    "AnalysisSession",
    # Presentation
    "security_score",
    "verdict_label",
    "risk_badge_class",
    "render_markdown",
    "format_timestamp",
]
