# Name: __init__.py
# Description: Export all models for convenient importing

from phishguard.models.analysis import (
    RiskLevel,
    RISK_LEVELS,
    AnalysisResult,
    HistoryItem,
    AnalyzeRequest,
    SessionSnapshot,
    make_preview,
)

__all__ = [
    "RiskLevel",
    "RISK_LEVELS",
    "AnalysisResult",
    "HistoryItem",
    "AnalyzeRequest",
    "SessionSnapshot",
    "make_preview",
]
