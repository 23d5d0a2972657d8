# Name: analysis.py
# Description: Pydantic models for analysis results, history and session state
# Date: 2026-10-16

import uuid
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from phishguard.core.config import PREVIEW_LENGTH, PREVIEW_ELLIPSIS


RiskLevel = Literal["Low", "Medium", "High"]

RISK_LEVELS: tuple[str, ...] = ("Low", "Medium", "High")


class AnalysisResult(BaseModel):
    """
    Structured verdict returned by the generative model for one email.
    
    Validation is strict: every field is required, no type coercion is
    performed and unknown fields are rejected. Fields are only accepted under
    their camelCase wire names.
    
    Attributes:
        is_phishing: Whether the email is likely a phishing attempt
        risk_level: Overall risk ('Low', 'Medium', 'High')
        suspicious_indicators: Evidence items, in the order the model ranked them
        recommendation: Guidance for the user
        summary: Short explanation of the findings
        technical_details: Long-form explanation (Markdown)
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="forbid",
    )
    
    is_phishing: StrictBool
    risk_level: RiskLevel
    suspicious_indicators: tuple[StrictStr, ...]
    recommendation: StrictStr
    summary: StrictStr
    technical_details: StrictStr


def make_preview(email_text: str) -> str:
    """First PREVIEW_LENGTH characters of the email, with an ellipsis if it was longer."""
    if len(email_text) > PREVIEW_LENGTH:
        return email_text[:PREVIEW_LENGTH] + PREVIEW_ELLIPSIS
    return email_text


class HistoryItem(BaseModel):
    """
    A past analysis kept in the in-memory history.
    
    Attributes:
        id: Unique identifier generated at creation
        timestamp: Creation instant (UTC)
        email_preview: Truncated copy of the submitted email
        result: The analysis result
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
    
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    email_preview: str
    result: AnalysisResult
    
    @classmethod
    def create(cls, email_text: str, result: AnalysisResult) -> "HistoryItem":
        return cls(email_preview=make_preview(email_text), result=result)


class AnalyzeRequest(BaseModel):
    """Request payload for the JSON analyze endpoint."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    email_text: str


class SessionSnapshot(BaseModel):
    """
    Serializable view of the session state.
    
    Attributes:
        input_text: Current contents of the input area
        result: Result currently on display, if any
        error: User-facing error message, if the last analysis failed
        analyzing: Whether an analysis is in flight
        history: Past analyses, newest first
        total_scanned: Number of analyses in history
        threats_detected: Number of history entries flagged as phishing
        security_score: Fixed display score for the current verdict, if any
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    input_text: str
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    analyzing: bool = False
    history: list[HistoryItem]
    total_scanned: int
    threats_detected: int
    security_score: Optional[int] = None
