# Name: presentation.py
# Description: Display-only values derived from analysis results
# Date: 2026-10-16
#
# Nothing here feeds back into the analysis: these are fixed lookups and
# formatting helpers used by the templates and the JSON API.

import logging
from datetime import datetime

import bleach
import markdown

from phishguard.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)


# =============================================================================
# VERDICT DISPLAY
# =============================================================================

# Fixed "security score" shown per verdict. This is not a computed metric.
VERDICT_SCORES = {
    True: 24,
    False: 98,
}

VERDICT_LABELS = {
    True: "Phishing Detected",
    False: "Likely Legitimate",
}


def security_score(result: AnalysisResult) -> int:
    """
    Security score displayed next to the verdict.
    
    Examples:
        phishing verdict     → 24
        legitimate verdict   → 98
    """
    return VERDICT_SCORES[result.is_phishing]


def verdict_label(result: AnalysisResult) -> str:
    return VERDICT_LABELS[result.is_phishing]


# =============================================================================
# RISK BADGES
# =============================================================================

RISK_BADGE_CLASSES = {
    "High": "badge-high",
    "Medium": "badge-medium",
    "Low": "badge-low",
}

DEFAULT_BADGE_CLASS = "badge-neutral"


def risk_badge_class(level: str) -> str:
    """
    CSS class for a risk level badge.
    
    Mapping:
        - "High"   → "badge-high"
        - "Medium" → "badge-medium"
        - "Low"    → "badge-low"
        - anything else → "badge-neutral"
    """
    return RISK_BADGE_CLASSES.get(level, DEFAULT_BADGE_CLASS)


# =============================================================================
# MARKDOWN RENDERING
# =============================================================================

# Safe HTML tags for the technical report
SAFE_TAGS = [
    'p', 'br', 'strong', 'b', 'em', 'i', 'ul', 'ol', 'li',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'blockquote', 'pre', 'code',
    'a', 'table', 'thead', 'tbody', 'tr', 'td', 'th', 'hr',
]

SAFE_ATTRIBUTES = {
    'a': ['href', 'title'],
}

SAFE_PROTOCOLS = ['http', 'https', 'mailto']


def render_markdown(text: str) -> str:
    """
    Render model-written Markdown to sanitized HTML.
    
    The model output is untrusted, so the rendered HTML is filtered to a
    small allow-list of tags before it reaches the page.
    
    Args:
        text: Markdown source
        
    Returns:
        Safe HTML fragment
    """
    if not text:
        return ""
    
    html_content = markdown.markdown(text, extensions=['fenced_code', 'tables'])
    return bleach.clean(
        html_content,
        tags=SAFE_TAGS,
        attributes=SAFE_ATTRIBUTES,
        protocols=SAFE_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


# =============================================================================
# HISTORY DISPLAY
# =============================================================================

def format_timestamp(timestamp: datetime) -> str:
    """Local time of day, e.g. '14:03:27'."""
    return timestamp.astimezone().strftime("%H:%M:%S")


# =============================================================================
# STATIC INFORMATION PANEL
# =============================================================================

SECURITY_TIPS = (
    "Always verify the sender's email address carefully.",
    "Don't click links in unexpected emails.",
    "Be wary of urgent or threatening language.",
    "Use multi-factor authentication (MFA) everywhere.",
)

LEARN_MORE_URL = "https://www.cisa.gov/news-events/news/avoiding-social-engineering-and-phishing-attacks"
