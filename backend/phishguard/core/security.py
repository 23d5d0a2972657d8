# Name: security.py
# Description: Security utilities for logging and data protection
# Date: 2026-10-16

import re
import logging

from phishguard.core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# PII PATTERNS
# =============================================================================

# Email pattern
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')

# Phone patterns (various formats)
PHONE_PATTERN = re.compile(r'\b(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}\b')

# SSN pattern
SSN_PATTERN = re.compile(r'\b\d{3}[-.\s]?\d{2}[-.\s]?\d{4}\b')

# Credit card patterns (basic)
CC_PATTERN = re.compile(r'\b(?:\d{4}[-.\s]?){3}\d{4}\b')


# =============================================================================
# PII MASKING FUNCTIONS
# =============================================================================

def mask_token(token: str, visible_chars: int = 4) -> str:
    """
    Mask an API key or token for safe logging.
    
    Example: "AIzaSyD1234..." -> "AIza..."
    """
    if not token:
        return token
    
    if len(token) <= visible_chars:
        return token[:2] + '***'
    
    return token[:visible_chars] + '...'


def mask_pii_in_text(text: str) -> str:
    """
    Mask common PII patterns in a text string.
    
    Args:
        text: Text that may contain PII
        
    Returns:
        Text with PII masked
    """
    if not text:
        return text
    
    # Card numbers before phones, a 16-digit run would otherwise match PHONE_PATTERN
    text = CC_PATTERN.sub('[CARD]', text)
    text = EMAIL_PATTERN.sub('[EMAIL]', text)
    text = SSN_PATTERN.sub('[SSN]', text)
    text = PHONE_PATTERN.sub('[PHONE]', text)
    
    return text


# =============================================================================
# SAFE LOGGING HELPERS
# =============================================================================

def safe_log_preview(text: str, max_length: int = 60) -> str:
    """
    Get a safe-to-log excerpt of submitted email text.
    
    Collapses whitespace, masks PII and truncates. In production only the
    length is logged.
    """
    if not text:
        return ""
    
    if settings.is_production:
        return f"[BODY_REDACTED] ({len(text)} chars)"
    
    flattened = " ".join(text.split())
    masked = mask_pii_in_text(flattened)
    if len(masked) > max_length:
        return masked[:max_length] + f'... ({len(text)} chars)'
    return masked
