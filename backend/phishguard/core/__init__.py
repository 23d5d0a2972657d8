# Name: __init__.py
# Description: Core module exports
# Date: 2026-10-16

from phishguard.core.config import (
    settings,
    get_settings,
    API_VERSION,
    HISTORY_LIMIT,
    PREVIEW_LENGTH,
    PREVIEW_ELLIPSIS,
)
from phishguard.core.errors import (
    AnalysisError,
    TransportError,
    ContractViolationError,
    USER_ERROR_MESSAGE,
)
from phishguard.core.security import (
    mask_token,
    mask_pii_in_text,
    safe_log_preview,
)

__all__ = [
    "settings",
    "get_settings",
    "API_VERSION",
    "HISTORY_LIMIT",
    "PREVIEW_LENGTH",
    "PREVIEW_ELLIPSIS",
    "AnalysisError",
    "TransportError",
    "ContractViolationError",
    "USER_ERROR_MESSAGE",
    "mask_token",
    "mask_pii_in_text",
    "safe_log_preview",
]
