# Name: config.py
# Description: Application configuration and environment variable management
# Date: 2026-10-16

import os
from typing import Optional
from functools import lru_cache


# =============================================================================
# API VERSION - Single source of truth
# =============================================================================
# Versioning policy (Semantic Versioning):
#   - MAJOR: Breaking changes to request/response schemas
#   - MINOR: New features, new optional fields (backward compatible)
#   - PATCH: Bug fixes, documentation updates

API_VERSION = "1.0.0"


# =============================================================================
# SESSION LIMITS
# =============================================================================

# Maximum number of analyses kept in the in-memory history
HISTORY_LIMIT = 10

# Number of characters of the submitted email kept as the history preview
PREVIEW_LENGTH = 100
PREVIEW_ELLIPSIS = "..."

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """
    Application settings loaded from environment variables.
    
    Attributes:
        gemini_api_key: Google Gemini API key for AI analysis
        gemini_model: Model name used for classification requests
        gemini_timeout: Optional client-side timeout in seconds (None = SDK default)
        environment: Current environment (development, production)
        scroll_delay_ms: Delay before the UI scrolls a fresh result into view
    """
    
    def __init__(self):
        # Environment
        self.environment: str = os.getenv("ENVIRONMENT", "development")
        
        # Gemini settings
        self.gemini_api_key: Optional[str] = os.getenv("GEMINI_API_KEY")
        self.gemini_model: str = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
        self.gemini_timeout: Optional[float] = _optional_float(os.getenv("GEMINI_TIMEOUT"))
        
        # UI settings
        self.scroll_delay_ms: int = int(os.getenv("SCROLL_DELAY_MS", "100"))
    
    @property
    def is_gemini_configured(self) -> bool:
        """Check if a Gemini API key is available."""
        return bool(self.gemini_api_key)
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Uses lru_cache to avoid re-reading environment variables on every call.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
