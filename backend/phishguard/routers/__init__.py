# Name: __init__.py
# Description: Export all routers for convenient importing
# Date: 2026-10-16

from phishguard.routers.ui_router import router as ui_router
from phishguard.routers.api_router import router as api_router

__all__ = ["ui_router", "api_router"]
