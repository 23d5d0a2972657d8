# Name: dependencies.py
# Description: FastAPI dependencies shared by the routers
# Date: 2026-10-16

from fastapi import Request

from phishguard.services.session import AnalysisSession


async def get_session(request: Request) -> AnalysisSession:
    """Return the process-wide analysis session created at startup."""
    return request.app.state.session
