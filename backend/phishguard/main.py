# Load environment variables from .env file
from pathlib import Path
from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv

# Look for .env in backend/ first, then in parent directory
env_path = Path(__file__).parent.parent / ".env"
if not env_path.exists():
    env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI

from phishguard.routers import ui_router, api_router
from phishguard.core.config import settings, API_VERSION
from phishguard.services.gemini_service import initialize_gemini, get_gemini_status, get_classifier
from phishguard.services.session import AnalysisSession

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    
    Initializes the Gemini client and the process-wide session. The server
    starts even without an API key; analyses then fail with the generic error.
    """
    # Startup
    logger.info("Starting PhishGuard...")
    
    gemini_ready = initialize_gemini()
    if gemini_ready:
        logger.info("Gemini AI analysis: ENABLED")
    else:
        logger.info("Gemini AI analysis: DISABLED (analyses will fail until GEMINI_API_KEY is set)")
    
    if getattr(app.state, "session", None) is None:
        app.state.session = AnalysisSession(get_classifier())
    
    logger.info("PhishGuard ready")
    
    yield
    
    # Shutdown
    logger.info("Shutting down PhishGuard...")


app = FastAPI(
    title="PhishGuard AI",
    description="AI-assisted phishing email analysis",
    version=API_VERSION,
    lifespan=lifespan,
)

# ---------- Routers ----------

app.include_router(ui_router)
app.include_router(api_router)

# ---------- Status Endpoints ----------


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "ok"}


@app.get("/status")
def status():
    """Detailed status endpoint showing feature availability."""
    gemini_status = get_gemini_status()
    return {
        "status": "ok",
        "api_version": API_VERSION,
        "environment": settings.environment,
        "features": {
            "gemini_ai_analysis": gemini_status["available"],
        },
        "gemini": gemini_status,
    }
