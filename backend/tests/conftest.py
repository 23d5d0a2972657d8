# Name: conftest.py
# Description: Shared fixtures - fake classifiers and a test client bound to a fresh session

import asyncio
import json

import pytest
from fastapi.testclient import TestClient

from phishguard.core.errors import TransportError
from phishguard.main import app
from phishguard.services.session import AnalysisSession


PHISHING_PAYLOAD = {
    "isPhishing": True,
    "riskLevel": "High",
    "suspiciousIndicators": ["urgent language", "shortened link"],
    "recommendation": "Do not click.",
    "summary": "Likely phishing.",
    "technicalDetails": "...",
}

LEGITIMATE_PAYLOAD = {
    "isPhishing": False,
    "riskLevel": "Low",
    "suspiciousIndicators": [],
    "recommendation": "No action needed.",
    "summary": "Routine newsletter.",
    "technicalDetails": "## Findings\n\n- Sender domain matches the organization",
}


class FakeClassifier:
    """Returns a canned response (or raises) and records every prompt it receives."""
    
    def __init__(self, response=None, error=None):
        self.response = json.dumps(PHISHING_PAYLOAD) if response is None else response
        self.error = error
        self.calls = []
    
    async def classify(self, contents: str) -> str:
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return self.response


class BlockingClassifier(FakeClassifier):
    """Holds each call open until release is set."""
    
    def __init__(self, response=None):
        super().__init__(response=response)
        self.release = asyncio.Event()
    
    async def classify(self, contents: str) -> str:
        self.calls.append(contents)
        await self.release.wait()
        return self.response


@pytest.fixture
def classifier():
    return FakeClassifier()


@pytest.fixture
def failing_classifier():
    return FakeClassifier(error=TransportError("connection reset"))


@pytest.fixture
def session(classifier):
    return AnalysisSession(classifier)


@pytest.fixture
def client(session):
    app.state.session = session
    with TestClient(app) as test_client:
        yield test_client
    app.state.session = None
