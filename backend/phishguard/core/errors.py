# Name: errors.py
# Description: Error taxonomy for a single email analysis
# Date: 2026-10-16

# Shown to the user for every failed analysis, whatever the cause
USER_ERROR_MESSAGE = "Failed to analyze email. Please try again later."


class AnalysisError(Exception):
    """Base class for failures scoped to one analyze invocation."""


class TransportError(AnalysisError):
    """The generative service could not be reached or returned a service-level failure."""


class ContractViolationError(AnalysisError):
    """The service answered, but the payload does not conform to the response schema."""
