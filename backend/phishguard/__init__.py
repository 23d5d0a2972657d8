# Name: __init__.py
# Description: PhishGuard - AI-assisted phishing email analysis

from phishguard.core.config import API_VERSION

__version__ = API_VERSION
