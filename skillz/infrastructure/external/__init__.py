"""
External integrations package.
"""

from .career_client import CareerApiClient
from .http_client import HTTPClient

__all__ = ["CareerApiClient", "HTTPClient"]
