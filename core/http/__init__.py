"""
HTTP Client Module

Synchronous HTTP client for fetching remote key listings.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]
