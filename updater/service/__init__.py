"""Clients for the remote job reporting service."""

from .client import ApiClient, ReportingService
from .exceptions import ServiceError, ServiceHTTPError, ServiceTimeoutError

__all__ = [
    "ReportingService",
    "ApiClient",
    "ServiceError",
    "ServiceHTTPError",
    "ServiceTimeoutError",
]
