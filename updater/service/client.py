"""Reporting service interface and its HTTP implementation.

The reporting service records job-level warnings so they can be shown to
operators after the update job finishes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from updater.config.environment import EnvironmentConfig
from updater.config.models import AppConfig
from updater.logging import get_logger

from .exceptions import ServiceHTTPError, ServiceTimeoutError

logger = get_logger(__name__, component="service")


class ReportingService(ABC):
    """Anything notices can be reported to."""

    @abstractmethod
    def record_update_job_warn(
        self, warn_type: str, warn_title: str, warn_message: str
    ) -> None:
        """Record a warning against the running update job.

        Raises:
            ServiceError: If the warning could not be recorded
        """


class ApiClient(ReportingService):
    """requests-based client for the update job API.

    Each call is a single blocking request bounded by ``timeout``. Failed
    requests are not retried.

    Attributes:
        api_url: Base URL of the API (no trailing slash)
        job_id: Identifier of the running update job
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        api_url: str,
        job_id: str,
        job_token: Optional[str] = None,
        timeout: int = 30,
        user_agent: str = "dependabot-updater/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_url:
            raise ValueError("api_url cannot be empty")
        if not job_id:
            raise ValueError("job_id cannot be empty")

        self.api_url = api_url.rstrip("/")
        self.job_id = job_id
        self.timeout = timeout

        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": user_agent})
        if job_token:
            self._session.headers.update({"Authorization": job_token})

    @classmethod
    def from_config(cls, app_config: AppConfig, env_config: EnvironmentConfig) -> "ApiClient":
        """Build a client from loaded configuration."""
        return cls(
            api_url=env_config.api_url,
            job_id=env_config.job_id,
            job_token=env_config.job_token,
            timeout=app_config.api.timeout,
            user_agent=app_config.api.user_agent,
        )

    def record_update_job_warn(
        self, warn_type: str, warn_title: str, warn_message: str
    ) -> None:
        url = f"{self.api_url}/update_jobs/{self.job_id}/record_update_job_warning"
        payload = {
            "data": {
                "warn-type": warn_type,
                "warn-title": warn_title,
                "warn-description": warn_message,
            }
        }
        self._post(url, payload)

    def _post(self, url: str, payload: Dict[str, Any]) -> None:
        """POST a JSON payload, mapping failures to ServiceError subclasses.

        Raises:
            ServiceHTTPError: On a 4xx/5xx status or connection failure
            ServiceTimeoutError: On request timeout
        """
        logger.debug(
            f"HTTP POST request to {url}",
            extra={"event": "service.request", "url": url, "timeout": self.timeout},
        )

        try:
            response = self._session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ServiceTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            raise ServiceHTTPError(
                f"Request to {url} failed: {e}",
                status_code=0,
                url=url,
            ) from e

        if response.status_code >= 400:
            logger.error(
                f"HTTP {response.status_code} error from {url}",
                extra={
                    "event": "service.request.error",
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise ServiceHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "service.request.succeeded",
                "status_code": response.status_code,
                "url": url,
            },
        )
