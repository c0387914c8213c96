"""Environment variable loading and validation."""

import os
from typing import Optional
from urllib.parse import urlparse

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        api_url: str,
        job_id: str,
        job_token: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.job_id = job_id
        self.job_token = job_token
        self.log_level = log_level


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Required environment variables:
    - DEPENDABOT_API_URL: Base URL of the job reporting API
    - DEPENDABOT_JOB_ID: Identifier of the running update job

    Optional environment variables:
    - DEPENDABOT_JOB_TOKEN: Token sent as the Authorization header
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    errors = []

    api_url = os.getenv("DEPENDABOT_API_URL")
    job_id = os.getenv("DEPENDABOT_JOB_ID")
    job_token = os.getenv("DEPENDABOT_JOB_TOKEN")
    log_level = os.getenv("LOG_LEVEL")

    if not api_url:
        errors.append("Missing required environment variable: DEPENDABOT_API_URL")
    else:
        parsed = urlparse(api_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(
                f"Invalid DEPENDABOT_API_URL: '{api_url}'. Must be an http(s) URL."
            )

    if not job_id:
        errors.append("Missing required environment variable: DEPENDABOT_JOB_ID")

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and fill in the job details",
                "Ensure all required environment variables are set",
            ],
        )

    return EnvironmentConfig(
        api_url=api_url,
        job_id=job_id,
        job_token=job_token,
        log_level=log_level.upper() if log_level else None,
    )
