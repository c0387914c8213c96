"""Data models and exceptions for operator-facing notices."""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class NoticeError(Exception):
    """Base exception for notice-related errors."""

    pass


class NoticeDeliveryError(NoticeError):
    """Raised when a notice cannot be handed to the reporting service."""

    pass


class NoticeTemplateError(NoticeError):
    """Raised when rendering notices for a pull request body fails."""

    pass


class NoticeMode(str, Enum):
    """Severity of a notice."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class Notice(BaseModel):
    """A single warning surfaced to the operator.

    Notices are immutable once built. The same content is carried in two
    renderings: ``message`` for log lines and job warnings, ``markdown`` for
    pull request descriptions.

    Attributes:
        mode: Severity (only WARN is produced for deprecations)
        type: Machine-readable tag, e.g. "bundler_deprecated_warn"
        package_manager_name: Ecosystem the notice is about
        title: Short human-readable title
        message: Plain-text body
        markdown: GitHub alert block with the same content as message
    """

    mode: NoticeMode = Field(..., description="Notice severity")
    type: str = Field(..., min_length=1, description="Machine-readable notice type")
    package_manager_name: str = Field(..., min_length=1, description="Originating package manager")
    title: str = Field(..., description="Short title")
    message: str = Field(..., description="Plain-text body")
    markdown: str = Field(..., description="Markdown rendering of the message")

    model_config = {"frozen": True, "use_enum_values": True}

    def to_dict(self) -> Dict[str, str]:
        """Return the notice as a plain dictionary."""
        return self.model_dump()
