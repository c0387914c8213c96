"""Operator-facing notices about package manager deprecations.

- Notice / NoticeMode: the immutable notice record
- create_deprecation_notice: builds a notice from a package manager descriptor
- NoticeDispatcher: accumulates notices for pull requests or sends them
  through the log and the job reporting service
- NoticeRenderer: renders accumulated notices into a pull request body
"""

from .dispatcher import NoticeDispatcher
from .factory import (
    DEPRECATION_TITLE,
    create_deprecation_notice,
    format_supported_versions,
    markdown_from_message,
)
from .models import (
    Notice,
    NoticeDeliveryError,
    NoticeError,
    NoticeMode,
    NoticeTemplateError,
)
from .templates import NoticeRenderer

__all__ = [
    # Dispatch
    "NoticeDispatcher",
    # Models
    "Notice",
    "NoticeMode",
    # Exceptions
    "NoticeError",
    "NoticeDeliveryError",
    "NoticeTemplateError",
    # Factory
    "DEPRECATION_TITLE",
    "create_deprecation_notice",
    "format_supported_versions",
    "markdown_from_message",
    # Rendering
    "NoticeRenderer",
]
