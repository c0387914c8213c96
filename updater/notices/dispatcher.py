"""Deliver notices to the pull request description, the log and the job API.

Notices reach operators in two ways:

- accumulated into a caller-owned list that is later rendered into the
  pull request body (``add_deprecation_notice``)
- sent immediately as a warning log line and a job warning recorded with
  the reporting service (``send_deprecation_notice``)

Sending never raises. A notice that cannot be delivered must not abort the
update job that produced it, so every failure on that path ends up as one
error log line.
"""

import logging
from typing import List, Optional, Union

from updater.logging import get_logger
from updater.logging.context import log_context
from updater.package_managers import PackageManagerBase
from updater.service import ReportingService

from .factory import create_deprecation_notice
from .models import Notice, NoticeDeliveryError

logger = get_logger(__name__, component="notices")


class NoticeDispatcher:
    """Routes package manager deprecation notices to their destinations.

    The dispatcher keeps no state between calls; the notice list belongs to
    the caller and the reporting service is only used while sending.
    """

    def __init__(
        self,
        service: Optional[ReportingService] = None,
        logger_instance: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    ):
        """Initialize the dispatcher.

        Args:
            service: Reporting service for job warnings (required for sending)
            logger_instance: Logger instance (uses module logger if None)
        """
        self.service = service
        self.logger = logger_instance or logger

    def add_deprecation_notice(
        self,
        notices: List[Notice],
        package_manager: Optional[PackageManagerBase],
    ) -> None:
        """Append a deprecation notice to ``notices`` if one applies.

        Nothing is appended when no package manager is given or its version
        is not deprecated. Errors propagate to the caller.
        """
        notice = create_deprecation_notice(package_manager)
        if notice is not None:
            notices.append(notice)

    def send_deprecation_notice(self, package_manager: PackageManagerBase) -> None:
        """Log and record a deprecation warning for the package manager.

        Emits one warning log line with the notice message, then records the
        warning with the reporting service. Any failure while building or
        delivering the notice is logged at error level and swallowed.
        """
        try:
            notice = create_deprecation_notice(package_manager)
            if notice is None:
                return

            with log_context(
                package_manager=notice.package_manager_name, notice_type=notice.type
            ):
                self.logger.warning(
                    notice.message, extra={"event": "notice.deprecation.warn"}
                )
                self._record_warning(notice)
        except Exception as e:
            self._log_failure(e)

    def _log_failure(self, error: Exception) -> None:
        try:
            self.logger.error(
                f"Failed to send package manager deprecation notice warning: {error}",
                extra={"event": "notice.send.failure", "error_type": type(error).__name__},
            )
        except Exception:
            # The configured sink is broken; fall back to the handler of last resort
            logging.lastResort.handle(
                logging.makeLogRecord(
                    {
                        "name": __name__,
                        "levelno": logging.ERROR,
                        "levelname": "ERROR",
                        "msg": "Failed to send package manager deprecation notice warning: %s",
                        "args": (error,),
                    }
                )
            )

    def _record_warning(self, notice: Notice) -> None:
        if self.service is None:
            raise NoticeDeliveryError("no reporting service configured")

        self.service.record_update_job_warn(
            warn_type=notice.type,
            warn_title=notice.title,
            warn_message=notice.message,
        )
