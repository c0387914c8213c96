"""Exceptions raised by the job reporting service client."""


class ServiceError(Exception):
    """Base exception for reporting service failures."""

    pass


class ServiceHTTPError(ServiceError):
    """The reporting API answered with a 4xx/5xx status or could not be reached."""

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ServiceTimeoutError(ServiceError):
    """A request to the reporting API did not complete within the timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url
