from __future__ import annotations


class CrptClientError(Exception):
    """Base class for all errors raised by crpt_client."""


class InvalidConfiguration(CrptClientError, ValueError):
    """Raised at construction time for unusable limiter or client settings."""


class InvalidArgument(CrptClientError, ValueError):
    """Raised when call-site input is missing or blank. No permit is consumed."""


class PreconditionNotMet(CrptClientError, RuntimeError):
    """Raised when a call is made before the auth token has been configured."""


class ControllerClosed(CrptClientError, RuntimeError):
    """Raised by acquire() once the rate limiter has been closed."""


class SubmissionFailed(CrptClientError):
    """The remote API rejected the document or could not be reached.

    The permit used for the attempt is not returned to the rate limiter.
    """

    def __init__(self, message: str, *, status_code: int | None = None, detail: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
