from __future__ import annotations

from pydantic import ValidationError

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import TimeUnit
from ..core.domain.models import Document, SubmissionResult
from ..core.errors import InvalidConfiguration


class CrptClient:
    """Thread-safe client for the Chestny ZNAK document API with built-in rate limiting.

    At most ``request_limit`` documents are submitted per window; callers over
    the limit block until the next window opens. Every attempt uses up a
    permit, including attempts the API rejects.

    Example:
        # 5 requests per minute
        with CrptClient(time_unit=TimeUnit.MINUTES, request_limit=5) as client:
            client.set_auth_token("your_valid_auth_token_here")
            document = Document(doc_id="...", products=(Product(...),))
            client.create_document(document, "base64_detached_signature", "shoes")

        # Settings from CRPT_CLIENT_* environment variables
        client = CrptClient()
        try:
            client.create_document(document, signature, "clothes")
        finally:
            client.close()
    """

    def __init__(
        self,
        *,
        time_unit: TimeUnit | str | None = None,
        request_limit: int | None = None,
        window_seconds: float | None = None,
        auth_token: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
    ):
        """Initialize the client and start its rate limiter.

        Args:
            time_unit: Window length as one unit (seconds, minutes, hours, days).
                       If None, uses CRPT_CLIENT_TIME_UNIT or default (seconds).
            request_limit: Maximum submissions per window. Must be positive.
                           If None, uses CRPT_CLIENT_REQUEST_LIMIT or default (10).
            window_seconds: Explicit window length in seconds; overrides time_unit.
            auth_token: Optional bearer token. Can also be set later via set_auth_token().
            base_url: Optional API host override.
            timeout_seconds: Optional HTTP timeout override.

        Raises:
            InvalidConfiguration: If request_limit or the window is not positive.
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict: dict[str, object] = {}
        if time_unit is not None:
            config_dict["time_unit"] = time_unit
        if request_limit is not None:
            config_dict["request_limit"] = request_limit
        if window_seconds is not None:
            config_dict["window_seconds"] = window_seconds
        if auth_token is not None:
            config_dict["auth_token"] = auth_token
        if base_url is not None:
            config_dict["base_url"] = base_url
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds

        if config_dict:
            try:
                config = AppConfig(**config_dict)
            except ValidationError as e:
                raise InvalidConfiguration(str(e)) from e
            self._container.config.from_pydantic(config)

        self._container.init_resources()
        self._uc = self._container.create_document_uc()

    def set_auth_token(self, token: str) -> None:
        """Set the bearer token used for API calls. Replaces any previous token."""
        self._uc.set_credential(token)

    def create_document(self, document: Document, signature: str, product_group: str) -> SubmissionResult:
        """Create an LP_INTRODUCE_GOODS document.

        Blocks while the rate limit for the current window is exhausted.

        Args:
            document: The document to submit.
            signature: Detached signature (base64).
            product_group: Product group identifier (e.g., "shoes", "clothes").

        Returns:
            The API response of a successful submission.

        Raises:
            InvalidArgument: If document is None, or signature/product_group is blank.
            PreconditionNotMet: If no auth token has been set.
            ControllerClosed: If the client has been closed.
            SubmissionFailed: If the API returned a non-2xx status or could not be reached.
        """
        return self._uc.execute(document, signature, product_group)

    def close(self) -> None:
        """Stop the rate limiter and release the HTTP connection pool. Idempotent."""
        self._container.shutdown_resources()

    def __enter__(self) -> CrptClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "CrptClient",
    "AppConfig",
]
