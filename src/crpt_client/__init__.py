"""crpt_client package: app/core/infra/shared.

Expose library-friendly API client at the package level.
"""

from .app.api import AppConfig, CrptClient
from .core.domain.enums import TimeUnit
from .core.domain.models import Description, Document, Product, SubmissionResult
from .core.errors import (
    ControllerClosed,
    CrptClientError,
    InvalidArgument,
    InvalidConfiguration,
    PreconditionNotMet,
    SubmissionFailed,
)

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CrptClient",
    "AppConfig",
    "TimeUnit",
    "Document",
    "Description",
    "Product",
    "SubmissionResult",
    "CrptClientError",
    "InvalidConfiguration",
    "InvalidArgument",
    "PreconditionNotMet",
    "ControllerClosed",
    "SubmissionFailed",
]
