from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..config.tokens import mask_token
from ..core.domain.enums import TimeUnit
from ..core.usecases.create_document import CreateDocumentUseCase
from ..infra.credential_store import InMemoryCredentialStore
from ..infra.crpt_submission import CrptDocumentSubmitter
from ..infra.http_client import HttpClient
from ..infra.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


def rate_limiter_resource(request_limit, time_unit, window_seconds):
	window = window_seconds if window_seconds is not None else TimeUnit(time_unit).seconds
	logger.info(f"Initializing rate limiter: {request_limit} requests per {window:g}s")
	with FixedWindowRateLimiter(window_seconds=window, capacity=request_limit) as limiter:
		yield limiter
	logger.debug("Rate limiter stopped")


def http_client_resource(timeout_seconds):
	logger.debug("Initializing HTTP client")
	with HttpClient(timeout_seconds=timeout_seconds) as client:
		yield client
	logger.debug("HTTP client closed")


def credential_store_factory(auth_token):
	if auth_token:
		logger.info(f"Auth token configured: {mask_token(auth_token)}")
	else:
		logger.info("No auth token configured yet - call set_auth_token() before creating documents")
	return InMemoryCredentialStore(auth_token)


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	# One limiter per container; stopped on shutdown_resources()
	rate_limiter = providers.Resource(
		rate_limiter_resource,
		request_limit=config.request_limit,
		time_unit=config.time_unit,
		window_seconds=config.window_seconds,
	)

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
	)

	credentials = providers.ThreadSafeSingleton(credential_store_factory, auth_token=config.auth_token)

	submitter = providers.Factory(CrptDocumentSubmitter, http_client=http_client, base_url=config.base_url)

	create_document_uc = providers.ThreadSafeSingleton(
		CreateDocumentUseCase,
		rate_limiter=rate_limiter,
		submitter=submitter,
		credentials=credentials,
	)
