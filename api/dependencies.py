import logging
from collections.abc import Callable
from typing import Annotated

import httpx
from fastapi import Depends

from application.services import RateFetcher, fetch_rates
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

RateFetcherFactory = Callable[[str], RateFetcher]


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	http_client: httpx.AsyncClient | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT))
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.http_client:
		await deps.http_client.aclose()
		deps.http_client = None

	logger.info('Cleanup complete')


def get_http_client() -> httpx.AsyncClient:
	if deps.http_client is None:
		raise RuntimeError('HTTP client not initialized')
	return deps.http_client


def get_rate_fetcher_factory(
	settings: Annotated[Settings, Depends(get_settings)],
	client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> RateFetcherFactory:
	def factory(base_currency: str) -> RateFetcher:
		return fetch_rates(base_currency, settings=settings, client=client)

	return factory
