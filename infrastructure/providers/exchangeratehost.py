import logging

import httpx
from pydantic import ValidationError

from domain.exceptions.currency import ProviderError
from domain.models.currency import (
	ExchangeRateResult,
	LiveRates,
	LiveRatesFailure,
	ProviderErrorDetail,
)
from infrastructure.providers.schemas import LiveQuotesPayload, live_payload_adapter

logger = logging.getLogger(__name__)


class ExchangeRateHostProvider:
	BASE_URL = 'https://api.exchangerate.host'

	def __init__(
		self,
		api_key: str,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
		base_url: str | None = None,
	):
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._owns_client = client is None
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate.host'

	async def _request(self, endpoint: str, params: dict) -> dict:
		params['access_key'] = self.api_key
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'exchangerate.host HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'exchangerate.host request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'exchangerate.host response parsing error: {str(e)}') from e

	async def fetch_live(self, source: str) -> ExchangeRateResult:
		logger.debug(f'Requesting live rates for {source} from {self.name}')
		data = await self._request('live', {'source': source, 'format': 1})

		try:
			payload = live_payload_adapter.validate_python(data)
		except ValidationError as e:
			raise ProviderError(
				f'exchangerate.host response parsing error: {e.error_count()} invalid field(s)'
			) from e

		if isinstance(payload, LiveQuotesPayload):
			return LiveRates(
				quotes=dict(payload.quotes),
				source=payload.source,
				timestamp=payload.timestamp,
			)

		logger.warning(
			f'{self.name} rejected live rates request for {source}: {payload.error.info}'
		)
		return LiveRatesFailure(
			error=ProviderErrorDetail(
				code=payload.error.code,
				type=payload.error.type,
				info=payload.error.info,
			)
		)

	async def close(self) -> None:
		if self._owns_client:
			await self._client.aclose()
