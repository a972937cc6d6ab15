from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import RateFetcherFactory, get_rate_fetcher_factory
from api.schemas import LiveRatesResponse, RateEntryResponse
from application.pagination import paginate_page
from config.settings import Settings, get_settings
from domain.exceptions.currency import ProviderRejectedError

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates/{base_currency}',
	response_model=LiveRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='List live exchange rates, one page at a time',
)
async def get_live_rates(
	base_currency: Annotated[
		str,
		Path(description='Base currency code, sent to the provider as given'),
	],
	fetcher_factory: Annotated[RateFetcherFactory, Depends(get_rate_fetcher_factory)],
	settings: Annotated[Settings, Depends(get_settings)],
	page: Annotated[int, Query()] = 1,
	page_size: Annotated[int | None, Query(ge=0, le=500)] = None,
) -> LiveRatesResponse:
	async with fetcher_factory(base_currency) as fetcher:
		await fetcher.start()

	if fetcher.error is not None:
		raise fetcher.error

	if fetcher.provider_error is not None:
		detail = fetcher.provider_error
		raise ProviderRejectedError(detail.info, code=detail.code, error_type=detail.type)

	result = fetcher.result

	window = paginate_page(
		fetcher.rates,
		page,
		settings.DEFAULT_PAGE_SIZE if page_size is None else page_size,
	)
	return LiveRatesResponse(
		base_currency=base_currency,
		source=result.source,
		timestamp=result.fetched_at,
		page=window.page,
		page_size=window.page_size,
		total=window.total,
		pages=window.pages,
		rates=[RateEntryResponse(code=entry.code, rate=entry.rate) for entry in window.items],
	)
