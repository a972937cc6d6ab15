from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RateEntryResponse(BaseModel):
	code: str = Field(..., description='Quote key as sent by the provider, e.g. USDEUR')
	rate: float = Field(..., description='Exchange rate against the base currency')


class LiveRatesResponse(BaseModel):
	base_currency: str = Field(..., description='Currency all rates are quoted against')
	source: str = Field(..., description='Base currency reported by the provider')
	timestamp: datetime = Field(..., description='When the provider published the rates')
	page: int = Field(..., description='1-based page number')
	page_size: int = Field(..., description='Maximum number of rates per page')
	total: int = Field(..., description='Number of rates across all pages')
	pages: int = Field(..., description='Number of pages')
	rates: list[RateEntryResponse] = Field(description='Rates on this page, in provider order')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'base_currency': 'USD',
				'source': 'USD',
				'timestamp': '2023-11-14T22:13:20Z',
				'page': 1,
				'page_size': 10,
				'total': 2,
				'pages': 1,
				'rates': [{'code': 'USDEUR', 'rate': 0.92}, {'code': 'USDGBP', 'rate': 0.79}],
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service liveness')
	app: str = Field(..., description='Application name')
