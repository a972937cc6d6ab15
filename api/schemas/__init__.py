from .responses import HealthResponse, LiveRatesResponse, RateEntryResponse

__all__ = [
	'HealthResponse',
	'LiveRatesResponse',
	'RateEntryResponse',
]
