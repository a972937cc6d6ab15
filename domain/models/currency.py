from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class RateEntry:
    code: str
    rate: float


@dataclass(frozen=True)
class ProviderErrorDetail:
    code: str
    type: str
    info: str


@dataclass(frozen=True)
class LiveRates:
    quotes: dict[str, float]  # Provider key order, untouched
    source: str
    timestamp: int

    @property
    def success(self) -> bool:
        return True

    @property
    def fetched_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


@dataclass(frozen=True)
class LiveRatesFailure:
    error: ProviderErrorDetail

    @property
    def success(self) -> bool:
        return False


ExchangeRateResult = LiveRates | LiveRatesFailure


def derive_rates(result: ExchangeRateResult | None) -> list[RateEntry]:
    """Flatten a live rates result into ordered ``RateEntry`` items.

    No result yet and the failure variant both give an empty list.
    """
    if result is None or not result.success:
        return []
    return [RateEntry(code=code, rate=rate) for code, rate in result.quotes.items()]
