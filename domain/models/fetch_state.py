from dataclasses import dataclass
from enum import Enum

from domain.exceptions.currency import ProviderError
from domain.models.currency import ExchangeRateResult


class FetchStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus = FetchStatus.IDLE
    error: ProviderError | None = None
    data: ExchangeRateResult | None = None
