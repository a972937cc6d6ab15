import asyncio
import logging
from collections.abc import Callable

import httpx

from config.settings import Settings, get_settings
from domain.exceptions.currency import ProviderError
from domain.models.currency import (
    ExchangeRateResult,
    LiveRatesFailure,
    ProviderErrorDetail,
    RateEntry,
    derive_rates,
)
from domain.models.fetch_state import FetchState, FetchStatus
from infrastructure.providers import ExchangeRateHostProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)

Subscriber = Callable[["RateFetcher"], None]


class RateFetcher:
    """Live rates for one base currency, fetched on demand.

    Constructing a fetcher sends nothing. The request goes out on ``start()``
    (once) or ``refresh()`` (every call). Each state transition recomputes
    ``rates`` and then notifies every subscriber, synchronously.
    """

    def __init__(
        self,
        base_currency: str,
        provider: ExchangeRateProvider,
        owns_provider: bool = False,
    ):
        self.base_currency = base_currency
        self._provider = provider
        self._owns_provider = owns_provider
        self._state = FetchState()
        self._rates: list[RateEntry] = []
        self._subscribers: list[Subscriber] = []
        self._started = False
        self._generation = 0
        self._settled: asyncio.Event | None = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def status(self) -> FetchStatus:
        return self._state.status

    @property
    def started(self) -> bool:
        return self._started

    @property
    def pending(self) -> bool:
        return self._state.status is FetchStatus.PENDING

    @property
    def error(self) -> ProviderError | None:
        return self._state.error

    @property
    def result(self) -> ExchangeRateResult | None:
        return self._state.data

    @property
    def rates(self) -> list[RateEntry]:
        return list(self._rates)

    @property
    def provider_error(self) -> ProviderErrorDetail | None:
        if isinstance(self._state.data, LiveRatesFailure):
            return self._state.data.error
        return None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def start(self) -> list[RateEntry]:
        if not self._started:
            return await self.refresh()
        if self._settled is not None:
            await self._settled.wait()
        return self.rates

    async def refresh(self) -> list[RateEntry]:
        """Send a new request. Results of older, still running requests are discarded."""
        self._started = True
        self._generation += 1
        generation = self._generation
        settled = self._settled = asyncio.Event()

        try:
            self._transition(FetchState(status=FetchStatus.PENDING))
            result = await self._provider.fetch_live(self.base_currency)
        except ProviderError as e:
            logger.error(f"Fetching rates for {self.base_currency} failed: {e}")
            self._settle(generation, FetchState(status=FetchStatus.ERROR, error=e))
        except asyncio.CancelledError:
            self._settle(generation, FetchState())
            raise
        except Exception as e:
            logger.exception(f"Unexpected failure fetching rates for {self.base_currency}")
            error = ProviderError(f"{self._provider.name} failed: {e.__class__.__name__}")
            error.__cause__ = e
            self._settle(generation, FetchState(status=FetchStatus.ERROR, error=error))
            raise
        else:
            self._settle(generation, FetchState(status=FetchStatus.SUCCESS, data=result))
        finally:
            settled.set()

        return self.rates

    def _settle(self, generation: int, state: FetchState) -> None:
        if generation != self._generation:
            logger.debug(f"Discarding superseded response for {self.base_currency}")
            return
        self._transition(state)

    def _transition(self, state: FetchState) -> None:
        self._state = state
        self._rates = derive_rates(state.data)
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception(f"Rates subscriber failed on {state.status.value} transition")

    async def aclose(self) -> None:
        if self._owns_provider:
            await self._provider.close()

    async def __aenter__(self) -> "RateFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def fetch_rates(
    base_currency: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> RateFetcher:
    """Build an inert ``RateFetcher`` backed by exchangerate.host.

    The access key is taken from ``settings`` as-is; an empty key is still sent.
    """
    settings = settings or get_settings()
    provider = ExchangeRateHostProvider(
        api_key=settings.EXCHANGE_RATE_API_KEY,
        client=client,
        timeout=settings.HTTP_TIMEOUT,
        base_url=settings.EXCHANGE_RATE_BASE_URL,
    )
    return RateFetcher(base_currency, provider, owns_provider=True)
