from typing import Protocol

from domain.models.currency import ExchangeRateResult


class ExchangeRateProvider(Protocol):
    """A source of live exchange rates quoted against a base currency."""

    @property
    def name(self) -> str:
        ...

    async def fetch_live(self, source: str) -> ExchangeRateResult:
        """Return the provider's live quotes for ``source``.

        Transport failures raise ``ProviderError``. A well-formed refusal from the
        provider is returned as ``LiveRatesFailure``, never raised.
        """
        ...

    async def close(self) -> None:
        ...
