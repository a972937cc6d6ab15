from .base import ExchangeRateProvider
from .exchangeratehost import ExchangeRateHostProvider

__all__ = ['ExchangeRateProvider', 'ExchangeRateHostProvider']
