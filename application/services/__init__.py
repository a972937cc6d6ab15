from .rate_fetcher import RateFetcher, fetch_rates

__all__ = ['RateFetcher', 'fetch_rates']
