from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGE_RATE_API_KEY: str = ''
	EXCHANGE_RATE_BASE_URL: str = 'https://api.exchangerate.host'
	HTTP_TIMEOUT: float = 10.0

	DEFAULT_PAGE_SIZE: int = 10

	# Application
	APP_NAME: str = 'Live Exchange Rates API'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
