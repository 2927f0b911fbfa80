from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGE_RATE_API_URL: str = 'https://api.exchangerate-api.com/v4/latest'

	CORS_ORIGINS: list[str] = ['*']

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 3000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
