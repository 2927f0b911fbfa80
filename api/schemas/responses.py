from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversionData(BaseModel):
	amount: float = Field(..., description='Original amount requested')
	from_currency: str = Field(..., alias='from', description='Source currency code')
	to_currency: str = Field(..., alias='to', description='Target currency code')
	rate: float = Field(..., description='Exchange rate used for conversion')
	converted_amount: float = Field(..., alias='convertedAmount', description='Converted amount')
	last_update: date = Field(..., alias='lastUpdate', description='Date of the rate table')

	model_config = ConfigDict(populate_by_name=True)


class RatesData(BaseModel):
	base: str = Field(..., description='Base currency code')
	rates: dict[str, float] = Field(..., description='Rates from the base to each currency')
	last_update: date = Field(..., alias='lastUpdate', description='Date of the rate table')

	model_config = ConfigDict(populate_by_name=True)


class ConversionResponse(BaseModel):
	success: bool = True
	data: ConversionData
	message: str = 'conversion successful'

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'success': True,
				'data': {
					'amount': 100,
					'from': 'USD',
					'to': 'EUR',
					'rate': 0.9,
					'convertedAmount': 90,
					'lastUpdate': '2024-01-01',
				},
				'message': 'conversion successful',
			}
		}
	)


class RatesResponse(BaseModel):
	success: bool = True
	data: RatesData
	message: str = 'exchange rates fetched'


class SupportedCurrenciesResponse(BaseModel):
	success: bool = True
	currencies: list[str] = Field(description='List of currency codes')
	message: str = 'supported currencies'

	model_config = ConfigDict(
		json_schema_extra={'examples': [{'success': True, 'currencies': ['USD', 'EUR', 'GBP', 'JPY']}]}
	)


class CacheStatsData(BaseModel):
	entries: int = Field(..., description='Entries currently held, expired ones included until read')
	keys: list[str] = Field(..., description='Cached base currencies')


class CacheStatsResponse(BaseModel):
	success: bool = True
	data: CacheStatsData
	message: str = 'cache statistics'


class MessageResponse(BaseModel):
	success: bool
	message: str


class HealthResponse(BaseModel):
	success: bool = True
	message: str = 'service is running'
	timestamp: datetime
	uptime: float = Field(..., description='Seconds since startup')
