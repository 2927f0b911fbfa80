from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_conversion_service
from api.schemas import (
	CacheStatsData,
	CacheStatsResponse,
	ConversionData,
	ConversionRequest,
	ConversionResponse,
	MessageResponse,
	RatesData,
	RatesResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService
from domain.exceptions.currency import InvalidCurrencyError, ValidationError

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(currencies=list(service.supported_currencies))


@router.get(
	'/rates/{currency}',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the rate table for a base currency',
)
async def get_rates(
	currency: Annotated[str, Path(min_length=1, max_length=10)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> RatesResponse:
	if not service.is_valid_currency(currency):
		raise InvalidCurrencyError(f'unsupported currency: {currency}')

	snapshot = await service.get_rates(currency.upper())
	return RatesResponse(
		data=RatesData(
			base=snapshot.base,
			rates=dict(snapshot.rates),
			last_update=snapshot.fetched_at,
		)
	)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	missing = request.missing_fields()
	if missing:
		raise ValidationError(f'missing required parameters: {", ".join(missing)}')

	result = await service.convert(request.amount, request.from_currency, request.to_currency)
	return ConversionResponse(
		data=ConversionData(
			amount=result.amount,
			from_currency=result.from_currency,
			to_currency=result.to_currency,
			rate=result.rate,
			converted_amount=result.converted_amount,
			last_update=result.last_update,
		)
	)


@router.delete(
	'/cache',
	response_model=MessageResponse,
	status_code=status.HTTP_200_OK,
	summary='Clear the rate cache',
)
async def clear_cache(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> MessageResponse:
	service.clear_cache()
	return MessageResponse(success=True, message='cache cleared')


@router.get(
	'/cache',
	response_model=CacheStatsResponse,
	status_code=status.HTTP_200_OK,
	summary='Show rate cache contents',
)
async def get_cache_stats(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> CacheStatsResponse:
	return CacheStatsResponse(data=CacheStatsData(**service.cache_stats()))
