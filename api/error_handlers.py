import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.services import PROVIDER_UNAVAILABLE_MESSAGE
from domain.exceptions.currency import ProviderError, ValidationError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={'success': False, 'message': message})


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		logger.info(f'Rejected {request.method} {request.url.path}: {exc}')
		return _error(400, str(exc))

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return _error(503, PROVIDER_UNAVAILABLE_MESSAGE)

	@app.exception_handler(RequestValidationError)
	async def request_validation_handler(request: Request, exc: RequestValidationError):
		logger.info(f'Invalid request body for {request.url.path}: {exc.errors()}')
		return _error(400, 'invalid request parameters')

	@app.exception_handler(StarletteHTTPException)
	async def http_exception_handler(request: Request, exc: StarletteHTTPException):
		if exc.status_code == 404:
			return _error(404, 'resource not found')
		return _error(exc.status_code, str(exc.detail))

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return _error(500, 'internal server error')
