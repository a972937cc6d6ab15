import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import PaginationError, ProviderError, ProviderRejectedError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(PaginationError)
	async def pagination_error_handler(request: Request, exc: PaginationError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(ProviderRejectedError)
	async def provider_rejected_handler(request: Request, exc: ProviderRejectedError):
		logger.warning(f'Provider rejected request: [{exc.code}] {exc.info}')
		return JSONResponse(
			status_code=502,
			content={'detail': exc.info, 'code': exc.code, 'type': exc.error_type},
		)

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Exchange rate service unavailable'}
		)
