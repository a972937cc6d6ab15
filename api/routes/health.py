from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.schemas import HealthResponse
from config.settings import Settings, get_settings

router = APIRouter(tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Liveness check',
)
async def health(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
	return HealthResponse(status='ok', app=settings.APP_NAME)
