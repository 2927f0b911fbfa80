from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_uptime
from api.schemas import HealthResponse

router = APIRouter(prefix='/api', tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Service health check')
async def health_check(uptime: Annotated[float, Depends(get_uptime)]) -> HealthResponse:
	return HealthResponse(timestamp=datetime.now(UTC), uptime=uptime)
