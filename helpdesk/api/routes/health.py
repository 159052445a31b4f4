from typing import Annotated

from fastapi import APIRouter, Depends

from helpdesk.api.dependencies import get_base_data_service, get_health_service
from helpdesk.models.schemas.health import ConnectionTestResponse, HealthResponse
from helpdesk.services.base_data_service import BaseDataService
from helpdesk.services.health_service import HealthService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(
    health_service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthResponse:
    return health_service.get_health()


@router.get("/health/base-data", response_model=ConnectionTestResponse)
def base_data_connection(
    base_data_service: Annotated[BaseDataService, Depends(get_base_data_service)],
) -> ConnectionTestResponse:
    success, message = base_data_service.test_connection()
    return ConnectionTestResponse(success=success, message=message)
