from typing import Annotated

from fastapi import APIRouter, Depends, status

from helpdesk.api.dependencies import get_config_service
from helpdesk.core.errors import AppError
from helpdesk.models.schemas.base_config import BaseConfigResponse, BaseConfigUpdate
from helpdesk.services.base_config_service import BaseConfigService

router = APIRouter(prefix="/config")


def _raise_storage_unavailable(action: str) -> None:
    raise AppError(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        code="CONFIG_STORAGE_UNAVAILABLE",
        message=f"Configuration could not be {action}.",
    )


@router.get("", response_model=BaseConfigResponse)
def get_config(
    config_service: Annotated[BaseConfigService, Depends(get_config_service)],
) -> BaseConfigResponse:
    return BaseConfigResponse(data=config_service.get_config())


@router.put("", response_model=BaseConfigResponse)
def save_config(
    payload: BaseConfigUpdate,
    config_service: Annotated[BaseConfigService, Depends(get_config_service)],
) -> BaseConfigResponse:
    if not config_service.save_config(payload):
        _raise_storage_unavailable("saved")
    return BaseConfigResponse(data=config_service.get_config())


@router.delete("", response_model=BaseConfigResponse)
def reset_config(
    config_service: Annotated[BaseConfigService, Depends(get_config_service)],
) -> BaseConfigResponse:
    if not config_service.reset_config():
        _raise_storage_unavailable("reset")
    return BaseConfigResponse(data=config_service.get_config())
