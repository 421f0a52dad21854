from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from greenlight.applications.interfaces.dtos.healthcheck import HealthCheck, SystemInfo
from greenlight.infrastructure.config.dependencies import get_settings
from greenlight.infrastructure.config.settings import VERSION, Settings

router = APIRouter(prefix="/v1/healthcheck", tags=["healthcheck"])


@router.get("", status_code=HTTPStatus.OK, response_model=HealthCheck)
def read_healthcheck(settings: Annotated[Settings, Depends(get_settings)]):
    return HealthCheck(
        status="available",
        system_info=SystemInfo(environment=settings.ENV, version=VERSION),
    )
