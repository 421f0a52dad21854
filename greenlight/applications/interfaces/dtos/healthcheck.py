from pydantic import BaseModel


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthCheck(BaseModel):
    status: str
    system_info: SystemInfo
