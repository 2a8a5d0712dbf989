from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SourceStatus = Literal["OPERATIONAL", "OFFLINE"]


class EndpointHealth(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    endpoint: str
    success_rate: float
    total_attempts: int
    successful_attempts: int
    last_success: datetime | None = None
    last_failure: datetime | None = None
    status: SourceStatus


class HealthReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    timestamp: datetime | None = None
    endpoints: list[EndpointHealth]
