"""Service Request Schemas.

Invariants:
    - type "special" requires a non-empty description (it is the request itself)
    - status PATCH accepts only pending | completed | rejected
"""

from datetime import datetime

from pydantic import Field, model_validator

from crave.core.domain_types import ServiceRequestStatus, ServiceRequestType
from crave.schemas.base import CamelModel


class ServiceRequestCreate(CamelModel):
    user_id: int = Field(ge=1)
    restaurant_id: int = Field(ge=1)
    table_id: int = Field(ge=1)
    type: ServiceRequestType
    description: str | None = Field(None, max_length=1000)
    status: ServiceRequestStatus = ServiceRequestStatus.PENDING

    @model_validator(mode="after")
    def special_needs_description(self):
        if self.type == ServiceRequestType.SPECIAL and not (
            self.description and self.description.strip()
        ):
            raise ValueError("special request requires description")
        return self


class ServiceRequestStatusUpdate(CamelModel):
    status: ServiceRequestStatus


class ServiceRequestResponse(CamelModel):
    id: int
    user_id: int
    restaurant_id: int
    table_id: int
    type: ServiceRequestType
    description: str | None = None
    status: ServiceRequestStatus
    created_at: datetime
