"""Service Request Routes: waiter calls and special requests from tables."""

from fastapi import APIRouter, Depends, status

from crave.config import Settings, get_settings
from crave.core.status_transitions import SERVICE_REQUEST_TRANSITIONS
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.service_request import (
    ServiceRequestCreate, ServiceRequestResponse, ServiceRequestStatusUpdate,
)
from crave.services.status_updates import change_status

router = APIRouter(prefix="/api/service-requests", tags=["service-requests"])


@router.post(
    "", response_model=ServiceRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_service_request(
    body: ServiceRequestCreate, store: CraveStore = Depends(get_store),
):
    return store.create_service_request(body.model_dump())


@router.patch("/{request_id}", response_model=ServiceRequestResponse)
async def update_service_request_status(
    request_id: int,
    body: ServiceRequestStatusUpdate,
    store: CraveStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Owner marks a request completed or rejected."""
    return change_status(
        store.service_requests, "ServiceRequest", request_id, body.status,
        SERVICE_REQUEST_TRANSITIONS, settings.enforce_status_transitions,
    )
