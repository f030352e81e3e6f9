"""Reservation Routes: booking and owner confirmation/cancellation."""

from fastapi import APIRouter, Depends, status

from crave.config import Settings, get_settings
from crave.core.errors import ResourceNotFoundError
from crave.core.status_transitions import RESERVATION_TRANSITIONS
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.reservation import (
    ReservationCreate, ReservationResponse, ReservationStatusUpdate,
)
from crave.services.status_updates import change_status

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


@router.post(
    "", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    body: ReservationCreate, store: CraveStore = Depends(get_store),
):
    return store.create_reservation(body.model_dump())


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int, store: CraveStore = Depends(get_store),
):
    reservation = store.get_reservation(reservation_id)
    if reservation is None:
        raise ResourceNotFoundError("Reservation", reservation_id)
    return reservation


@router.patch("/{reservation_id}", response_model=ReservationResponse)
async def update_reservation_status(
    reservation_id: int,
    body: ReservationStatusUpdate,
    store: CraveStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return change_status(
        store.reservations, "Reservation", reservation_id, body.status,
        RESERVATION_TRANSITIONS, settings.enforce_status_transitions,
    )
