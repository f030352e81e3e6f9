"""Review Routes: append-only reviews."""

from fastapi import APIRouter, Depends, status

from crave.core.errors import ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.review import ReviewCreate, ReviewResponse

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post(
    "", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED,
)
async def create_review(body: ReviewCreate, store: CraveStore = Depends(get_store)):
    return store.create_review(body.model_dump())


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: int, store: CraveStore = Depends(get_store)):
    review = store.get_review(review_id)
    if review is None:
        raise ResourceNotFoundError("Review", review_id)
    return review
