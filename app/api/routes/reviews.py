"""
Read-only review endpoints. Passenger reviews come back through the same
listing with review_type and passenger_comment filled in.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories import PassengerReviewRepository, ReviewRepository
from app.schemas.review import ReviewResponse

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/", response_model=list[ReviewResponse])
async def list_reviews_endpoint(
    passenger_only: bool = Query(False),
    db: AsyncSession = Depends(get_db),
):
    if passenger_only:
        return await PassengerReviewRepository(db).find_all()
    return await ReviewRepository(db).find_all()


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review_endpoint(review_id: int, db: AsyncSession = Depends(get_db)):
    review = await ReviewRepository(db).find_by_id(review_id)
    if not review:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Review {review_id} not found",
        )
    return review
