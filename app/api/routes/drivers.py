"""
Read-only driver endpoints backed by DriverRepository / BookingRepository.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories import BookingRepository, DriverRepository
from app.schemas.booking import BookingResponse
from app.schemas.driver import DriverResponse

router = APIRouter(prefix="/drivers", tags=["Drivers"])


@router.get("/", response_model=list[DriverResponse])
async def list_drivers_endpoint(db: AsyncSession = Depends(get_db)):
    return await DriverRepository(db).find_all()


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver_endpoint(driver_id: int, db: AsyncSession = Depends(get_db)):
    driver = await DriverRepository(db).find_by_id(driver_id)
    if not driver:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Driver {driver_id} not found",
        )
    return driver


@router.get("/{driver_id}/license/{license_number}", response_model=DriverResponse)
async def get_driver_by_license_endpoint(
    driver_id: int,
    license_number: str,
    db: AsyncSession = Depends(get_db),
):
    """Match on both id and license number; any mismatch is a 404."""
    driver = await DriverRepository(db).raw_find_by_id_and_license_number(driver_id, license_number)
    if not driver:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Driver {driver_id} with license {license_number} not found",
        )
    return driver


@router.get("/{driver_id}/bookings", response_model=list[BookingResponse])
async def list_driver_bookings_endpoint(driver_id: int, db: AsyncSession = Depends(get_db)):
    if not await DriverRepository(db).exists_by_id(driver_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Driver {driver_id} not found",
        )
    return await BookingRepository(db).find_all_by_driver_id(driver_id)
