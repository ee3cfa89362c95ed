from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth import require_hospital
from app.database import get_db
from app.models.account import Account
from app.schemas.common import MAX_RECORD_ID, MessageResponse
from app.schemas.staff import StaffCreate, StaffResponse, StaffUpdate
from app.services.staff_service import staff_service

router = APIRouter()


@router.get("", response_model=list[StaffResponse])
async def list_staff(
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await staff_service.list(hospital, db)


@router.post("", response_model=StaffResponse, status_code=201)
async def add_staff(
    data: StaffCreate,
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await staff_service.create(hospital, data, db)


@router.put("/{record_id}", response_model=StaffResponse)
async def update_staff(
    data: StaffUpdate,
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await staff_service.update(hospital, record_id, data, db)


@router.delete("/{record_id}", response_model=MessageResponse)
async def delete_staff(
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    await staff_service.delete(hospital, record_id, db)
    return MessageResponse(message="Staff deleted")
