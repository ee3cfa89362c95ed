from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth import require_hospital
from app.database import get_db
from app.models.account import Account
from app.schemas.common import MAX_RECORD_ID, MessageResponse
from app.schemas.worker import WorkerCreate, WorkerResponse, WorkerUpdate
from app.services.worker_service import worker_service

router = APIRouter()


@router.get("", response_model=list[WorkerResponse])
async def list_workers(
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await worker_service.list(hospital, db)


@router.post("", response_model=WorkerResponse, status_code=201)
async def register_worker(
    data: WorkerCreate,
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await worker_service.create(hospital, data, db)


@router.put("/{record_id}", response_model=WorkerResponse)
async def update_worker(
    data: WorkerUpdate,
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    return await worker_service.update(hospital, record_id, data, db)


@router.delete("/{record_id}", response_model=MessageResponse)
async def delete_worker(
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db),
    hospital: Account = Depends(require_hospital),
):
    await worker_service.delete(hospital, record_id, db)
    return MessageResponse(message="Worker deleted successfully")
