import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.exceptions import InternalError, NotFoundError
from app.models.account import Account
from app.models.worker import Worker
from app.schemas.worker import WorkerCreate, WorkerResponse, WorkerUpdate
from app.services.identifiers import worker_code

logger = logging.getLogger(__name__)


class WorkerService:
    """Worker records, scoped to the hospital account that registered them."""

    async def list(self, hospital: Account, db: AsyncSession) -> list[WorkerResponse]:
        try:
            result = await db.execute(
                select(Worker).where(Worker.hospital_id == hospital.id).order_by(Worker.id.desc())
            )
        except SQLAlchemyError:
            logger.exception("Store failure listing workers for hospital %s", hospital.id)
            raise InternalError("Error fetching workers")
        return [WorkerResponse.model_validate(w) for w in result.scalars().all()]

    async def create(self, hospital: Account, data: WorkerCreate, db: AsyncSession) -> WorkerResponse:
        hospital_name = data.hospital_name or (hospital.role_details or {}).get("hospitalName")
        fields = data.model_dump(exclude={"hospital_name"})
        worker = Worker(
            **fields,
            worker_id=worker_code(hospital_name),
            hospital_id=hospital.id,
            hospital_name=hospital_name,
        )
        try:
            db.add(worker)
            await db.flush()
            await db.refresh(worker)
        except SQLAlchemyError:
            logger.exception("Store failure registering worker for hospital %s", hospital.id)
            raise InternalError("Error registering worker")

        logger.info("Hospital %s registered worker %s", hospital.id, worker.worker_id)
        return WorkerResponse.model_validate(worker)

    async def update(
        self, hospital: Account, record_id: int, data: WorkerUpdate, db: AsyncSession
    ) -> WorkerResponse:
        try:
            worker = await self._get_owned(hospital, record_id, db)
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(worker, key, value)
            await db.flush()
            await db.refresh(worker)
        except SQLAlchemyError:
            logger.exception("Store failure updating worker %s", record_id)
            raise InternalError("Error updating worker")
        return WorkerResponse.model_validate(worker)

    async def delete(self, hospital: Account, record_id: int, db: AsyncSession) -> None:
        try:
            worker = await self._get_owned(hospital, record_id, db)
            await db.delete(worker)
            await db.flush()
        except SQLAlchemyError:
            logger.exception("Store failure deleting worker %s", record_id)
            raise InternalError("Error deleting worker")
        logger.info("Hospital %s deleted worker record %s", hospital.id, record_id)

    @staticmethod
    async def _get_owned(hospital: Account, record_id: int, db: AsyncSession) -> Worker:
        # Records of other hospitals are reported as missing.
        worker = await db.get(Worker, record_id)
        if worker is None or worker.hospital_id != hospital.id:
            raise NotFoundError("Worker not found")
        return worker


worker_service = WorkerService()
