import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.exceptions import InternalError, NotFoundError
from app.models.account import Account
from app.models.staff import Staff
from app.schemas.staff import StaffCreate, StaffResponse, StaffUpdate
from app.services.identifiers import staff_code

logger = logging.getLogger(__name__)


class StaffService:
    """Hospital staff roster. Codes derive from the hospital account's display name."""

    async def list(self, hospital: Account, db: AsyncSession) -> list[StaffResponse]:
        try:
            result = await db.execute(
                select(Staff).where(Staff.hospital_id == hospital.id).order_by(Staff.id.desc())
            )
        except SQLAlchemyError:
            logger.exception("Store failure listing staff for hospital %s", hospital.id)
            raise InternalError("Error fetching staff")
        return [StaffResponse.model_validate(s) for s in result.scalars().all()]

    async def create(self, hospital: Account, data: StaffCreate, db: AsyncSession) -> StaffResponse:
        staff = Staff(
            **data.model_dump(),
            staff_id=staff_code(hospital.display_name, data.role),
            hospital_id=hospital.id,
        )
        try:
            db.add(staff)
            await db.flush()
            await db.refresh(staff)
        except SQLAlchemyError:
            logger.exception("Store failure adding staff for hospital %s", hospital.id)
            raise InternalError("Error adding staff")

        logger.info("Hospital %s added staff %s", hospital.id, staff.staff_id)
        return StaffResponse.model_validate(staff)

    async def update(
        self, hospital: Account, record_id: int, data: StaffUpdate, db: AsyncSession
    ) -> StaffResponse:
        try:
            staff = await self._get_owned(hospital, record_id, db)
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(staff, key, value)
            await db.flush()
            await db.refresh(staff)
        except SQLAlchemyError:
            logger.exception("Store failure updating staff %s", record_id)
            raise InternalError("Error updating staff")
        return StaffResponse.model_validate(staff)

    async def delete(self, hospital: Account, record_id: int, db: AsyncSession) -> None:
        try:
            staff = await self._get_owned(hospital, record_id, db)
            await db.delete(staff)
            await db.flush()
        except SQLAlchemyError:
            logger.exception("Store failure deleting staff %s", record_id)
            raise InternalError("Error deleting staff")
        logger.info("Hospital %s removed staff record %s", hospital.id, record_id)

    @staticmethod
    async def _get_owned(hospital: Account, record_id: int, db: AsyncSession) -> Staff:
        staff = await db.get(Staff, record_id)
        if staff is None or staff.hospital_id != hospital.id:
            raise NotFoundError("Staff member not found")
        return staff


staff_service = StaffService()
