import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth import create_token, hash_password, verify_password
from app.exceptions import AuthError, ConflictError, InternalError, NotFoundError
from app.models.account import Account
from app.schemas.auth import (
    AuthUser,
    GovLogin,
    HospitalLogin,
    HospitalSignup,
    LoginVariant,
    LoginResponse,
    SignupVariant,
    SignupResponse,
    WorkerLogin,
    WorkerSignup,
)

logger = logging.getLogger(__name__)

ROLE_LABELS = {
    "worker": "Worker",
    "hospital": "Hospital",
    "gov": "Gov Official",
}

DUPLICATE_MOBILE = "A worker with this Mobile Number already exists."
DUPLICATE_EMAIL = "An account with this Email already exists."


class AccountService:
    async def register(self, payload: SignupVariant, db: AsyncSession) -> SignupResponse:
        email, mobile = self._contact_keys(payload)
        try:
            await self._ensure_unique(payload, email, mobile, db)

            account = Account(
                display_name=self._display_name(payload),
                email=email,
                mobile=mobile,
                password_hash=hash_password(payload.password),
                role=payload.role,
                role_details=payload.model_dump(by_alias=True, exclude={"password"}),
            )
            db.add(account)
            await db.flush()
            await db.refresh(account)
        except IntegrityError:
            await db.rollback()
            raise ConflictError(DUPLICATE_MOBILE if payload.role == "worker" else DUPLICATE_EMAIL)
        except SQLAlchemyError:
            logger.exception("Store failure during signup")
            raise InternalError("Server Error during signup")

        logger.info("Registered %s account %s", account.role, account.id)
        return SignupResponse(
            message="User registered successfully",
            token=create_token(account),
            user=AuthUser(display_name=account.display_name, role=account.role),
        )

    async def authenticate(self, payload: LoginVariant, db: AsyncSession) -> LoginResponse:
        try:
            account = await self._find_by_login_key(payload, db)
        except SQLAlchemyError:
            logger.exception("Store failure during login")
            raise InternalError("Server Error during login")

        if account is None:
            logger.info("Login failed for role %s: no such account", payload.role)
            raise NotFoundError("User not found")
        if not verify_password(payload.password, account.password_hash):
            logger.info("Login failed for account %s: bad password", account.id)
            raise AuthError("Invalid credentials")

        logger.info("Account %s logged in", account.id)
        return LoginResponse(
            message="Login successful",
            token=create_token(account),
            role=account.role,
        )

    @staticmethod
    def _contact_keys(payload: SignupVariant) -> tuple[Optional[str], Optional[str]]:
        """(email, mobile) stored on the account for each role."""
        if isinstance(payload, WorkerSignup):
            return None, payload.mobile_number
        if isinstance(payload, HospitalSignup):
            return str(payload.administrator_email), None
        return str(payload.official_email), None

    @staticmethod
    def _display_name(payload: SignupVariant) -> str:
        name = getattr(payload, "name", None) or getattr(payload, "hospital_name", None)
        return name or ROLE_LABELS[payload.role]

    async def _ensure_unique(
        self,
        payload: SignupVariant,
        email: Optional[str],
        mobile: Optional[str],
        db: AsyncSession,
    ) -> None:
        if isinstance(payload, WorkerSignup):
            if await db.scalar(select(Account.id).where(Account.mobile == mobile)):
                raise ConflictError(DUPLICATE_MOBILE)
            return

        if await db.scalar(select(Account.id).where(Account.email == email)):
            raise ConflictError(DUPLICATE_EMAIL)

        # The login key must also be unique or authentication becomes ambiguous.
        if isinstance(payload, HospitalSignup):
            key, value = "registrationNumber", payload.registration_number
            message = "A hospital with this Registration Number already exists."
        else:
            key, value = "employeeId", payload.employee_id
            message = "An official with this Employee ID already exists."
        if await self._find_by_detail(payload.role, key, value, db):
            raise ConflictError(message)

    async def _find_by_login_key(self, payload: LoginVariant, db: AsyncSession) -> Optional[Account]:
        if isinstance(payload, WorkerLogin):
            result = await db.execute(
                select(Account).where(Account.role == "worker", Account.mobile == payload.mobile_number)
            )
            return result.scalars().first()
        if isinstance(payload, HospitalLogin):
            return await self._find_by_detail("hospital", "registrationNumber", payload.registration_number, db)
        if isinstance(payload, GovLogin):
            return await self._find_by_detail("gov", "employeeId", payload.employee_id, db)
        return None

    @staticmethod
    async def _find_by_detail(role: str, key: str, value: str, db: AsyncSession) -> Optional[Account]:
        result = await db.execute(
            select(Account).where(
                Account.role == role,
                Account.role_details[key].as_string() == value,
            )
        )
        return result.scalars().first()


account_service = AccountService()
