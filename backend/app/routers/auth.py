from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth import get_current_account
from app.database import get_db
from app.models.account import Account
from app.schemas.auth import AccountResponse, LoginRequest, LoginResponse, SignupRequest, SignupResponse
from app.services.account_service import account_service

router = APIRouter()


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(get_db)):
    return await account_service.register(payload.root, db)


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    return await account_service.authenticate(payload.root, db)


@router.get("/me", response_model=AccountResponse)
async def me(current_account: Account = Depends(get_current_account)):
    """Profile of the bearer. The password hash is never part of the response."""
    return AccountResponse.model_validate(current_account)
