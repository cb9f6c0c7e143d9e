from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.database import get_db
from todo_app.errors import failure_message
from todo_app.schemas.auth import AuthOut, LoginRequest, RegisterRequest, UserOut
from todo_app.services.auth_service import AuthService

router = APIRouter()
service = AuthService()


@router.post("/register", response_model=AuthOut, status_code=201)
@failure_message("Internal server error")
async def register(data: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user, token = await service.register(db, data)
    return AuthOut(message="User registered successfully", user=UserOut.model_validate(user), token=token)


@router.post("/login", response_model=AuthOut)
@failure_message("Internal server error")
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    user, token = await service.login(db, data)
    return AuthOut(message="Login successful", user=UserOut.model_validate(user), token=token)
