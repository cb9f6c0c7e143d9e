import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import AuthError, ConflictError
from todo_app.models.user import User
from todo_app.repositories.user_repo import UserRepository
from todo_app.schemas.auth import LoginRequest, RegisterRequest
from todo_app.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password_async,
    verify_password_async,
)

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self):
        self.repo = UserRepository()

    async def register(self, db: AsyncSession, data: RegisterRequest) -> tuple[User, str]:
        async with db.begin():
            if await self.repo.get_by_email(db, data.email):
                raise ConflictError("User already exists", status_code=400)
        password_hash = await hash_password_async(data.password)
        async with db.begin():
            try:
                user = await self.repo.create(db, User(email=data.email, password_hash=password_hash))
            except IntegrityError as exc:
                # lost a race with a concurrent registration of the same email
                raise ConflictError("User already exists", status_code=400) from exc
        logger.info("registered user %s", user.id)
        return user, create_access_token(user.id)

    async def login(self, db: AsyncSession, data: LoginRequest) -> tuple[User, str]:
        async with db.begin():
            user = await self.repo.get_by_email(db, data.email)
        # unknown email and wrong password are reported identically and take the same time
        password_hash = user.password_hash if user is not None else DUMMY_PASSWORD_HASH
        valid = await verify_password_async(data.password, password_hash)
        if user is None or not valid:
            logger.info("rejected login attempt")
            raise AuthError("Invalid credentials")
        return user, create_access_token(user.id)

    async def get_user(self, db: AsyncSession, user_id: str) -> User | None:
        async with db.begin():
            return await self.repo.get(db, user_id)
