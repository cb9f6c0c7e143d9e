import logging
from typing import Optional

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.database import get_db
from todo_app.errors import Forbidden, Unauthorized
from todo_app.security import TokenError, decode_access_token
from todo_app.services.auth_service import AuthService
from todo_app.validation import parse_limit, parse_page, require_id

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)
auth_service = AuthService()


class CurrentUser(BaseModel):
    id: str
    email: str


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    # missing token -> 401, unusable token -> 403
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Access token required")
    try:
        user_id = decode_access_token(credentials.credentials)
    except TokenError as exc:
        logger.warning("rejected bearer token: %s", exc)
        raise Forbidden("Invalid or expired token")

    user = await auth_service.get_user(db, user_id)
    if user is None:
        logger.warning("bearer token for unknown user %s", user_id)
        raise Forbidden("Invalid or expired token")
    return CurrentUser(id=user.id, email=user.email)


def todo_id_param(todo_id: str) -> str:
    return require_id(todo_id, "todo ID")


class PageParams(BaseModel):
    page: int
    limit: int


def page_params(
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
) -> Optional[PageParams]:
    """None when the client asked for the plain list (neither page nor limit given)."""
    if page is None and limit is None:
        return None
    return PageParams(page=parse_page(page), limit=parse_limit(limit))
