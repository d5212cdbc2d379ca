"""
Admin authentication routes

POST /api/auth/login   - JSON ``{email, password}`` → bearer token
POST /api/auth/token   - same, as an OAuth2 password form (Swagger "Authorize")
GET  /api/auth/me      - the admin the token belongs to
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.auth import authenticate_admin, create_access_token, get_current_admin
from wedsite.config import settings
from wedsite.database import get_db
from wedsite.middleware.rate_limit import auth_limit
from wedsite.models.admin_user import AdminUser
from wedsite.schemas.auth import AdminResponse, LoginRequest, Token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


async def _issue_token(email: str, password: str, db: AsyncSession) -> Token:
    admin = await authenticate_admin(email, password, db)
    expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(
        data={"sub": admin.email, "role": admin.role, "template_id": admin.template_id},
        expires_delta=expires,
    )
    logger.info("Admin %d logged in", admin.id, extra={"admin_id": admin.id})
    return Token(access_token=access_token, expires_in=int(expires.total_seconds()))


@router.post("/login", response_model=Token)
@auth_limit
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> Token:
    return await _issue_token(payload.email, payload.password, db)


@router.post("/token", response_model=Token)
@auth_limit
async def login_for_access_token(
    request: Request,
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
) -> Token:
    return await _issue_token(form_data.username, form_data.password, db)


@router.get("/me", response_model=AdminResponse)
@auth_limit
async def read_current_admin(
    request: Request,
    response: Response,
    admin: AdminUser = Depends(get_current_admin),
) -> AdminResponse:
    return AdminResponse.model_validate(admin)
