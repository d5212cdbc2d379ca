"""
Admin authentication

Bearer JWTs (HS256, python-jose) for platform and template admins, with
passlib bcrypt password hashes.

Dependencies:
    get_current_admin       - any active admin
    require_platform_admin  - platform admins only
    require_template_admin  - platform admins, or the template's own admin
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.config import settings
from wedsite.database import get_db
from wedsite.exceptions import AuthenticationError, AuthorizationError, InvalidCredentialsError
from wedsite.models.admin_user import AdminRole, AdminUser

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 scheme for token validation
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if "sub" not in to_encode:
        raise ValueError("Missing 'sub' claim (admin email) in token data.")

    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> str:
    """Return the ``sub`` claim; raises AuthenticationError."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.info("Rejected expired admin token")
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.warning("JWT decoding failed: %s", e)
        raise AuthenticationError("Invalid token")

    email = payload.get("sub")
    if email is None:
        raise AuthenticationError("Token does not contain 'sub' field")
    return email


async def get_admin_by_email(email: str, db: AsyncSession) -> AdminUser | None:
    result = await db.execute(select(AdminUser).where(AdminUser.email == email.lower()))
    return result.scalars().first()


async def authenticate_admin(email: str, password: str, db: AsyncSession) -> AdminUser:
    admin = await get_admin_by_email(email, db)
    if admin is None or not admin.is_active or not verify_password(password, admin.hashed_password):
        logger.info("Failed admin login for %s", email)
        raise InvalidCredentialsError()
    return admin


async def create_admin(
    email: str,
    password: str,
    db: AsyncSession,
    role: AdminRole = AdminRole.template_admin,
    template_id: str | None = None,
) -> AdminUser:
    admin = AdminUser(
        email=email.lower(),
        hashed_password=hash_password(password),
        role=role.value,
        template_id=template_id,
    )
    db.add(admin)
    await db.commit()
    await db.refresh(admin)
    logger.info("Admin created: id=%d role=%s", admin.id, admin.role)
    return admin


async def get_current_admin(
    request: Request,
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> AdminUser:
    email = decode_access_token(token)
    admin = await get_admin_by_email(email, db)
    if admin is None or not admin.is_active:
        logger.warning("Token for unknown or inactive admin '%s'", email)
        raise AuthenticationError("Could not validate credentials")
    # Picked up by the access log
    request.state.admin = admin
    return admin


async def require_platform_admin(admin: AdminUser = Depends(get_current_admin)) -> AdminUser:
    if not admin.is_platform_admin:
        raise AuthorizationError(required_role=AdminRole.platform_admin.value)
    return admin


async def require_template_admin(
    template_id: str,
    admin: AdminUser = Depends(get_current_admin),
) -> AdminUser:
    """Path-parameter dependency: routes must name their parameter ``template_id``."""
    if not admin.can_manage(template_id):
        logger.warning("Admin %d denied access to template %s", admin.id, template_id)
        raise AuthorizationError("You do not manage this template", required_role=AdminRole.template_admin.value)
    return admin
