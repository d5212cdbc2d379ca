"""
Pytest configuration and fixtures for the wedding site platform tests
"""

import os
import sys
from collections.abc import AsyncGenerator

# Settings are read at import time, so the environment comes first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_STORAGE_URI", "memory://")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

import wedsite.database as database_module  # noqa: E402
from wedsite.database import Base  # noqa: E402

# One in-memory database shared by every session in a test
test_engine = create_async_engine(
    "sqlite+aiosqlite:///:memory:",
    poolclass=StaticPool,
    connect_args={"check_same_thread": False},
)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

# Patch before the app is imported so the overlay loader uses the test database
database_module.engine = test_engine
database_module.AsyncSessionLocal = TestSessionLocal

from wedsite import models  # noqa: E402, F401
from wedsite.database import get_db  # noqa: E402
from wedsite.i18n.store import LocaleStore  # noqa: E402
from wedsite.main import app  # noqa: E402
from wedsite.middleware.rate_limit import limiter  # noqa: E402
from wedsite.models.admin_user import AdminRole, AdminUser  # noqa: E402
from wedsite.models.template import Template  # noqa: E402
from wedsite.services.config_composer import ConfigComposer  # noqa: E402
from wedsite.services.translation_overlay import TranslationOverlay  # noqa: E402
from wedsite.services.translation_service import load_overrides  # noqa: E402
from utils.mock_utils import auth_headers, create_test_admin, create_test_template  # noqa: E402


async def override_get_db():
    async with TestSessionLocal() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with empty rate-limit buckets."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
async def setup_test_database():
    """Create every table before the test and drop them afterwards."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def test_db(setup_test_database) -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
def locale_store() -> LocaleStore:
    return LocaleStore()


@pytest.fixture
async def overlay(setup_test_database, locale_store) -> AsyncGenerator[TranslationOverlay, None]:
    """Overlay backed by the test database, already loaded."""
    overlay = TranslationOverlay(locale_store, loader=load_overrides, poll_interval=0.05)
    await overlay.load()
    yield overlay
    await overlay.close()


@pytest.fixture
def composer(overlay) -> ConfigComposer:
    return ConfigComposer(overlay, ready_timeout=1.0)


@pytest.fixture
async def client(overlay, composer, locale_store) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app with fresh per-test overlay and composer."""
    app.state.locale_store = locale_store
    app.state.overlay = overlay
    app.state.composer = composer
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def template(test_db: AsyncSession) -> Template:
    return await create_test_template(
        test_db,
        "t1",
        owner_email="couple@example.com",
        config={"couple": {"combinedNames": "Anna & David"}, "wedding": {"date": "2026-09-12"}},
    )


@pytest.fixture
async def other_template(test_db: AsyncSession) -> Template:
    return await create_test_template(test_db, "t2", template_key="classic")


@pytest.fixture
async def platform_admin(test_db: AsyncSession) -> AdminUser:
    return await create_test_admin(test_db, "platform@example.com", AdminRole.platform_admin)


@pytest.fixture
async def template_admin(test_db: AsyncSession, template: Template) -> AdminUser:
    return await create_test_admin(test_db, "couple-admin@example.com", AdminRole.template_admin, template.id)


@pytest.fixture
def platform_headers(platform_admin: AdminUser) -> dict:
    return auth_headers(platform_admin)


@pytest.fixture
def template_admin_headers(template_admin: AdminUser) -> dict:
    return auth_headers(template_admin)
