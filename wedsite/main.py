import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wedsite.config import settings
from wedsite.exception_handlers import register_exception_handlers
from wedsite.i18n.store import LocaleStore
from wedsite.middleware.language import LanguageMiddleware
from wedsite.middleware.logging import StructuredLoggingMiddleware, configure_logging
from wedsite.middleware.rate_limit import configure_rate_limiting
from wedsite.routes import auth, health, platform_admin, pricing, templates, translations
from wedsite.services.config_composer import ConfigComposer
from wedsite.services.translation_overlay import TranslationOverlay
from wedsite.services.translation_service import load_overrides

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load translation overrides before serving; stop live polling on shutdown."""
    logger.info("Starting %s %s (%s)", settings.app_name, settings.app_version, settings.environment)
    await app.state.overlay.load()
    yield
    logger.info("Shutting down the application...")
    await app.state.overlay.close()


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    configure_logging(settings.log_level, json_format=settings.log_format == "json")

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant wedding invitation website backend powered by FastAPI",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    store = LocaleStore(default_locale=settings.default_language)
    overlay = TranslationOverlay(store, loader=load_overrides, poll_interval=settings.translation_poll_interval)
    app.state.locale_store = store
    app.state.overlay = overlay
    app.state.composer = ConfigComposer(
        overlay,
        cache_size=settings.config_cache_size,
        ready_timeout=settings.translation_ready_timeout,
    )

    # Middleware: the last added runs first
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "RateLimit-Limit", "RateLimit-Remaining", "RateLimit-Reset", "Retry-After"],
    )

    register_exception_handlers(app)
    configure_rate_limiting(app)

    app.include_router(health.router)
    app.include_router(auth.router, prefix="/api/auth")
    app.include_router(templates.router, prefix="/api")
    app.include_router(translations.router, prefix="/api")
    app.include_router(pricing.router, prefix="/api/configurable-pricing-plans")
    app.include_router(platform_admin.router, prefix="/api/platform-admin")

    if settings.debug:
        logger.info("Running in %s mode", settings.environment)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return app


app = create_app()
