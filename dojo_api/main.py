# dojo_api/main.py
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .core.config import Settings, get_settings
from .core.database import build_engine, build_session_factory, create_tables
from .core.error_handlers import register_exception_handlers
from .core.logging import setup_logging
from .routers import attendance, auth, classes, events, health, members, payments, progress, reports, sessions, techniques
from .services.payment_service import PaymentSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Dojo API")

    if app.state.settings.create_tables:
        await create_tables(app.state.engine)

    if not app.state.payment_settings.is_configured:
        logger.info("Stripe integration not available: STRIPE_SECRET_KEY not set")

    yield

    logger.info("Shutting down Dojo API")
    await app.state.engine.dispose()
    logger.info("Shutdown complete")


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Dojo API",
        description="Martial-arts school management: members, classes, sessions, attendance and belt progress",
        version=settings.app_version,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.payment_settings = PaymentSettings.from_settings(settings)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
        return response

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        https_only=settings.session_https_only,
        same_site="lax",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(classes.router)
    app.include_router(sessions.router)
    app.include_router(attendance.router)
    app.include_router(members.router)
    app.include_router(progress.router)
    app.include_router(techniques.router)
    app.include_router(events.router)
    app.include_router(payments.router)
    app.include_router(reports.router)

    @app.get("/")
    async def root():
        return {
            "message": "Dojo API",
            "version": settings.app_version,
            "status": "active"
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("dojo_api.main:app", host="0.0.0.0", port=8000, reload=True)
