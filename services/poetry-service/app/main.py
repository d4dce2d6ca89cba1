"""
Poetry Service - FastAPI Application
Signup, login, poems, likes, reports and admin operations for Dead Poets
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from shared.utils.logger import setup_logging, get_request_logger
from shared.utils.security import SecurityUtils

from app.config import Settings, get_settings
from app.routes import auth, poems, likes, reports, users, health
from app.utils.database import PoetryDatabase
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)
request_logger = get_request_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings: Settings = app.state.settings
    database: PoetryDatabase = app.state.database

    # Startup
    logger.info(f"{settings.app_name} starting up...")
    await database.initialize()
    if settings.auto_create_schema:
        await database.apply_schema()
    logger.info(f"{settings.app_name} startup complete")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down...")
    await database.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application

    The database pool and signing key are created here and kept on app.state;
    the pool connects when the lifespan starts.
    """
    settings = settings or get_settings()
    setup_logging(settings.logging_config_path, settings.log_level, settings.log_format)

    if settings.uses_insecure_secret:
        logger.warning("JWT_SECRET is not set; tokens are signed with the insecure default secret")

    app = FastAPI(
        title=settings.app_name,
        description="Poetry-sharing community backend",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.settings = settings
    app.state.database = PoetryDatabase.from_settings(settings)
    app.state.security = SecurityUtils(
        jwt_secret=settings.jwt_secret,
        jwt_algorithm=settings.jwt_algorithm,
        token_expire_days=settings.jwt_expire_days,
        bcrypt_rounds=settings.bcrypt_rounds
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        request_logger.log_request(
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
            request.client.host if request.client else None
        )
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc):
        """Custom HTTP exception handler"""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": True,
                "message": exc.detail,
                "status_code": exc.status_code
            },
            headers=exc.headers
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request, exc):
        """Database failures on listing endpoints"""
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": exc.message}
        )

    # Include routers
    prefix = settings.api_prefix
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(poems.router, prefix=prefix, tags=["Poems"])
    app.include_router(likes.router, prefix=prefix, tags=["Likes"])
    app.include_router(reports.router, prefix=prefix, tags=["Reports"])
    app.include_router(users.router, prefix=prefix, tags=["Users"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=5000,
        reload=app.state.settings.debug
    )
