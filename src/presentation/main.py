"""FastAPI Application Entry Point (local development)"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI

from src.infrastructure.config import get_settings
from src.infrastructure.logging_config import configure_logging
from src.presentation.api.routes import empresa_routes, health_routes
from src.presentation.middleware import LoggingMiddleware, error_handlers

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクル管理"""
    settings = get_settings()
    logger.info(
        "application_starting",
        service=settings.service_name,
        environment=settings.environment,
    )
    yield
    logger.info("application_shutting_down")


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションを作成

    API Gateway + フロント関数と同じ経路をローカルで再現する。
    バックエンド関数はプロセス内で呼び出す。
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="RUC System API",
        description="Company lookup by RUC backed by DynamoDB",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
    )

    app.add_middleware(LoggingMiddleware)

    for exception_class, handler in error_handlers.items():
        app.add_exception_handler(exception_class, handler)

    app.include_router(health_routes.router, tags=["Health"])
    app.include_router(empresa_routes.router, prefix="/empresas", tags=["Empresas"])

    return app


app = create_app()
