"""Error Handler Middleware"""
from __future__ import annotations

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """汎用エラーハンドラ"""
    logger.error("unhandled_error", error=str(exc), exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Error en la consulta", "error": "Error interno del servidor"},
    )


# エラーハンドラのマッピング
error_handlers = {
    Exception: generic_error_handler,
}
