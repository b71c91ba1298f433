"""
Empresas BD Lambda Handler

RUC 検索のバックエンド関数:
- SSM からテーブル名・インデックス名を解決（実行コンテキスト内でキャッシュ）
- NRO_RUC があれば GSI で検索、なければ全件スキャン
- HTTP API イベントと直接呼び出しの両方を受け付ける
"""
import json
import logging
from functools import lru_cache
from typing import Any

from src.application.use_cases.empresas import (
    MalformedEventError,
    OperationDispatcher,
    normalize,
)
from src.domain.empresa import ResponseEnvelope
from src.handlers.dependencies import build_dispatcher
from src.infrastructure.config import get_settings
from src.infrastructure.logging_config import configure_logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

configure_logging(get_settings().log_level)


@lru_cache()
def get_dispatcher() -> OperationDispatcher:
    """実行コンテキストごとに一つの Dispatcher（設定キャッシュを共有）"""
    return build_dispatcher(get_settings())


def handle_event(event: Any, dispatcher: OperationDispatcher | None = None) -> dict:
    """イベントを正規化して処理し、Lambda レスポンスを返す"""
    try:
        request = normalize(event)
    except MalformedEventError as e:
        logger.warning(f"Malformed event: {e}")
        return ResponseEnvelope.of(400, {"error": str(e)}).to_dict()
    except Exception as e:
        logger.exception("Normalize error")
        return ResponseEnvelope.of(500, {"error": str(e)}).to_dict()

    logger.info(f"Parsed operation: {request.operation}, payload: {dict(request.payload or {})}")

    try:
        dispatcher = dispatcher or get_dispatcher()
    except Exception as e:
        logger.exception("Dispatcher setup error")
        return ResponseEnvelope.of(500, {"error": str(e)}).to_dict()

    return dispatcher.dispatch(request).to_dict()


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    logger.info(f"Event: {json.dumps(event, default=str)}")
    return handle_event(event)
