"""Dispatch Operation Use Case"""
from __future__ import annotations

import structlog

from src.application.ports.record_store import IRecordStore
from src.domain.empresa.exceptions import RucLookupError
from src.domain.empresa.value_objects import (
    GET_OPERATION,
    NormalizedRequest,
    ResponseEnvelope,
)

logger = structlog.get_logger()


class UnsupportedOperationError(RucLookupError):
    """未対応のオペレーション"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f'Operación no soportada: "{operation}"')


class OperationDispatcher:
    """
    オペレーション振り分け ユースケース

    1. オペレーションを判定（GET 以外は 400）
    2. Record Store を初期化（毎回呼ぶ。設定値はキャッシュ済み）
    3. NRO_RUC があればインデックス検索、なければ全件スキャン
    4. 結果を 200 エンベロープで返す

    2〜3 の例外はすべてここで 500 エンベロープに変換する。
    """

    def __init__(self, record_store: IRecordStore):
        self._store = record_store

    def dispatch(self, request: NormalizedRequest) -> ResponseEnvelope:
        """リクエストを処理してエンベロープを返す"""
        log = logger.bind(operation=request.operation)

        if request.operation != GET_OPERATION:
            error = UnsupportedOperationError(request.operation)
            log.warning("unsupported_operation")
            return ResponseEnvelope.of(400, {"error": str(error)})

        try:
            return self.handle_get(request)
        except Exception as e:
            log.exception("dispatch_failed", error=str(e))
            return ResponseEnvelope.of(500, {"error": str(e)})

    def handle_get(self, request: NormalizedRequest) -> ResponseEnvelope:
        """GET: 検索またはスキャン"""
        self._store.initialize()

        nro_ruc = request.nro_ruc
        if nro_ruc:
            records = self._store.query_by_key(nro_ruc)
        else:
            records = self._store.scan_all()

        logger.info("get_completed", nro_ruc=nro_ruc, count=len(records))
        return ResponseEnvelope.of(200, records)
