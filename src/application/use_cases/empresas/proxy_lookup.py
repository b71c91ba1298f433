"""Proxy Lookup Use Case"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import structlog

from src.application.ports.lookup_client import ILookupClient
from src.domain.empresa.exceptions import RucLookupError
from src.domain.empresa.value_objects import (
    GET_OPERATION,
    NRO_RUC_ATTRIBUTE,
    ResponseEnvelope,
)

logger = structlog.get_logger()

JSON_HEADERS = {"Content-Type": "application/json"}

SUCCESS_MESSAGE = "Consulta exitosa"
FAILURE_MESSAGE = "Error en la consulta"
BAD_REQUEST_MESSAGE = "Error en la solicitud"


class MissingRequiredParameterError(RucLookupError):
    """必須パスパラメータがない"""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"{parameter} es requerido en la URL")


@dataclass
class ProxyLookupInput:
    """プロキシ入力DTO"""

    nro_ruc: str | None = None
    require_nro_ruc: bool = False


class ProxyLookupUseCase:
    """
    フロント関数の共通処理 ユースケース

    1. 正規化済みの呼び出しペイロードを組み立て
    2. バックエンド関数を同期呼び出し
    3. エンベロープを解釈し、{message, data|error} で包み直す
    """

    def __init__(self, lookup_client: ILookupClient):
        self._client = lookup_client

    def execute(self, input_data: ProxyLookupInput) -> ResponseEnvelope:
        """ユースケースを実行"""
        log = logger.bind(nro_ruc=input_data.nro_ruc)

        if input_data.require_nro_ruc and not input_data.nro_ruc:
            error = MissingRequiredParameterError("nroRuc")
            log.warning("missing_required_parameter", parameter=error.parameter)
            return self._wrap(400, {"message": BAD_REQUEST_MESSAGE, "error": str(error)})

        request = self.build_request(input_data.nro_ruc)

        try:
            envelope = self._client.invoke_lookup(request)
            status_code, body = self.unwrap(envelope)
        except Exception as e:
            log.exception("proxy_lookup_failed", error=str(e))
            return self._wrap(500, {"message": FAILURE_MESSAGE, "error": str(e)})

        if status_code == 200:
            log.info("proxy_lookup_completed", count=len(body) if isinstance(body, list) else None)
            return self._wrap(200, {"message": SUCCESS_MESSAGE, "data": body})

        error = body.get("error") if isinstance(body, dict) else body
        log.warning("proxy_lookup_backend_error", status_code=status_code, error=error)
        return self._wrap(status_code, {"message": FAILURE_MESSAGE, "error": error})

    @staticmethod
    def build_request(nro_ruc: str | None) -> dict[str, Any]:
        """バックエンド呼び出しペイロードを作成"""
        if nro_ruc:
            return {"operation": GET_OPERATION, "payload": {NRO_RUC_ATTRIBUTE: nro_ruc}}
        return {"operation": GET_OPERATION}

    @staticmethod
    def unwrap(envelope: dict[str, Any]) -> tuple[int, Any]:
        """バックエンドのエンベロープから (statusCode, 本文) を取り出す"""
        status_code = int(envelope["statusCode"])
        raw_body = envelope.get("body")
        return status_code, json.loads(raw_body) if raw_body else None

    @staticmethod
    def _wrap(status_code: int, body: dict[str, Any]) -> ResponseEnvelope:
        return ResponseEnvelope.of(status_code, body, headers=dict(JSON_HEADERS))
