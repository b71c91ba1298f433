"""Lambda Lookup Client"""
from __future__ import annotations

import json
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.lookup_client import ILookupClient, LookupInvocationError

logger = structlog.get_logger()


class LambdaLookupClient(ILookupClient):
    """
    バックエンド Lambda を RequestResponse で同期呼び出しするクライアント

    関数名（または ARN）は設定から注入し、コードに埋め込まない。
    """

    def __init__(
        self,
        function_name: str,
        region: str | None = None,
        client: Any = None,
    ):
        self.function_name = function_name
        self._lambda = client or boto3.client("lambda", region_name=region)

    def invoke_lookup(self, request: dict[str, Any]) -> dict[str, Any]:
        """バックエンド関数を呼び出してエンベロープを返す"""
        log = logger.bind(function_name=self.function_name)
        log.info("lookup_invocation_started", operation=request.get("operation"))

        try:
            result = self._lambda.invoke(
                FunctionName=self.function_name,
                InvocationType="RequestResponse",
                Payload=json.dumps(request).encode("utf-8"),
            )
        except (ClientError, BotoCoreError) as e:
            log.error("lookup_invocation_failed", error=str(e))
            raise LookupInvocationError(str(e)) from e

        raw = result["Payload"].read()
        try:
            payload = json.loads(raw) if raw else None
        except ValueError as e:
            raise LookupInvocationError(f"Respuesta no válida de {self.function_name}") from e

        # 未処理例外の場合は FunctionError が付き、Payload に errorMessage が入る
        if result.get("FunctionError"):
            message = payload.get("errorMessage") if isinstance(payload, dict) else None
            log.error("lookup_function_error", function_error=result["FunctionError"])
            raise LookupInvocationError(message or result["FunctionError"])

        if not isinstance(payload, dict) or "statusCode" not in payload:
            raise LookupInvocationError(f"Respuesta no válida de {self.function_name}")

        log.info("lookup_invocation_completed", status_code=payload["statusCode"])
        return payload
