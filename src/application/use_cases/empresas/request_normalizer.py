"""Request Normalizer"""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Union

from pydantic import BaseModel, StrictStr, ValidationError

from src.domain.empresa.exceptions import RucLookupError
from src.domain.empresa.value_objects import NRO_RUC_ATTRIBUTE, NormalizedRequest


class MalformedEventError(RucLookupError):
    """どちらの形式にも当てはまらないイベント"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Solicitud inválida: {detail}")


# === Event Variants ===


class HttpContext(BaseModel):
    method: StrictStr


class RequestContext(BaseModel):
    http: HttpContext


class HttpEvent(BaseModel):
    """HTTP API (payload v2) 形式のイベント"""

    requestContext: RequestContext
    body: str | None = None
    isBase64Encoded: bool = False


class DirectInvocationEvent(BaseModel):
    """Lambda 直接呼び出し形式のイベント"""

    operation: StrictStr
    payload: dict[str, Any] | None = None


InboundEvent = Union[HttpEvent, DirectInvocationEvent]


def parse_event(event: Any) -> InboundEvent:
    """
    判別キーでイベント形式を決定してデシリアライズ

    - requestContext があれば HttpEvent
    - operation があれば DirectInvocationEvent
    - どちらもなければ MalformedEventError
    """
    if not isinstance(event, dict):
        raise MalformedEventError("el evento debe ser un objeto JSON")

    if "requestContext" in event:
        model: type[BaseModel] = HttpEvent
    elif "operation" in event:
        model = DirectInvocationEvent
    else:
        raise MalformedEventError("no se encontró 'requestContext' ni 'operation'")

    try:
        return model.model_validate(event)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedEventError(f"campos inválidos: {fields}") from e


def _decode_body(event: HttpEvent) -> dict[str, Any]:
    raw = event.body or "{}"
    if event.isBase64Encoded:
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedEventError("body en base64 no válido") from e
    try:
        body = json.loads(raw or "{}")
    except ValueError as e:
        raise MalformedEventError("body no es JSON válido") from e
    if not isinstance(body, dict):
        raise MalformedEventError("body debe ser un objeto JSON")
    return body


def normalize(event: Any) -> NormalizedRequest:
    """生イベントを NormalizedRequest に変換"""
    parsed = parse_event(event)

    if isinstance(parsed, HttpEvent):
        payload = _decode_body(parsed).get("payload")
        if payload is not None and not isinstance(payload, dict):
            raise MalformedEventError("payload debe ser un objeto JSON")
        _check_nro_ruc(payload)
        return NormalizedRequest(
            operation=parsed.requestContext.http.method,
            payload=payload,
        )

    _check_nro_ruc(parsed.payload)
    return NormalizedRequest(operation=parsed.operation, payload=parsed.payload)


def _check_nro_ruc(payload: dict | None) -> None:
    """NRO_RUC は文字列か整数のみ（偽値は未指定扱い）"""
    value = (payload or {}).get(NRO_RUC_ATTRIBUTE)
    if not value:
        return
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedEventError(f"{NRO_RUC_ATTRIBUTE} debe ser texto o número")
