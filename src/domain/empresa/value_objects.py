"""Empresa Value Objects"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

GET_OPERATION = "GET"

# 登録番号（RUC）属性名。GSI のパーティションキーでもある
NRO_RUC_ATTRIBUTE = "NRO_RUC"


def _default(value: Any) -> Any:
    """DynamoDB の型を JSON 互換に変換"""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(body: Any) -> str:
    """レスポンスボディを JSON 文字列にシリアライズ"""
    return json.dumps(body, ensure_ascii=False, default=_default)


@dataclass(frozen=True)
class NormalizedRequest:
    """
    正規化済みリクエスト

    HTTP イベントと直接呼び出しイベントのどちらからでも同じ形に変換される。
    生成後は変更しない。
    """

    operation: str
    payload: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.payload is not None:
            object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def nro_ruc(self) -> str | None:
        """ペイロード中の RUC（空の場合は None）"""
        if not self.payload:
            return None
        value = self.payload.get(NRO_RUC_ATTRIBUTE)
        if not value or isinstance(value, bool):
            return None
        if isinstance(value, str):
            return value
        # 数値以外（配列・オブジェクト）はキーとして扱わない
        return str(value) if isinstance(value, int) else None


@dataclass(frozen=True)
class ResponseEnvelope:
    """レスポンスエンベロープ {statusCode, body}"""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def of(
        cls,
        status_code: int,
        body: Any,
        headers: dict[str, str] | None = None,
    ) -> ResponseEnvelope:
        """ボディを JSON 化してエンベロープを作成"""
        return cls(status_code=status_code, body=to_json(body), headers=headers or {})

    def to_dict(self) -> dict[str, Any]:
        """Lambda レスポンス形式に変換"""
        result: dict[str, Any] = {"statusCode": self.status_code}
        if self.headers:
            result["headers"] = dict(self.headers)
        result["body"] = self.body
        return result
