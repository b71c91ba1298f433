"""Lookup Client Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.domain.empresa.exceptions import RucLookupError


class LookupInvocationError(RucLookupError):
    """バックエンド関数の呼び出し失敗"""

    pass


class ILookupClient(ABC):
    """
    Lookup Client Interface

    フロント関数からバックエンド関数への呼び出しを抽象化する。
    実装は Lambda 同期呼び出しとプロセス内呼び出しの二つ。
    """

    @abstractmethod
    def invoke_lookup(self, request: dict[str, Any]) -> dict[str, Any]:
        """
        バックエンドを呼び出し、レスポンスエンベロープを返す

        Args:
            request: {"operation": "GET", "payload": {...}} 形式のリクエスト

        Returns:
            {"statusCode": int, "body": str} 形式のエンベロープ
        """
        pass
