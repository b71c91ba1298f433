"""Config Resolver Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.empresa.exceptions import RucLookupError


class ConfigurationUnavailableError(RucLookupError):
    """設定値を取得できないエラー"""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"No se pudo obtener el parámetro '{name}': {reason}")


class IConfigResolver(ABC):
    """
    Config Resolver Interface

    外部パラメータストアから名前付きの設定値を取得する。
    同一実行コンテキスト内では一度取得した値をキャッシュする。
    """

    @abstractmethod
    def resolve(self, name: str) -> str:
        """設定値を取得"""
        pass
