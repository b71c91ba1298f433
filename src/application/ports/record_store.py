"""Record Store Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.domain.empresa.exceptions import RucLookupError

Record = dict[str, Any]


class NotInitializedError(RucLookupError):
    """初期化前にデータ操作が呼ばれたエラー"""

    def __init__(self, message: str = "El almacén de empresas no ha sido inicializado"):
        super().__init__(message)


class DataAccessError(RucLookupError):
    """データストアへのクエリ・スキャン失敗"""

    pass


class IRecordStore(ABC):
    """
    Record Store Interface

    企業レコードの読み取り専用ストア。
    操作の前に initialize() でテーブル名・インデックス名を解決する必要がある。
    """

    @abstractmethod
    def initialize(self) -> None:
        """テーブル名・インデックス名を解決（冪等）"""
        pass

    @abstractmethod
    def query_by_key(self, key: str) -> list[Record]:
        """RUC でインデックス検索"""
        pass

    @abstractmethod
    def scan_all(self) -> list[Record]:
        """全件スキャン"""
        pass
