"""DynamoDB Empresa Store Implementation"""
from __future__ import annotations

from typing import Any, Callable

import boto3
import structlog
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.config_resolver import IConfigResolver
from src.application.ports.record_store import (
    DataAccessError,
    IRecordStore,
    NotInitializedError,
    Record,
)
from src.domain.empresa.value_objects import NRO_RUC_ATTRIBUTE

logger = structlog.get_logger()


class DynamoDBEmpresaStore(IRecordStore):
    """
    DynamoDB ベースの企業レコードストア

    テーブル名とインデックス名は SSM から解決する。
    1 MB を超える結果は LastEvaluatedKey をたどって全ページ取得する。
    呼び出し側へのページネーションは提供しない。
    """

    def __init__(
        self,
        config_resolver: IConfigResolver,
        table_name_parameter: str,
        index_name_parameter: str,
        region: str | None = None,
        dynamodb: Any = None,
    ):
        self._config = config_resolver
        self._table_name_parameter = table_name_parameter
        self._index_name_parameter = index_name_parameter
        self._dynamodb = dynamodb or boto3.resource("dynamodb", region_name=region)
        self.table_name: str | None = None
        self.index_name: str | None = None

    @property
    def is_initialized(self) -> bool:
        return bool(self.table_name and self.index_name)

    def initialize(self) -> None:
        """
        テーブル名・インデックス名を解決

        どちらかの解決に失敗した場合は未初期化のまま例外を伝播する。
        """
        table_name = self._config.resolve(self._table_name_parameter)
        index_name = self._config.resolve(self._index_name_parameter)
        self.table_name = table_name
        self.index_name = index_name

    def query_by_key(self, key: str) -> list[Record]:
        """
        RUC でインデックス検索

        Args:
            key: 登録番号（空文字不可）

        Returns:
            一致したレコードのリスト（インデックスの返却順）
        """
        if not self.is_initialized:
            raise NotInitializedError()
        if not key:
            raise ValueError("key must not be empty")

        log = logger.bind(table=self.table_name, index=self.index_name, nro_ruc=key)
        log.info("query_by_key_started")

        table = self._dynamodb.Table(self.table_name)
        items = self._collect(
            table.query,
            IndexName=self.index_name,
            KeyConditionExpression=Key(NRO_RUC_ATTRIBUTE).eq(key),
        )

        log.info("query_by_key_completed", count=len(items))
        return items

    def scan_all(self) -> list[Record]:
        """全件スキャン"""
        if not self.is_initialized:
            raise NotInitializedError()

        log = logger.bind(table=self.table_name)
        log.info("scan_all_started")

        table = self._dynamodb.Table(self.table_name)
        items = self._collect(table.scan)

        log.info("scan_all_completed", count=len(items))
        return items

    def _collect(self, operation: Callable[..., dict[str, Any]], **params: Any) -> list[Record]:
        """全ページを取得して連結"""
        items: list[Record] = []
        try:
            while True:
                response = operation(**params)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    return items
                params["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            logger.error("data_access_failed", table=self.table_name, error=str(e))
            raise DataAccessError(str(e)) from e
