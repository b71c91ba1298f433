"""SSM Parameter Store Config Resolver"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.config_resolver import (
    ConfigurationUnavailableError,
    IConfigResolver,
)

logger = structlog.get_logger()


class SsmConfigResolver(IConfigResolver):
    """
    SSM Parameter Store ベースの Config Resolver

    取得した値はインスタンス内にキャッシュし、同じキーに対して
    リモート呼び出しは一度だけ行う。失敗はキャッシュしない。
    インスタンスは実行コンテキストごとに一つ作成する。
    """

    def __init__(self, region: str | None = None, client: Any = None):
        self._ssm = client or boto3.client("ssm", region_name=region)
        self._cache: dict[str, str] = {}

    def resolve(self, name: str) -> str:
        """
        パラメータ値を取得

        Args:
            name: パラメータ名（例: "/dev/rucsystem/database/table-name"）

        Returns:
            パラメータの文字列値

        Raises:
            ConfigurationUnavailableError: パラメータが存在しない・取得失敗・空値
        """
        if not name:
            raise ValueError("parameter name must not be empty")

        cached = self._cache.get(name)
        if cached is not None:
            return cached

        log = logger.bind(parameter=name)
        log.info("resolving_parameter")

        try:
            response = self._ssm.get_parameter(Name=name, WithDecryption=False)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            log.error("parameter_resolution_failed", error_code=code, error=str(e))
            raise ConfigurationUnavailableError(name, str(e)) from e
        except BotoCoreError as e:
            log.error("parameter_resolution_failed", error=str(e))
            raise ConfigurationUnavailableError(name, str(e)) from e

        value = response.get("Parameter", {}).get("Value")
        if not value:
            log.error("parameter_empty")
            raise ConfigurationUnavailableError(name, "empty value")

        self._cache[name] = value
        log.info("parameter_resolved")
        return value
