"""
Consultar RUC Lambda Handler

全企業の一覧を返すフロント関数。
バックエンド関数 (empresas_bd) に {"operation": "GET"} を渡して結果を包み直す。
"""
import json
import logging
from functools import lru_cache
from typing import Any

from src.application.use_cases.empresas import ProxyLookupInput, ProxyLookupUseCase
from src.handlers.dependencies import build_proxy_use_case
from src.infrastructure.config import get_settings
from src.infrastructure.logging_config import configure_logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

configure_logging(get_settings().log_level)


@lru_cache()
def get_use_case() -> ProxyLookupUseCase:
    return build_proxy_use_case(get_settings())


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    logger.info(f"Event: {json.dumps(event, default=str)}")
    return get_use_case().execute(ProxyLookupInput()).to_dict()
