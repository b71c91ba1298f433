"""
Validar RUC Lambda Handler

パスパラメータ nroRuc で企業を検索するフロント関数。
nroRuc がない場合はバックエンドを呼ばずに 400 を返す。
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

    path_params = event.get('pathParameters') or {}
    nro_ruc = path_params.get('nroRuc')
    logger.info(f"nroRuc extracted: {nro_ruc}")

    input_data = ProxyLookupInput(nro_ruc=nro_ruc, require_nro_ruc=True)
    return get_use_case().execute(input_data).to_dict()
