"""API Dependencies"""
from __future__ import annotations

from functools import lru_cache, partial
from typing import Annotated

from fastapi import Depends

from src.application.use_cases.empresas import OperationDispatcher, ProxyLookupUseCase
from src.handlers.dependencies import build_dispatcher
from src.handlers.empresas_bd.handler import handle_event
from src.infrastructure.config import get_settings
from src.infrastructure.gateways.lookup import InProcessLookupClient


@lru_cache()
def get_dispatcher() -> OperationDispatcher:
    """バックエンド Dispatcher の依存性注入（プロセスで一つ）"""
    return build_dispatcher(get_settings())


def get_proxy_use_case(
    dispatcher: Annotated[OperationDispatcher, Depends(get_dispatcher)]
) -> ProxyLookupUseCase:
    """
    プロキシ ユースケースの依存性注入

    Lambda 呼び出しの代わりにバックエンドハンドラをプロセス内で呼ぶ。
    """
    client = InProcessLookupClient(partial(handle_event, dispatcher=dispatcher))
    return ProxyLookupUseCase(client)
