"""In-Process Lookup Client"""
from __future__ import annotations

import copy
import json
from typing import Any, Callable

from src.application.ports.lookup_client import ILookupClient

EventHandler = Callable[[dict[str, Any]], dict[str, Any]]


class InProcessLookupClient(ILookupClient):
    """
    バックエンドハンドラを同一プロセス内で呼び出すクライアント

    ローカル開発サーバとテストで使用する。リクエストは JSON を経由して
    複製し、Lambda 呼び出しと同じくシリアライズ可能であることを保証する。
    """

    def __init__(self, handler: EventHandler):
        self._handler = handler

    def invoke_lookup(self, request: dict[str, Any]) -> dict[str, Any]:
        event = json.loads(json.dumps(request))
        return copy.deepcopy(self._handler(event))
