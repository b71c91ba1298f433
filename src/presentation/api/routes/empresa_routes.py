"""Empresa API Routes"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from src.application.use_cases.empresas import ProxyLookupInput, ProxyLookupUseCase
from src.domain.empresa import ResponseEnvelope
from src.presentation.api.dependencies import get_proxy_use_case

router = APIRouter()


def _to_response(envelope: ResponseEnvelope) -> Response:
    """プロキシのエンベロープをそのまま HTTP レスポンスにする"""
    return Response(
        content=envelope.body,
        status_code=envelope.status_code,
        headers=envelope.headers,
        media_type="application/json",
    )


@router.get("")
def list_empresas(
    use_case: Annotated[ProxyLookupUseCase, Depends(get_proxy_use_case)],
) -> Response:
    """全企業を取得"""
    return _to_response(use_case.execute(ProxyLookupInput()))


@router.get("/{nro_ruc}")
def get_empresa(
    nro_ruc: str,
    use_case: Annotated[ProxyLookupUseCase, Depends(get_proxy_use_case)],
) -> Response:
    """RUC で企業を検索"""
    input_data = ProxyLookupInput(nro_ruc=nro_ruc, require_nro_ruc=True)
    return _to_response(use_case.execute(input_data))
