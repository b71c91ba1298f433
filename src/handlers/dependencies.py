"""Handler Dependencies"""
from __future__ import annotations

from src.application.use_cases.empresas import OperationDispatcher, ProxyLookupUseCase
from src.infrastructure.config import Settings, SsmConfigResolver
from src.infrastructure.gateways.lookup import LambdaLookupClient
from src.infrastructure.repositories import DynamoDBEmpresaStore


def build_dispatcher(settings: Settings) -> OperationDispatcher:
    """SSM Resolver + DynamoDB Store で Dispatcher を組み立てる"""
    resolver = SsmConfigResolver(region=settings.aws_region)
    store = DynamoDBEmpresaStore(
        config_resolver=resolver,
        table_name_parameter=settings.table_name_parameter,
        index_name_parameter=settings.index_name_parameter,
        region=settings.aws_region,
    )
    return OperationDispatcher(store)


def build_proxy_use_case(settings: Settings) -> ProxyLookupUseCase:
    """Lambda 呼び出しクライアントでプロキシを組み立てる"""
    client = LambdaLookupClient(
        function_name=settings.lookup_function_name,
        region=settings.aws_region,
    )
    return ProxyLookupUseCase(client)
