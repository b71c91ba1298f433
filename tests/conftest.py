"""Shared fixtures"""
from typing import Any

import boto3
import pytest
from moto import mock_aws

from src.application.ports.config_resolver import IConfigResolver
from src.application.ports.lookup_client import ILookupClient
from src.application.ports.record_store import IRecordStore, NotInitializedError

REGION = "us-east-1"
TABLE_NAME = "GRUPO5.FACT_EMPRESAS"
INDEX_NAME = "NRO_RUC-index"
TABLE_NAME_PARAMETER = "/dev/rucsystem/database/table-name"
INDEX_NAME_PARAMETER = "/dev/rucsystem/database/index-name"

EMPRESAS = [
    {
        "ID_EMPRESA": "1",
        "NRO_RUC": "20100047218",
        "RAZON_SOCIAL": "BANCO DE CRÉDITO DEL PERÚ",
        "ESTADO": "ACTIVO",
        "ANIO_INICIO": 1889,
    },
    {
        "ID_EMPRESA": "2",
        "NRO_RUC": "20131312955",
        "RAZON_SOCIAL": "SUPERINTENDENCIA NACIONAL DE ADUANAS",
        "ESTADO": "ACTIVO",
        "ANIO_INICIO": 1988,
    },
    {
        "ID_EMPRESA": "3",
        "NRO_RUC": "12345678901",
        "RAZON_SOCIAL": "Test Company",
        "ESTADO": "BAJA",
        "ANIO_INICIO": 2015,
    },
]


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """moto 用のダミー認証情報"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def aws():
    with mock_aws():
        yield


@pytest.fixture
def ssm_client(aws):
    return boto3.client("ssm", region_name=REGION)


@pytest.fixture
def ssm_parameters(ssm_client):
    """テーブル名・インデックス名のパラメータを登録"""
    ssm_client.put_parameter(Name=TABLE_NAME_PARAMETER, Value=TABLE_NAME, Type="String")
    ssm_client.put_parameter(Name=INDEX_NAME_PARAMETER, Value=INDEX_NAME, Type="String")
    return ssm_client


@pytest.fixture
def empresas_table(aws):
    """NRO_RUC の GSI を持つ企業テーブルを作成してデータを投入"""
    dynamodb = boto3.resource("dynamodb", region_name=REGION)
    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[{"AttributeName": "ID_EMPRESA", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "ID_EMPRESA", "AttributeType": "S"},
            {"AttributeName": "NRO_RUC", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
        GlobalSecondaryIndexes=[
            {
                "IndexName": INDEX_NAME,
                "KeySchema": [{"AttributeName": "NRO_RUC", "KeyType": "HASH"}],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
    )
    for item in EMPRESAS:
        table.put_item(Item=item)
    return table


# === Fakes ===


class FakeConfigResolver(IConfigResolver):
    """辞書ベースの Config Resolver"""

    def __init__(self, values: dict[str, str] | None = None, error: Exception | None = None):
        self.values = values or {
            TABLE_NAME_PARAMETER: TABLE_NAME,
            INDEX_NAME_PARAMETER: INDEX_NAME,
        }
        self.error = error
        self.calls: list[str] = []

    def resolve(self, name: str) -> str:
        self.calls.append(name)
        if self.error:
            raise self.error
        return self.values[name]


class FakeRecordStore(IRecordStore):
    """メモリ上の Record Store"""

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        init_error: Exception | None = None,
        data_error: Exception | None = None,
    ):
        self.records = records if records is not None else [dict(e) for e in EMPRESAS]
        self.init_error = init_error
        self.data_error = data_error
        self.initialized = False
        self.initialize_calls = 0
        self.queried_keys: list[str] = []
        self.scan_calls = 0

    def initialize(self) -> None:
        self.initialize_calls += 1
        if self.init_error:
            raise self.init_error
        self.initialized = True

    def query_by_key(self, key: str) -> list[dict[str, Any]]:
        if not self.initialized:
            raise NotInitializedError()
        self.queried_keys.append(key)
        if self.data_error:
            raise self.data_error
        return [r for r in self.records if r.get("NRO_RUC") == key]

    def scan_all(self) -> list[dict[str, Any]]:
        if not self.initialized:
            raise NotInitializedError()
        self.scan_calls += 1
        if self.data_error:
            raise self.data_error
        return list(self.records)


class FakeLookupClient(ILookupClient):
    """固定のエンベロープを返す Lookup Client"""

    def __init__(self, envelope: dict[str, Any] | None = None, error: Exception | None = None):
        self.envelope = envelope
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def invoke_lookup(self, request: dict[str, Any]) -> dict[str, Any]:
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.envelope


@pytest.fixture
def fake_config_resolver():
    return FakeConfigResolver


@pytest.fixture
def fake_record_store():
    return FakeRecordStore


@pytest.fixture
def fake_lookup_client():
    return FakeLookupClient
