"""Proxy Lookup Use Case Unit Tests"""
import json
from functools import partial

import pytest

from src.application.ports import LookupInvocationError
from src.application.use_cases.empresas import (
    OperationDispatcher,
    ProxyLookupInput,
    ProxyLookupUseCase,
)
from src.handlers.empresas_bd.handler import handle_event


def backend_envelope(status_code, body):
    return {"statusCode": status_code, "body": json.dumps(body)}


class TestBuildRequest:
    """呼び出しペイロードの組み立て"""

    def test_with_nro_ruc(self):
        assert ProxyLookupUseCase.build_request("12345678901") == {
            "operation": "GET",
            "payload": {"NRO_RUC": "12345678901"},
        }

    @pytest.mark.parametrize("nro_ruc", [None, ""])
    def test_without_nro_ruc(self, nro_ruc):
        assert ProxyLookupUseCase.build_request(nro_ruc) == {"operation": "GET"}


class TestProxyLookup:
    """プロキシ処理のテスト"""

    def test_success_wraps_data(self, fake_lookup_client):
        """正常: 200 は {message, data} に包み直す"""
        # Arrange
        items = [{"id": 1, "name": "Test Company"}]
        client = fake_lookup_client(backend_envelope(200, items))
        use_case = ProxyLookupUseCase(client)

        # Act
        envelope = use_case.execute(ProxyLookupInput(nro_ruc="12345678901"))

        # Assert
        assert client.requests == [
            {"operation": "GET", "payload": {"NRO_RUC": "12345678901"}}
        ]
        assert envelope.status_code == 200
        assert envelope.headers == {"Content-Type": "application/json"}
        assert json.loads(envelope.body) == {"message": "Consulta exitosa", "data": items}

    def test_list_all_sends_operation_only(self, fake_lookup_client):
        """正常: nroRuc なしは operation のみ"""
        client = fake_lookup_client(backend_envelope(200, []))

        envelope = ProxyLookupUseCase(client).execute(ProxyLookupInput())

        assert client.requests == [{"operation": "GET"}]
        assert json.loads(envelope.body)["data"] == []

    @pytest.mark.parametrize("nro_ruc", [None, ""])
    def test_missing_required_parameter(self, fake_lookup_client, nro_ruc):
        """異常: 必須の nroRuc がなければバックエンドを呼ばず 400"""
        client = fake_lookup_client(backend_envelope(200, []))

        envelope = ProxyLookupUseCase(client).execute(
            ProxyLookupInput(nro_ruc=nro_ruc, require_nro_ruc=True)
        )

        assert client.requests == []
        assert envelope.status_code == 400
        assert json.loads(envelope.body) == {
            "message": "Error en la solicitud",
            "error": "nroRuc es requerido en la URL",
        }

    @pytest.mark.parametrize("status_code", [400, 500])
    def test_backend_error_is_propagated(self, fake_lookup_client, status_code):
        """異常: バックエンドのエラーはステータスとメッセージを引き継ぐ"""
        client = fake_lookup_client(backend_envelope(status_code, {"error": "DynamoDB error"}))

        envelope = ProxyLookupUseCase(client).execute(ProxyLookupInput())

        assert envelope.status_code == status_code
        assert json.loads(envelope.body) == {
            "message": "Error en la consulta",
            "error": "DynamoDB error",
        }

    def test_invocation_failure_returns_500(self, fake_lookup_client):
        """異常: 呼び出し失敗は 500"""
        client = fake_lookup_client(error=LookupInvocationError("Task timed out"))

        envelope = ProxyLookupUseCase(client).execute(ProxyLookupInput())

        assert envelope.status_code == 500
        assert json.loads(envelope.body) == {
            "message": "Error en la consulta",
            "error": "Task timed out",
        }

    def test_unparseable_backend_body_returns_500(self, fake_lookup_client):
        """異常: バックエンドの body が JSON でない"""
        client = fake_lookup_client({"statusCode": 200, "body": "<html>"})

        envelope = ProxyLookupUseCase(client).execute(ProxyLookupInput())

        assert envelope.status_code == 500
        assert json.loads(envelope.body)["message"] == "Error en la consulta"


class TestRoundTrip:
    """フロント → バックエンド → ストアの往復"""

    def test_data_equals_store_records(self, fake_record_store):
        """正常: プロキシ経由の data はストアのレコードと一致"""
        from src.infrastructure.gateways.lookup import InProcessLookupClient

        store = fake_record_store()
        dispatcher = OperationDispatcher(store)
        client = InProcessLookupClient(partial(handle_event, dispatcher=dispatcher))

        envelope = ProxyLookupUseCase(client).execute(ProxyLookupInput())

        assert json.loads(envelope.body)["data"] == store.records

    def test_query_result_round_trip(self, fake_record_store):
        from src.infrastructure.gateways.lookup import InProcessLookupClient

        store = fake_record_store()
        dispatcher = OperationDispatcher(store)
        client = InProcessLookupClient(partial(handle_event, dispatcher=dispatcher))

        envelope = ProxyLookupUseCase(client).execute(
            ProxyLookupInput(nro_ruc="20100047218", require_nro_ruc=True)
        )

        assert store.queried_keys == ["20100047218"]
        assert json.loads(envelope.body)["data"] == store.query_by_key("20100047218")
