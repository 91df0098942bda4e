import json
import urllib.request
from urllib.parse import urlencode

import pytest

from bybitapi.enums import TransferStatusV5
from bybitapi.mockserver import handler_option, json_equal, serve
from bybitapi.response import ErrorResponse
from bybitapi.v5_asset import V5AssetService, V5GetInternalTransferRecordsParam

PATH = "/v5/asset/transfer/query-inter-transfer-list"

RESP_BODY = {
    "result": {
        "list": [
            {
                "transferId": "selfTransfer_5ce5b8d9-8477-4bc6-91a4-9a98dad6dc65",
                "coin": "BTC",
                "amount": "0.1",
                "fromAccountType": "SPOT",
                "toAccountType": "CONTRACT",
                "timestamp": "1637939106000",
                "status": "SUCCESS",
            }
        ],
        "nextPageCursor": "eyJtaW5JRCI6MTYyMjgwLCJtYXhJRCI6MTYyMjgwfQ==",
    }
}


class _HttpTransport:
    def __init__(self, base_url):
        self.base_url = base_url

    def get_v5_privately(self, path, query):
        url = self.base_url + path
        if query:
            url += "?" + urlencode(query)
        with urllib.request.urlopen(url) as resp:
            return resp.read()


class _RecordingTransport:
    def __init__(self, body=b"{}"):
        self.body = body
        self.calls = []

    def get_v5_privately(self, path, query):
        self.calls.append((path, dict(query)))
        return self.body


def test_get_internal_transfer_records_success():
    body = json.dumps(RESP_BODY).encode()
    with serve(handler_option(PATH, "GET", 200, body)) as server:
        service = V5AssetService(_HttpTransport(server.url))
        resp = service.get_internal_transfer_records(V5GetInternalTransferRecordsParam())
    assert json_equal(RESP_BODY["result"], resp["result"])


def test_error_code_raises():
    body = json.dumps({"retCode": 10003, "retMsg": "API key is invalid."}).encode()
    service = V5AssetService(_RecordingTransport(body))
    with pytest.raises(ErrorResponse) as info:
        service.get_internal_transfer_records(V5GetInternalTransferRecordsParam())
    assert info.value.ret_msg == "API key is invalid."


def test_empty_param_gives_empty_query():
    assert V5GetInternalTransferRecordsParam().to_query() == {}


def test_param_query_names():
    param = V5GetInternalTransferRecordsParam(
        transfer_id="selfTransfer_5ce5b8d9-8477-4bc6-91a4-9a98dad6dc65",
        coin="BTC",
        status=TransferStatusV5.SUCCESS,
        start_time=1637939106000,
        end_time=1637939106000,
        limit=1,
        cursor="eyJtaW5JRCI6MTYyMjgwLCJtYXhJRCI6MTYyMjgwfQ==",
    )
    assert param.to_query() == {
        "transferId": "selfTransfer_5ce5b8d9-8477-4bc6-91a4-9a98dad6dc65",
        "coin": "BTC",
        "status": "SUCCESS",
        "startTime": "1637939106000",
        "endTime": "1637939106000",
        "limit": "1",
        "cursor": "eyJtaW5JRCI6MTYyMjgwLCJtYXhJRCI6MTYyMjgwfQ==",
    }


def test_service_sends_path_and_query():
    transport = _RecordingTransport()
    V5AssetService(transport).get_internal_transfer_records(
        V5GetInternalTransferRecordsParam(limit=1)
    )
    assert transport.calls == [(PATH, {"limit": "1"})]