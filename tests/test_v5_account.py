import json
import urllib.request
from urllib.parse import urlencode

import pytest

from bybitapi.enums import AccountType
from bybitapi.mockserver import handler_option, json_equal, serve
from bybitapi.response import ErrorResponse, RateLimitError
from bybitapi.v5_account import V5AccountService


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


_ZERO_COIN_FIELDS = (
    "accruedInterest",
    "totalOrderIM",
    "totalPositionMM",
    "unrealisedPnl",
    "borrowAmount",
    "totalPositionIM",
    "cumRealisedPnl",
)

_BTC_COIN = {
    **dict.fromkeys(_ZERO_COIN_FIELDS, "0"),
    **dict.fromkeys(("availableToWithdraw", "equity", "walletBalance"), "0.805994"),
    "availableToBorrow": "2.5",
    "usdValue": "12920.95352538",
    "coin": "BTC",
}

_UNIFIED_ACCOUNT = dict(
    totalEquity="18070.32797922",
    totalMarginBalance="18070.32797922",
    accountIMRate="0.0101",
    accountMMRate="0",
    totalInitialMargin="182.60183684",
    totalMaintenanceMargin="0.38106773",
    totalAvailableBalance="17887.72614237",
    totalWalletBalance="18070.43799271",
    totalPerpUPL="-0.11001349",
    accountType="UNIFIED",
    coin=[_BTC_COIN],
)

WALLET_RESULT = {"list": [_UNIFIED_ACCOUNT]}

ACCOUNT_INFO_RESULT = dict(
    marginMode="REGULAR_MARGIN",
    updatedTime="1672106576000",
    unifiedMarginStatus=3,
)


def test_get_wallet_balance_success():
    body = json.dumps({"result": WALLET_RESULT}).encode()
    with serve(handler_option("/v5/account/wallet-balance", "GET", 200, body)) as server:
        service = V5AccountService(_HttpTransport(server.url))
        resp = service.get_wallet_balance(AccountType.UNIFIED, None)
    assert json_equal(WALLET_RESULT, resp["result"])


def test_get_account_info_success():
    body = json.dumps({"result": ACCOUNT_INFO_RESULT}).encode()
    with serve(handler_option("/v5/account/info", "GET", 200, body)) as server:
        service = V5AccountService(_HttpTransport(server.url))
        resp = service.get_account_info()
    assert json_equal(ACCOUNT_INFO_RESULT, resp["result"])


def test_wallet_balance_query_without_coins():
    transport = _RecordingTransport()
    V5AccountService(transport).get_wallet_balance(AccountType.UNIFIED, None)
    assert transport.calls == [("/v5/account/wallet-balance", {"accountType": "UNIFIED"})]


def test_wallet_balance_query_joins_coins():
    transport = _RecordingTransport()
    V5AccountService(transport).get_wallet_balance(AccountType.NORMAL, ["USDT", "USDC"])
    assert transport.calls == [
        ("/v5/account/wallet-balance", {"accountType": "CONTRACT", "coin": "USDT,USDC"})
    ]


def test_wallet_balance_empty_coins_omits_coin():
    transport = _RecordingTransport()
    V5AccountService(transport).get_wallet_balance("UNIFIED", [])
    assert "coin" not in transport.calls[0][1]


def test_account_info_sends_empty_query():
    transport = _RecordingTransport()
    V5AccountService(transport).get_account_info()
    assert transport.calls == [("/v5/account/info", {})]


def test_error_code_raises_error_response():
    body = json.dumps({"retCode": 10003, "retMsg": "API key is invalid."}).encode()
    with pytest.raises(ErrorResponse) as info:
        V5AccountService(_RecordingTransport(body)).get_account_info()
    assert info.value.ret_code == 10003
    assert str(info.value) == "10003, API key is invalid."


def test_rate_limit_code_raises_rate_limit_error():
    body = json.dumps({"retCode": 10006, "retMsg": "Too many visits!"}).encode()
    with pytest.raises(RateLimitError):
        V5AccountService(_RecordingTransport(body)).get_wallet_balance(AccountType.UNIFIED)