# bybitapi

Building blocks for talking to the Bybit exchange: the spot v1 endpoints, the
v5 account and asset endpoints, checks that turn error responses into
exceptions, and tools for testing code that talks to the exchange (a local
HTTP mock server, a local WebSocket server and golden-file helpers).

## What is inside

| Module | Purpose |
| --- | --- |
| `bybitapi.response` | Envelopes `CommonResponse` and `CommonV5Response` (each with `from_dict`), the exceptions `ErrorResponse`, `RateLimitError`, `PathNotFoundError`, `AccessDeniedError`, and `check_response_body`, `check_v3_response_body`, `check_v5_response_body` |
| `bybitapi.enums` | v5 enumerations: `AccountType`, `MarginMode`, `CategoryV5`, `SymbolV5`, `TriggerDirection`, `IsLeverage`, `OrderFilter`, `TriggerBy`, `PositionIdx`, `ContractType`, `InstrumentStatus`, `OptionsType`, `Innovation`, `PositionMode`, `ExecTypeV5`, `TransferStatusV5`, `AccountTypeV5`, `UnifiedMarginStatus` |
| `bybitapi.spot_v1` | `SpotV1Service`, the spot parameter dataclasses (`SpotPostOrderParam`, `SpotOpenOrdersParam`, ...), `to_query`, `parse_depth_bids_asks`, `parse_kline` |
| `bybitapi.v5_account` | `V5AccountService`: `get_wallet_balance`, `get_account_info` |
| `bybitapi.v5_asset` | `V5AssetService.get_internal_transfer_records` and `V5GetInternalTransferRecordsParam` |
| `bybitapi.v5` | `V5Service`, handing out `account()`, `asset()` and `execution()` (the execution group has no calls yet) |
| `bybitapi.testnet` | `TESTNET_BASE_URL`, `TEST_WEBSOCKET_BASE_URL`, `Credentials`, `credentials_from_env` |
| `bybitapi.mockserver` | `serve`, `handler_option`, `HandlerOption`, `json_equal` |
| `bybitapi.mockwebsocket` | `serve_websocket`, `websocket_handler_option`, `WebsocketHandlerOption`, `make_ws_protocol` |
| `bybitapi.golden` | `convert_to_json`, `compare_golden`, `update_file`, `save_to_file` |

## Services and transports

The service classes do not open connections themselves. Each is built on a
transport object that performs the HTTP request and returns the raw response
body as bytes:

- `SpotV1Service` needs `get_publicly`, `get_privately`, `post_form` and
  `delete_privately`, each called as `(path, query)`.
- `V5AccountService`, `V5AssetService` (and so `V5Service`) need
  `get_v5_privately(path, query)`.

Every call checks the body, raises on an error code, and otherwise returns the
decoded JSON object as a `dict`. For `spot_quote_depth` and
`spot_quote_depth_merged` the `bids` and `asks` of the result become lists of
`SpotQuoteDepthBidAsk`; for `spot_quote_kline` the result becomes a list of
`SpotQuoteKline`.

```python
from bybitapi.v5 import V5Service
from bybitapi.enums import AccountType

class FixedTransport:
    def get_v5_privately(self, path, query):
        return b'{"retCode": 0, "retMsg": "OK", "result": {"list": []}}'

balance = V5Service(FixedTransport()).account().get_wallet_balance(AccountType.UNIFIED, ["USDT", "USDC"])
# the transport received {"accountType": "UNIFIED", "coin": "USDT,USDC"}
```

## Checking a response body

```python
from bybitapi.response import ErrorResponse, RateLimitError, check_v5_response_body

body = b'{"retCode": 10001, "retMsg": "params error"}'
try:
    check_v5_response_body(body)
except RateLimitError:
    ...  # codes 10006 and 10018
except ErrorResponse as exc:
    print(exc)  # "10001, params error"
```

`check_response_body` reads the older `ret_code`/`ret_msg` envelope and treats
code 10006 as a rate limit; `check_v3_response_body` raises `ErrorResponse` for
any non-zero `retCode`.

## Building spot queries

`to_query` turns a parameter dataclass into a `dict` of strings. Unset optional
fields are left out and list fields are joined with commas:

```python
from bybitapi.spot_v1 import SpotOrderBatchCancelParam, to_query

to_query(SpotOrderBatchCancelParam(symbol="BTCUSDT", types=["LIMIT", "MARKET"]))
# {"symbolId": "BTCUSDT", "orderTypes": "LIMIT,MARKET"}
```

`spot_order_batch_cancel_by_ids` accepts at most 100 ids and raises
`ValueError` before calling the transport if given more.

## Testnet credentials

`credentials_from_env()` reads `BYBIT_TEST_KEY` and `BYBIT_TEST_SECRET` from
`os.environ` (or from a mapping passed in) and raises `RuntimeError` if either
is missing.

## Test servers

```python
import json
from bybitapi.mockserver import serve, handler_option, json_equal

body = json.dumps({"message": "ok"}).encode()
with serve(handler_option("/test", "GET", 200, body)) as server:
    ...  # GET server.url + "/test" answers body with status 200
```

An unregistered path answers 404; a registered path requested with another
method answers 200 with an empty body. `json_equal(want, got)` compares two
values by their JSON form, ignoring key order.

`serve_websocket(websocket_handler_option("/test", body))` starts a WebSocket
server at a `ws://` URL that answers every message received on `/test` with
`body`; a handshake on any other path is refused with 404.

## Golden files

`convert_to_json(src)` gives JSON indented by two spaces.
`compare_golden(filename, got)` returns `False` when the file does not exist,
`True` when it matches `got` as JSON, and raises `AssertionError` otherwise.
`update_file(filename, data)` writes the file only when `BYBIT_TEST_UPDATED`
is `true`, and returns whether it did.

## What this package does not do

- It has no HTTP client and no request signing: you supply the transport.
- It has no streaming client for the exchange's WebSocket feeds; the WebSocket
  support is only the local test server.
- Of the v5 API it covers only the account and asset calls listed above; there
  are no market, order, position or user services.
- It has no command-line program.