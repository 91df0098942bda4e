"""Spot v1 endpoints: market data, orders and wallet balance."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from .response import check_response_body

MAX_BATCH_CANCEL_IDS = 100
DEPTH_ITEM_LENGTH = 2
KLINE_ITEM_LENGTH = 11


def _q(name: str, *, omitempty: bool = False, sep: Optional[str] = None, **kwargs: Any) -> Any:
    return field(metadata={"query": name, "omitempty": omitempty, "sep": sep}, **kwargs)


@dataclass
class SpotQuoteDepthParam:
    symbol: str = _q("symbol")
    limit: Optional[int] = _q("limit", omitempty=True, default=None)


@dataclass
class SpotQuoteDepthMergedParam:
    symbol: str = _q("symbol")
    scale: Optional[int] = _q("scale", omitempty=True, default=None)
    limit: Optional[int] = _q("limit", omitempty=True, default=None)


@dataclass
class SpotQuoteTradesParam:
    symbol: str = _q("symbol")
    limit: Optional[int] = _q("limit", omitempty=True, default=None)


@dataclass
class SpotQuoteKlineParam:
    symbol: str = _q("symbol")
    interval: str = _q("interval")
    limit: Optional[int] = _q("limit", omitempty=True, default=None)
    start_time: Optional[int] = _q("startTime", omitempty=True, default=None)
    end_time: Optional[int] = _q("endTime", omitempty=True, default=None)


@dataclass
class SpotQuoteTicker24hrParam:
    symbol: Optional[str] = _q("symbol", omitempty=True, default=None)


@dataclass
class SpotQuoteTickerPriceParam:
    symbol: Optional[str] = _q("symbol", omitempty=True, default=None)


@dataclass
class SpotQuoteTickerBookTickerParam:
    symbol: Optional[str] = _q("symbol", omitempty=True, default=None)


@dataclass
class SpotPostOrderParam:
    symbol: str = _q("symbol")
    qty: float = _q("qty")
    side: str = _q("side")
    type: str = _q("type")
    time_in_force: Optional[str] = _q("timeInForce", omitempty=True, default=None)
    price: Optional[float] = _q("price", omitempty=True, default=None)
    order_link_id: Optional[str] = _q("orderLinkId", omitempty=True, default=None)


@dataclass
class SpotGetOrderParam:
    order_id: Optional[str] = _q("orderId", omitempty=True, default=None)
    order_link_id: Optional[str] = _q("orderLinkId", omitempty=True, default=None)


@dataclass
class SpotDeleteOrderParam:
    order_id: Optional[str] = _q("orderId", omitempty=True, default=None)
    order_link_id: Optional[str] = _q("orderLinkId", omitempty=True, default=None)


@dataclass
class SpotDeleteOrderFastParam:
    symbol: str = _q("symbolId")
    order_id: Optional[str] = _q("orderId", omitempty=True, default=None)
    order_link_id: Optional[str] = _q("orderLinkId", omitempty=True, default=None)


@dataclass
class SpotOrderBatchCancelParam:
    symbol: str = _q("symbolId")
    side: Optional[str] = _q("side", omitempty=True, default=None)
    types: List[str] = _q("orderTypes", omitempty=True, sep=",", default_factory=list)


@dataclass
class SpotOrderBatchFastCancelParam:
    symbol: str = _q("symbolId")
    side: Optional[str] = _q("side", omitempty=True, default=None)
    types: List[str] = _q("orderTypes", omitempty=True, sep=",", default_factory=list)


@dataclass
class SpotOpenOrdersParam:
    symbol: Optional[str] = _q("symbol", omitempty=True, default=None)
    order_id: Optional[str] = _q("orderId", omitempty=True, default=None)
    limit: Optional[int] = _q("limit", omitempty=True, default=None)


@dataclass(frozen=True)
class SpotQuoteDepthBidAsk:
    price: str
    quantity: str


@dataclass(frozen=True)
class SpotQuoteKline:
    start_time: int
    open: str
    high: str
    low: str
    close: str
    volume: str
    end_time: int
    quote_asset_volume: str
    trades: int
    taker_base_volume: float
    taker_quote_volume: float


def _format_float(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _format(value: Any) -> str:
    if isinstance(value, Enum):
        return _format(value.value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def to_query(param: Any) -> Dict[str, str]:
    """Encode a parameter dataclass as query values, dropping empty optional fields."""
    if param is None:
        return {}
    if not is_dataclass(param) or isinstance(param, type):
        raise TypeError(f"expected a parameter dataclass, got {type(param).__name__}")
    query: Dict[str, str] = {}
    for f in fields(param):
        value = getattr(param, f.name)
        is_list = isinstance(value, (list, tuple))
        if f.metadata.get("omitempty") and (value is None or (is_list and not value)):
            continue
        name = f.metadata.get("query", f.name)
        if is_list:
            sep = f.metadata.get("sep") or ","
            query[name] = sep.join(_format(item) for item in value)
        else:
            query[name] = _format(value)
    return query


def parse_depth_bids_asks(data: Any) -> List[SpotQuoteDepthBidAsk]:
    """Turn ``[[price, quantity], ...]`` into bid/ask entries."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("bids and asks must be a list")
    items = []
    for item in data:
        if not isinstance(item, list) or not all(isinstance(v, str) for v in item):
            raise ValueError("each bid or ask must be a list of strings")
        if len(item) != DEPTH_ITEM_LENGTH:
            raise ValueError("so far len(item) must be 2, please check it on documents")
        items.append(SpotQuoteDepthBidAsk(price=item[0], quantity=item[1]))
    return items


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def parse_kline(data: Any) -> SpotQuoteKline:
    """Turn one eleven-element kline array into a :class:`SpotQuoteKline`."""
    if not isinstance(data, list):
        raise ValueError("kline must be a list")
    if len(data) != KLINE_ITEM_LENGTH:
        raise ValueError("so far len(items) must be 11, please check it on documents")
    return SpotQuoteKline(
        start_time=int(_number(data[0])),
        open=_string(data[1]),
        high=_string(data[2]),
        low=_string(data[3]),
        close=_string(data[4]),
        volume=_string(data[5]),
        end_time=int(_number(data[6])),
        quote_asset_volume=_string(data[7]),
        trades=int(_number(data[8])),
        taker_base_volume=_number(data[9]),
        taker_quote_volume=_number(data[10]),
    )


class _Transport(Protocol):
    def get_publicly(self, path: str, query: Mapping[str, str]) -> bytes: ...

    def get_privately(self, path: str, query: Mapping[str, str]) -> bytes: ...

    def post_form(self, path: str, query: Mapping[str, str]) -> bytes: ...

    def delete_privately(self, path: str, query: Mapping[str, str]) -> bytes: ...


class SpotV1Service:
    """Spot v1 endpoints on top of a transport that performs the HTTP requests.

    Each call returns the decoded response object; errors reported in the body
    are raised as exceptions from :mod:`bybitapi.response`.
    """

    def __init__(self, transport: _Transport) -> None:
        self._transport = transport

    @staticmethod
    def _decode(body: bytes) -> Dict[str, Any]:
        check_response_body(body)
        return json.loads(body)

    def _get_public(self, path: str, query: Mapping[str, str]) -> Dict[str, Any]:
        return self._decode(self._transport.get_publicly(path, query))

    def _get_private(self, path: str, query: Mapping[str, str]) -> Dict[str, Any]:
        return self._decode(self._transport.get_privately(path, query))

    def _post(self, path: str, query: Mapping[str, str]) -> Dict[str, Any]:
        return self._decode(self._transport.post_form(path, query))

    def _delete(self, path: str, query: Mapping[str, str]) -> Dict[str, Any]:
        return self._decode(self._transport.delete_privately(path, query))

    @staticmethod
    def _with_depth(res: Dict[str, Any]) -> Dict[str, Any]:
        result = res.get("result") or {}
        res["result"] = {
            **result,
            "bids": parse_depth_bids_asks(result.get("bids")),
            "asks": parse_depth_bids_asks(result.get("asks")),
        }
        return res

    def spot_symbols(self) -> Dict[str, Any]:
        return self._get_public("/spot/v1/symbols", {})

    def spot_quote_depth(self, param: SpotQuoteDepthParam) -> Dict[str, Any]:
        return self._with_depth(self._get_public("/spot/quote/v1/depth", to_query(param)))

    def spot_quote_depth_merged(self, param: SpotQuoteDepthMergedParam) -> Dict[str, Any]:
        return self._with_depth(
            self._get_public("/spot/quote/v1/depth/merged", to_query(param))
        )

    def spot_quote_trades(self, param: SpotQuoteTradesParam) -> Dict[str, Any]:
        return self._get_public("/spot/quote/v1/trades", to_query(param))

    def spot_quote_kline(self, param: SpotQuoteKlineParam) -> Dict[str, Any]:
        res = self._get_public("/spot/quote/v1/kline", to_query(param))
        res["result"] = [parse_kline(item) for item in res.get("result") or []]
        return res

    def spot_quote_ticker_24hr(self, param: SpotQuoteTicker24hrParam) -> Dict[str, Any]:
        return self._get_public("/spot/quote/v1/ticker/24hr", to_query(param))

    def spot_quote_ticker_price(self, param: SpotQuoteTickerPriceParam) -> Dict[str, Any]:
        return self._get_public("/spot/quote/v1/ticker/price", to_query(param))

    def spot_quote_ticker_book_ticker(
        self, param: SpotQuoteTickerBookTickerParam
    ) -> Dict[str, Any]:
        return self._get_public("/spot/quote/v1/ticker/book_ticker", to_query(param))

    def spot_post_order(self, param: SpotPostOrderParam) -> Dict[str, Any]:
        return self._post("/spot/v1/order", to_query(param))

    def spot_get_order(self, param: SpotGetOrderParam) -> Dict[str, Any]:
        return self._get_private("/spot/v1/order", to_query(param))

    def spot_delete_order(self, param: SpotDeleteOrderParam) -> Dict[str, Any]:
        return self._delete("/spot/v1/order", to_query(param))

    def spot_delete_order_fast(self, param: SpotDeleteOrderFastParam) -> Dict[str, Any]:
        return self._delete("/spot/v1/order/fast", to_query(param))

    def spot_order_batch_cancel(self, param: SpotOrderBatchCancelParam) -> Dict[str, Any]:
        return self._delete("/spot/order/batch-cancel", to_query(param))

    def spot_order_batch_fast_cancel(
        self, param: SpotOrderBatchFastCancelParam
    ) -> Dict[str, Any]:
        return self._delete("/spot/order/batch-fast-cancel", to_query(param))

    def spot_order_batch_cancel_by_ids(self, order_ids: Sequence[str]) -> Dict[str, Any]:
        if len(order_ids) > MAX_BATCH_CANCEL_IDS:
            raise ValueError("orderIDs length must be no more than 100")
        return self._delete("/spot/order/batch-cancel-by-ids", {"orderIds": ",".join(order_ids)})

    def spot_open_orders(self, param: SpotOpenOrdersParam) -> Dict[str, Any]:
        return self._get_private("/spot/v1/open-orders", to_query(param))

    def spot_get_wallet_balance(self) -> Dict[str, Any]:
        return self._get_private("/spot/v1/account", {})