"""v5 asset endpoints: internal transfer records."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

from .response import check_v5_response_body
from .spot_v1 import to_query as _to_query


class _Transport(Protocol):
    def get_v5_privately(self, path: str, query: Mapping[str, str]) -> bytes: ...


def _opt(name: str) -> Any:
    return field(default=None, metadata={"query": name, "omitempty": True})


@dataclass
class V5GetInternalTransferRecordsParam:
    """Filters for internal transfer records; unset fields are not sent.

    ``start_time`` and ``end_time`` are millisecond timestamps; ``limit`` is
    the page size, 1 to 50 (the exchange defaults to 20).
    """

    transfer_id: Optional[str] = _opt("transferId")
    coin: Optional[str] = _opt("coin")
    status: Optional[str] = _opt("status")
    start_time: Optional[int] = _opt("startTime")
    end_time: Optional[int] = _opt("endTime")
    limit: Optional[int] = _opt("limit")
    cursor: Optional[str] = _opt("cursor")

    def to_query(self) -> Dict[str, str]:
        return _to_query(self)


class V5AssetService:
    """Asset endpoints on top of a transport that performs signed requests."""

    def __init__(self, transport: _Transport) -> None:
        self.transport = transport

    def get_internal_transfer_records(
        self, param: V5GetInternalTransferRecordsParam
    ) -> Dict[str, Any]:
        body = self.transport.get_v5_privately(
            "/v5/asset/transfer/query-inter-transfer-list", param.to_query()
        )
        check_v5_response_body(body)
        return json.loads(body)