"""v5 account endpoints: wallet balance and account information."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol

from .response import check_v5_response_body


class _Transport(Protocol):
    def get_v5_privately(self, path: str, query: Mapping[str, str]) -> bytes: ...


def _text(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


class V5AccountService:
    """Account endpoints on top of a transport that performs signed requests.

    Each call returns the decoded response object; errors reported in the body
    are raised as exceptions from :mod:`bybitapi.response`.
    """

    def __init__(self, transport: _Transport) -> None:
        self.transport = transport

    def _get(self, path: str, query: Mapping[str, str]) -> Dict[str, Any]:
        body = self.transport.get_v5_privately(path, query)
        check_v5_response_body(body)
        return json.loads(body)

    def get_wallet_balance(
        self, account_type: Any, coins: Optional[Iterable[Any]] = None
    ) -> Dict[str, Any]:
        """Wallet balance for ``account_type`` (UNIFIED or CONTRACT).

        Without coins the exchange returns every non-zero asset; several coins
        are sent comma separated, e.g. "USDT,USDC".
        """
        query = {"accountType": _text(account_type)}
        coin_names = [_text(coin) for coin in coins or ()]
        if coin_names:
            query["coin"] = ",".join(coin_names)
        return self._get("/v5/account/wallet-balance", query)

    def get_account_info(self) -> Dict[str, Any]:
        return self._get("/v5/account/info", {})