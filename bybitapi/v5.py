"""Entry point to the v5 endpoint groups."""

from __future__ import annotations

from typing import Any

from .v5_account import V5AccountService
from .v5_asset import V5AssetService


class V5ExecutionService:
    """Execution endpoints; the group currently offers no calls."""

    def __init__(self, transport: Any) -> None:
        self.transport = transport


class V5Service:
    """Hands out the v5 endpoint groups, all sharing one transport."""

    def __init__(self, transport: Any) -> None:
        self.transport = transport

    def account(self) -> V5AccountService:
        return V5AccountService(self.transport)

    def asset(self) -> V5AssetService:
        return V5AssetService(self.transport)

    def execution(self) -> V5ExecutionService:
        return V5ExecutionService(self.transport)