"""Testnet endpoints and credentials taken from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TESTNET_BASE_URL = "https://api-testnet.bybit.com"
TEST_WEBSOCKET_BASE_URL = "wss://stream-testnet.bybit.com"

KEY_ENV = "BYBIT_TEST_KEY"
SECRET_ENV = "BYBIT_TEST_SECRET"


@dataclass(frozen=True)
class Credentials:
    """API key and secret used to sign private requests."""

    key: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(key={self.key!r}, secret=***)"


def credentials_from_env(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Read BYBIT_TEST_KEY and BYBIT_TEST_SECRET; raise RuntimeError if either is unset."""
    env = os.environ if environ is None else environ
    if KEY_ENV not in env:
        raise RuntimeError(f"need {KEY_ENV} as environment variable")
    if SECRET_ENV not in env:
        raise RuntimeError(f"need {SECRET_ENV} as environment variable")
    return Credentials(key=env[KEY_ENV], secret=env[SECRET_ENV])