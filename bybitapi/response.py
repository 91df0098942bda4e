"""Response envelopes and the errors raised when the exchange reports a failure."""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

Body = Union[bytes, bytearray, str]

RATE_LIMIT_CODE = 10006
V5_RATE_LIMIT_CODES = frozenset({10006, 10018})


def _decode(body: Body) -> Mapping[str, Any]:
    """Parse a response body into a JSON object; ``null`` counts as an empty object."""
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8")
    data = json.loads(body)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("response body is not a JSON object")
    return data


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return int(value)


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


@dataclass
class CommonResponse:
    """Envelope shared by the older (v1/v2) endpoints."""

    ret_code: int = 0
    ret_msg: str = ""
    ext_code: str = ""
    ext_info: str = ""
    time_now: str = ""
    rate_limit_status: int = 0
    rate_limit_reset_ms: int = 0
    rate_limit: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommonResponse":
        return cls(
            ret_code=_int_field(data, "ret_code"),
            ret_msg=_str_field(data, "ret_msg"),
            ext_code=_str_field(data, "ext_code"),
            ext_info=_str_field(data, "ext_info"),
            time_now=_str_field(data, "time_now"),
            rate_limit_status=_int_field(data, "rate_limit_status"),
            rate_limit_reset_ms=_int_field(data, "rate_limit_reset_ms"),
            rate_limit=_int_field(data, "rate_limit"),
        )


@dataclass
class CommonV5Response:
    """Envelope shared by the v3 and v5 endpoints."""

    ret_code: int = 0
    ret_msg: str = ""
    ret_ext_info: Any = None
    time: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommonV5Response":
        return cls(
            ret_code=_int_field(data, "retCode"),
            ret_msg=_str_field(data, "retMsg"),
            ret_ext_info=data.get("retExtInfo"),
            time=_int_field(data, "time"),
        )


class ErrorResponse(Exception):
    """The exchange answered with a non-zero return code."""

    def __init__(self, ret_code: int, ret_msg: str) -> None:
        super().__init__(ret_code, ret_msg)
        self.ret_code = ret_code
        self.ret_msg = ret_msg

    def __str__(self) -> str:
        return f"{self.ret_code}, {self.ret_msg}"


def _trim(value: float) -> str:
    return f"{value:.9f}".rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    if seconds < 1:
        for unit, scale in (("ms", 1e3), ("µs", 1e6), ("ns", 1e9)):
            value = seconds * scale
            if value >= 1 or unit == "ns":
                return f"{sign}{_trim(value)}{unit}"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    text = ""
    if hours:
        text += f"{int(hours)}h"
    if hours or minutes:
        text += f"{int(minutes)}m"
    return f"{sign}{text}{_trim(secs)}s"


class RateLimitError(Exception):
    """The request was refused because the rate limit was reached."""

    def __init__(self, response: Optional[CommonResponse] = None) -> None:
        self.response = response if response is not None else CommonResponse()
        super().__init__(self.response)

    @property
    def ret_code(self) -> int:
        return self.response.ret_code

    @property
    def ret_msg(self) -> str:
        return self.response.ret_msg

    @property
    def rate_limit_reset_ms(self) -> int:
        return self.response.rate_limit_reset_ms

    def __str__(self) -> str:
        reset_at = math.trunc(self.response.rate_limit_reset_ms / 1000)
        return f"{self.response.ret_msg}, {_format_duration(reset_at - time.time())}"


class PathNotFoundError(Exception):
    """The request path does not exist."""

    def __init__(self, message: str = "path not found") -> None:
        super().__init__(message)


class AccessDeniedError(Exception):
    """The request was refused for lack of permission."""

    def __init__(self, message: str = "access denied") -> None:
        super().__init__(message)


def check_response_body(body: Body) -> None:
    """Raise if a v1/v2 response body reports an error."""
    data = _decode(body)
    common = CommonResponse.from_dict(data)
    if common.ret_code == RATE_LIMIT_CODE:
        raise RateLimitError(common)
    if common.ret_code != 0:
        raise ErrorResponse(common.ret_code, common.ret_msg)


def check_v3_response_body(body: Body) -> None:
    """Raise if a v3 response body reports an error."""
    common = CommonV5Response.from_dict(_decode(body))
    if common.ret_code != 0:
        raise ErrorResponse(common.ret_code, common.ret_msg)


def check_v5_response_body(body: Body) -> None:
    """Raise if a v5 response body reports an error."""
    data = _decode(body)
    common = CommonV5Response.from_dict(data)
    if common.ret_code in V5_RATE_LIMIT_CODES:
        raise RateLimitError(CommonResponse.from_dict(data))
    if common.ret_code != 0:
        raise ErrorResponse(common.ret_code, common.ret_msg)