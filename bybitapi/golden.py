"""Golden-file helpers for checking live responses against recorded ones."""

from __future__ import annotations

import base64
import json
import os
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Union

from .mockserver import json_equal

UPDATE_ENV = "BYBIT_TEST_UPDATED"

PathLike = Union[str, "os.PathLike[str]"]


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"cannot represent {type(value).__name__} as JSON")


def convert_to_json(src: Any) -> bytes:
    """Serialise ``src`` as JSON indented by two spaces."""
    return json.dumps(src, indent=2, default=_default, ensure_ascii=False).encode("utf-8")


def save_to_file(name: PathLike, data: bytes) -> None:
    Path(name).write_bytes(data)


def compare_golden(filename: PathLike, got: Union[bytes, str]) -> bool:
    """Compare ``got`` with the golden file as JSON.

    Returns False when there is no golden file, True when it matches, and
    raises AssertionError when it differs.
    """
    try:
        want = Path(filename).read_bytes()
    except FileNotFoundError:
        return False
    if not json_equal(json.loads(want), json.loads(got)):
        raise AssertionError(f"response differs from golden file {filename}")
    return True


def update_file(filename: PathLike, data: bytes) -> bool:
    """Rewrite the golden file when BYBIT_TEST_UPDATED is "true"; return whether it did."""
    if os.environ.get(UPDATE_ENV) != "true":
        return False
    save_to_file(filename, data)
    return True