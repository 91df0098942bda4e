"""Bybit spot v1 and v5 account/asset endpoints over a pluggable transport, with response checks, mock servers and golden-file helpers."""

__version__ = "2.0.0"