from __future__ import annotations

from typing import Optional


class JupiterClientError(RuntimeError):
    pass


class TransportError(JupiterClientError):
    pass


class ProtocolError(JupiterClientError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Jupiter API returned error status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodingError(JupiterClientError):
    def __init__(self, message: str, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body


class ConfigurationError(JupiterClientError, ValueError):
    pass


__all__ = [
    "ConfigurationError",
    "DecodingError",
    "JupiterClientError",
    "ProtocolError",
    "TransportError",
]
