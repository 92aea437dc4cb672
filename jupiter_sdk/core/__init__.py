from jupiter_sdk.core.codec import decode_response, to_body, to_query
from jupiter_sdk.core.exceptions import (
    ConfigurationError,
    DecodingError,
    JupiterClientError,
    ProtocolError,
    TransportError,
)
from jupiter_sdk.core.fixtures import decode_fixture, load_fixture, load_fixture_text
from jupiter_sdk.core.request_spec import RequestSpec, canonicalize_query, validate_headers

__all__ = [
    "ConfigurationError",
    "DecodingError",
    "JupiterClientError",
    "ProtocolError",
    "RequestSpec",
    "TransportError",
    "canonicalize_query",
    "decode_fixture",
    "decode_response",
    "load_fixture",
    "load_fixture_text",
    "to_body",
    "to_query",
    "validate_headers",
]
