from jupiter_sdk.client import JupiterClient
from jupiter_sdk.config import DEFAULT_BASE_URL, JupiterSettings, load_settings
from jupiter_sdk.core.exceptions import (
    ConfigurationError,
    DecodingError,
    JupiterClientError,
    ProtocolError,
    TransportError,
)
from jupiter_sdk.http_client import JupiterHttpClient
from jupiter_sdk.request_factory import JupiterRequestFactory
from jupiter_sdk.schemas import (
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    QuoteRequest,
    QuoteResponse,
    SwapMode,
    SwapRequest,
    SwapResponse,
    TokenPriceRequest,
    UltraOrderRequest,
)

__all__ = [
    "ConfigurationError",
    "CreateRecurringOrderRequest",
    "CreateTriggerOrder",
    "DEFAULT_BASE_URL",
    "DecodingError",
    "JupiterClient",
    "JupiterClientError",
    "JupiterHttpClient",
    "JupiterRequestFactory",
    "JupiterSettings",
    "ProtocolError",
    "QuoteRequest",
    "QuoteResponse",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "TokenPriceRequest",
    "TransportError",
    "UltraOrderRequest",
    "load_settings",
]
