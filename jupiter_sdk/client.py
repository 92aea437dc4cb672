from __future__ import annotations

from typing import Iterable, List, Optional, Type, TypeVar

import httpx

from jupiter_sdk.config import JupiterSettings
from jupiter_sdk.core.codec import decode_response
from jupiter_sdk.core.request_spec import RequestSpec
from jupiter_sdk.http_client import JupiterHttpClient
from jupiter_sdk.request_factory import DEFAULT_BASE_URL, JupiterRequestFactory
from jupiter_sdk.schemas import (
    CancelRecurringOrderRequest,
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    ExecuteRecurringRequest,
    ExecuteResponse,
    ExecuteTriggerOrder,
    GetRecurringOrders,
    GetTriggerOrders,
    PriceDeposit,
    PriceWithdraw,
    QuoteRequest,
    QuoteResponse,
    RecurringOrders,
    RecurringResponse,
    Router,
    Shield,
    SwapInstructions,
    SwapRequest,
    SwapResponse,
    TokenBalances,
    TokenPriceRequest,
    TokenPriceResponse,
    TriggerOrdersResponse,
    TriggerResponse,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

T = TypeVar("T")


class JupiterClient:
    """Async client for the Jupiter swap, ultra, trigger, recurring and price APIs.

    Every operation is one HTTP round trip. It returns the decoded model or
    raises one of ``TransportError``, ``ProtocolError``, ``DecodingError`` or
    ``ConfigurationError``. The client keeps no per-call state, so a single
    instance can serve concurrent calls.

    ::

        async with JupiterClient("https://lite-api.jup.ag") as client:
            quote = await client.get_quote(
                QuoteRequest(input_mint=SOL, output_mint=USDC, amount=1_000_000)
            )
            swap = await client.get_swap_transaction(
                SwapRequest(user_public_key=wallet, quote_response=quote)
            )
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        timeout: float = 10.0,
        async_client: Optional[httpx.AsyncClient] = None,
        http_client: Optional[JupiterHttpClient] = None,
    ) -> None:
        self.request_factory = JupiterRequestFactory(base_url=base_url, api_key=api_key)
        self._http = http_client or JupiterHttpClient(timeout=timeout, async_client=async_client)
        self._owns_http = http_client is None

    @classmethod
    def from_settings(
        cls, settings: JupiterSettings, async_client: Optional[httpx.AsyncClient] = None
    ) -> "JupiterClient":
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.timeout,
            async_client=async_client,
        )

    @property
    def base_url(self) -> str:
        return self.request_factory.base_url

    async def __aenter__(self) -> "JupiterClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_http:
            await self._http.__aexit__(exc_type, exc, tb)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _call(self, spec: RequestSpec, model: Type[T]) -> T:
        body = await self._http.send(spec)
        return decode_response(body, model)

    # swap

    async def get_quote(self, params: QuoteRequest) -> QuoteResponse:
        return await self._call(self.request_factory.build_quote_request(params), QuoteResponse)

    async def get_swap_transaction(self, data: SwapRequest) -> SwapResponse:
        """Unsigned, base64-encoded swap transaction for the embedded quote."""
        return await self._call(self.request_factory.build_swap_request(data), SwapResponse)

    async def get_swap_instructions(self, data: SwapRequest) -> SwapInstructions:
        return await self._call(self.request_factory.build_swap_instructions_request(data), SwapInstructions)

    # ultra

    async def get_ultra_order(self, params: UltraOrderRequest) -> UltraOrderResponse:
        return await self._call(self.request_factory.build_ultra_order_request(params), UltraOrderResponse)

    async def ultra_execute_order(self, data: UltraExecuteOrderRequest) -> UltraExecuteOrderResponse:
        """Submit a signed ultra order. Not idempotent."""
        return await self._call(self.request_factory.build_ultra_execute_request(data), UltraExecuteOrderResponse)

    async def get_token_balances(self, address: str) -> TokenBalances:
        return await self._call(self.request_factory.build_balances_request(address), TokenBalances)

    async def shield(self, mints: Iterable[str]) -> Shield:
        """Token-safety warnings for each mint, e.g. ``HAS_FREEZE_AUTHORITY``."""
        return await self._call(self.request_factory.build_shield_request(mints), Shield)

    async def routers(self) -> List[Router]:
        return await self._call(self.request_factory.build_routers_request(), List[Router])

    # trigger

    async def create_trigger_order(self, data: CreateTriggerOrder) -> TriggerResponse:
        return await self._call(self.request_factory.build_create_trigger_order_request(data), TriggerResponse)

    async def execute_trigger_order(self, data: ExecuteTriggerOrder) -> ExecuteResponse:
        return await self._call(self.request_factory.build_execute_trigger_order_request(data), ExecuteResponse)

    async def cancel_trigger_order(self, data: CancelTriggerOrder) -> TriggerResponse:
        """Unsigned cancellation transaction; sign it and pass it to ``execute_trigger_order``."""
        return await self._call(self.request_factory.build_cancel_trigger_order_request(data), TriggerResponse)

    async def cancel_trigger_orders(self, data: CancelTriggerOrders) -> TriggerResponse:
        return await self._call(self.request_factory.build_cancel_trigger_orders_request(data), TriggerResponse)

    async def get_trigger_orders(self, params: GetTriggerOrders) -> TriggerOrdersResponse:
        return await self._call(self.request_factory.build_trigger_orders_request(params), TriggerOrdersResponse)

    # recurring

    async def create_recurring_order(self, data: CreateRecurringOrderRequest) -> RecurringResponse:
        return await self._call(self.request_factory.build_create_recurring_order_request(data), RecurringResponse)

    async def cancel_recurring_order(self, data: CancelRecurringOrderRequest) -> RecurringResponse:
        return await self._call(self.request_factory.build_cancel_recurring_order_request(data), RecurringResponse)

    async def price_deposit(self, data: PriceDeposit) -> RecurringResponse:
        return await self._call(self.request_factory.build_price_deposit_request(data), RecurringResponse)

    async def price_withdraw(self, data: PriceWithdraw) -> RecurringResponse:
        return await self._call(self.request_factory.build_price_withdraw_request(data), RecurringResponse)

    async def execute_recurring_order(self, data: ExecuteRecurringRequest) -> ExecuteResponse:
        return await self._call(self.request_factory.build_execute_recurring_order_request(data), ExecuteResponse)

    async def get_recurring_orders(self, params: GetRecurringOrders) -> RecurringOrders:
        return await self._call(self.request_factory.build_recurring_orders_request(params), RecurringOrders)

    # price

    async def get_token_price(self, params: TokenPriceRequest) -> TokenPriceResponse:
        return await self._call(self.request_factory.build_token_price_request(params), TokenPriceResponse)


__all__ = ["JupiterClient"]
