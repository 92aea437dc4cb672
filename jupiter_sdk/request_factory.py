from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from pydantic import BaseModel

from jupiter_sdk.config import DEFAULT_BASE_URL
from jupiter_sdk.core.codec import to_body, to_query
from jupiter_sdk.core.exceptions import ConfigurationError
from jupiter_sdk.core.request_spec import RequestSpec, normalize_base_url, path_segment
from jupiter_sdk.schemas import (
    CancelRecurringOrderRequest,
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    ExecuteRecurringRequest,
    ExecuteTriggerOrder,
    GetRecurringOrders,
    GetTriggerOrders,
    PriceDeposit,
    PriceWithdraw,
    QuoteRequest,
    SwapRequest,
    TokenPriceRequest,
    UltraExecuteOrderRequest,
    UltraOrderRequest,
)
from jupiter_sdk.schemas.base import str_tuple

QUOTE_PATH = "/swap/v1/quote"
SWAP_PATH = "/swap/v1/swap"
SWAP_INSTRUCTIONS_PATH = "/swap/v1/swap-instructions"
ULTRA_ORDER_PATH = "/ultra/v1/order"
ULTRA_EXECUTE_PATH = "/ultra/v1/execute"
ULTRA_BALANCES_PATH = "/ultra/v1/balances"
ULTRA_SHIELD_PATH = "/ultra/v1/shield"
ULTRA_ROUTERS_PATH = "/ultra/v1/order/routers"
TRIGGER_CREATE_PATH = "/trigger/v1/createOrder"
TRIGGER_EXECUTE_PATH = "/trigger/v1/execute"
TRIGGER_CANCEL_PATH = "/trigger/v1/cancelOrder"
TRIGGER_CANCEL_MANY_PATH = "/trigger/v1/cancelOrders"
TRIGGER_ORDERS_PATH = "/trigger/v1/getTriggerOrders"
RECURRING_CREATE_PATH = "/recurring/v1/createOrder"
RECURRING_CANCEL_PATH = "/recurring/v1/cancelOrder"
RECURRING_DEPOSIT_PATH = "/recurring/v1/priceDeposit"
RECURRING_WITHDRAW_PATH = "/recurring/v1/priceWithdraw"
RECURRING_EXECUTE_PATH = "/recurring/v1/execute"
RECURRING_ORDERS_PATH = "/recurring/v1/getRecurringOrders"
PRICE_PATH = "/price/v2"

JSON = "application/json"


@dataclass(frozen=True)
class JupiterRequestFactory:
    """Turns request models into ``RequestSpec`` values; performs no I/O."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    def _headers(self, with_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": JSON}
        if with_body:
            headers["Content-Type"] = JSON
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _get(self, path: str, params: Optional[BaseModel] = None, query: Optional[Dict[str, str]] = None) -> RequestSpec:
        return RequestSpec(
            method="GET",
            base_url=self.base_url,
            path=path,
            query=to_query(params) if params is not None else dict(query or {}),
            headers=self._headers(),
        )

    def _post(self, path: str, data: BaseModel) -> RequestSpec:
        return RequestSpec(
            method="POST",
            base_url=self.base_url,
            path=path,
            query={},
            headers=self._headers(with_body=True),
            json=to_body(data),
        )

    # swap

    def build_quote_request(self, params: QuoteRequest) -> RequestSpec:
        return self._get(QUOTE_PATH, params)

    def build_swap_request(self, data: SwapRequest) -> RequestSpec:
        return self._post(SWAP_PATH, data)

    def build_swap_instructions_request(self, data: SwapRequest) -> RequestSpec:
        return self._post(SWAP_INSTRUCTIONS_PATH, data)

    # ultra

    def build_ultra_order_request(self, params: UltraOrderRequest) -> RequestSpec:
        return self._get(ULTRA_ORDER_PATH, params)

    def build_ultra_execute_request(self, data: UltraExecuteOrderRequest) -> RequestSpec:
        return self._post(ULTRA_EXECUTE_PATH, data)

    def build_balances_request(self, address: str) -> RequestSpec:
        if not address or not address.strip():
            raise ConfigurationError("address is required")
        return self._get(f"{ULTRA_BALANCES_PATH}/{path_segment(address.strip())}")

    def build_shield_request(self, mints: Iterable[str]) -> RequestSpec:
        mint_list = str_tuple(mints, "mints")
        if not mint_list:
            raise ConfigurationError("shield requires at least one mint")
        return self._get(ULTRA_SHIELD_PATH, query={"mints": ",".join(mint_list)})

    def build_routers_request(self) -> RequestSpec:
        return self._get(ULTRA_ROUTERS_PATH)

    # trigger

    def build_create_trigger_order_request(self, data: CreateTriggerOrder) -> RequestSpec:
        return self._post(TRIGGER_CREATE_PATH, data)

    def build_execute_trigger_order_request(self, data: ExecuteTriggerOrder) -> RequestSpec:
        return self._post(TRIGGER_EXECUTE_PATH, data)

    def build_cancel_trigger_order_request(self, data: CancelTriggerOrder) -> RequestSpec:
        return self._post(TRIGGER_CANCEL_PATH, data)

    def build_cancel_trigger_orders_request(self, data: CancelTriggerOrders) -> RequestSpec:
        return self._post(TRIGGER_CANCEL_MANY_PATH, data)

    def build_trigger_orders_request(self, params: GetTriggerOrders) -> RequestSpec:
        return self._get(TRIGGER_ORDERS_PATH, params)

    # recurring

    def build_create_recurring_order_request(self, data: CreateRecurringOrderRequest) -> RequestSpec:
        return self._post(RECURRING_CREATE_PATH, data)

    def build_cancel_recurring_order_request(self, data: CancelRecurringOrderRequest) -> RequestSpec:
        return self._post(RECURRING_CANCEL_PATH, data)

    def build_price_deposit_request(self, data: PriceDeposit) -> RequestSpec:
        return self._post(RECURRING_DEPOSIT_PATH, data)

    def build_price_withdraw_request(self, data: PriceWithdraw) -> RequestSpec:
        return self._post(RECURRING_WITHDRAW_PATH, data)

    def build_execute_recurring_order_request(self, data: ExecuteRecurringRequest) -> RequestSpec:
        return self._post(RECURRING_EXECUTE_PATH, data)

    def build_recurring_orders_request(self, params: GetRecurringOrders) -> RequestSpec:
        return self._get(RECURRING_ORDERS_PATH, params)

    # price

    def build_token_price_request(self, params: TokenPriceRequest) -> RequestSpec:
        return self._get(PRICE_PATH, params)


__all__ = ["DEFAULT_BASE_URL", "JupiterRequestFactory"]
