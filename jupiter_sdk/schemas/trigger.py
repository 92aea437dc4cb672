from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

from pydantic import Field, field_validator

from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest, Mint, str_tuple


class OrderStatus(str, Enum):
    ACTIVE = "active"
    HISTORY = "history"


class TriggerOrderParams(JupiterRequest):
    """Amounts and limits of a trigger order; the API takes them as strings."""

    making_amount: str
    taking_amount: str
    expired_at: Optional[str] = None
    slippage_bps: Optional[str] = None
    fee_bps: Optional[str] = None

    @field_validator("making_amount", "taking_amount", "expired_at", "slippage_bps", "fee_bps", mode="before")
    @classmethod
    def _integer_text(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, bool):
            raise ValueError("expected an integer amount")
        if isinstance(value, int):
            value = str(value)
        if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
            raise ValueError("expected a non-negative integer as decimal text")
        return value


class CreateTriggerOrder(JupiterRequest):
    input_mint: Mint
    output_mint: Mint
    maker: Mint
    payer: Mint
    params: TriggerOrderParams
    compute_unit_price: Optional[str] = None
    fee_account: Optional[str] = None
    wrap_and_unwrap_sol: Optional[bool] = None

    @classmethod
    def from_amounts(
        cls,
        input_mint: str,
        output_mint: str,
        maker: str,
        payer: str,
        making_amount: int,
        taking_amount: int,
    ) -> "CreateTriggerOrder":
        return cls(
            input_mint=input_mint,
            output_mint=output_mint,
            maker=maker,
            payer=payer,
            params=TriggerOrderParams(making_amount=making_amount, taking_amount=taking_amount),
        )

    def with_expired_at(self, expired_at: Union[int, str]) -> "CreateTriggerOrder":
        return self._with(params=self.params._with(expired_at=expired_at))

    def with_slippage_bps(self, slippage_bps: Union[int, str]) -> "CreateTriggerOrder":
        return self._with(params=self.params._with(slippage_bps=slippage_bps))

    def with_fee(self, fee_account: str, fee_bps: Union[int, str]) -> "CreateTriggerOrder":
        return self._with(fee_account=fee_account, params=self.params._with(fee_bps=fee_bps))

    def with_compute_unit_price(self, compute_unit_price: str = "auto") -> "CreateTriggerOrder":
        return self._with(compute_unit_price=compute_unit_price)

    def with_wrap_and_unwrap_sol(self, value: bool = True) -> "CreateTriggerOrder":
        return self._with(wrap_and_unwrap_sol=value)


class ExecuteTriggerOrder(JupiterRequest):
    request_id: Mint
    signed_transaction: Mint


class CancelTriggerOrder(JupiterRequest):
    maker: Mint
    order: Mint
    compute_unit_price: Optional[str] = None

    def with_compute_unit_price(self, compute_unit_price: str = "auto") -> "CancelTriggerOrder":
        return self._with(compute_unit_price=compute_unit_price)


class CancelTriggerOrders(JupiterRequest):
    """Cancel several orders of one maker; with no ``orders`` every open order is cancelled."""

    maker: Mint
    orders: Optional[Tuple[str, ...]] = None
    compute_unit_price: Optional[str] = None

    def with_orders(self, orders: Iterable[str]) -> "CancelTriggerOrders":
        return self._with(orders=str_tuple(orders, "orders"))

    def with_compute_unit_price(self, compute_unit_price: str = "auto") -> "CancelTriggerOrders":
        return self._with(compute_unit_price=compute_unit_price)


class GetTriggerOrders(JupiterRequest):
    user: Mint
    order_status: OrderStatus
    page: Optional[int] = Field(default=None, ge=1)
    input_mint: Optional[str] = None
    output_mint: Optional[str] = None
    include_failed_tx: Optional[bool] = None

    def with_page(self, page: int) -> "GetTriggerOrders":
        return self._with(page=page)

    def with_input_mint(self, mint: str) -> "GetTriggerOrders":
        return self._with(input_mint=mint)

    def with_output_mint(self, mint: str) -> "GetTriggerOrders":
        return self._with(output_mint=mint)

    def with_include_failed_tx(self, value: bool = True) -> "GetTriggerOrders":
        return self._with(include_failed_tx=value)


class TriggerResponse(JupiterModel):
    request_id: str
    transaction: Optional[str] = None
    order: Optional[str] = None
    transactions: Optional[List[str]] = None


class ExecuteResponse(JupiterModel):
    status: str
    signature: Optional[str] = None
    error: Optional[str] = None
    code: Optional[int] = None


class TriggerOrder(JupiterModel):
    order_key: str
    input_mint: str
    output_mint: str
    user_pubkey: Optional[str] = None
    making_amount: Optional[str] = None
    taking_amount: Optional[str] = None
    remaining_making_amount: Optional[str] = None
    remaining_taking_amount: Optional[str] = None
    raw_making_amount: Optional[str] = None
    raw_taking_amount: Optional[str] = None
    raw_remaining_making_amount: Optional[str] = None
    raw_remaining_taking_amount: Optional[str] = None
    slippage_bps: Optional[Union[int, str]] = None
    expired_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    status: Optional[str] = None
    open_tx: Optional[str] = None
    close_tx: Optional[str] = None
    program_version: Optional[str] = None
    trades: List[Any] = Field(default_factory=list)


class TriggerOrdersResponse(JupiterModel):
    user: str
    order_status: OrderStatus
    orders: List[TriggerOrder] = Field(default_factory=list)
    total_pages: int
    page: int


__all__ = [
    "CancelTriggerOrder",
    "CancelTriggerOrders",
    "CreateTriggerOrder",
    "ExecuteResponse",
    "ExecuteTriggerOrder",
    "GetTriggerOrders",
    "OrderStatus",
    "TriggerOrder",
    "TriggerOrderParams",
    "TriggerOrdersResponse",
    "TriggerResponse",
]
