from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Optional, Union

from pydantic import Field, field_validator

from jupiter_sdk.core.exceptions import ConfigurationError
from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest, Mint, PositiveU64, U64
from jupiter_sdk.schemas.trigger import OrderStatus


class RecurringOrderType(str, Enum):
    TIME = "time"
    PRICE = "price"
    # only meaningful as a filter when listing orders
    ALL = "all"


class WithdrawSide(str, Enum):
    IN = "In"
    OUT = "Out"


class TimeParams(JupiterRequest):
    in_amount: PositiveU64
    number_of_orders: PositiveU64
    interval: PositiveU64
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    start_at: Optional[U64] = None


class PriceParams(JupiterRequest):
    deposit_amount: PositiveU64
    increment_usdc_value: PositiveU64
    interval: PositiveU64
    start_at: Optional[U64] = None


class TimeOrderParams(JupiterRequest):
    time: TimeParams


class PriceOrderParams(JupiterRequest):
    price: PriceParams


# Untagged on the wire: the single ``time`` or ``price`` key picks the variant.
OrderParams = Annotated[Union[TimeOrderParams, PriceOrderParams], Field(union_mode="left_to_right")]


class CreateRecurringOrderRequest(JupiterRequest):
    """Body for ``POST /recurring/v1/createOrder``.

    Build it with :meth:`time_order` (DCA split into ``number_of_orders``
    fills every ``interval`` seconds) or :meth:`price_order` (value averaging
    towards ``increment_usdc_value`` per ``interval``).
    """

    user: Mint
    input_mint: Mint
    output_mint: Mint
    params: OrderParams

    @classmethod
    def time_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        in_amount: int,
        number_of_orders: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        params = TimeOrderParams(
            time=TimeParams(in_amount=in_amount, number_of_orders=number_of_orders, interval=interval)
        )
        return cls(user=user, input_mint=input_mint, output_mint=output_mint, params=params)

    @classmethod
    def price_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        deposit_amount: int,
        increment_usdc_value: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        params = PriceOrderParams(
            price=PriceParams(
                deposit_amount=deposit_amount,
                increment_usdc_value=increment_usdc_value,
                interval=interval,
            )
        )
        return cls(user=user, input_mint=input_mint, output_mint=output_mint, params=params)

    @property
    def recurring_type(self) -> RecurringOrderType:
        if isinstance(self.params, TimeOrderParams):
            return RecurringOrderType.TIME
        return RecurringOrderType.PRICE

    def with_start_at(self, start_at: int) -> "CreateRecurringOrderRequest":
        if isinstance(self.params, TimeOrderParams):
            params = TimeOrderParams(time=self.params.time._with(start_at=start_at))
        else:
            params = PriceOrderParams(price=self.params.price._with(start_at=start_at))
        return self._with(params=params)

    def with_min_price(self, min_price: float) -> "CreateRecurringOrderRequest":
        return self._with(params=self._time_params(min_price=min_price))

    def with_max_price(self, max_price: float) -> "CreateRecurringOrderRequest":
        return self._with(params=self._time_params(max_price=max_price))

    def _time_params(self, **changes: Any) -> TimeOrderParams:
        if not isinstance(self.params, TimeOrderParams):
            raise ConfigurationError(f"{', '.join(changes)} only applies to time-based recurring orders")
        return TimeOrderParams(time=self.params.time._with(**changes))


class CancelRecurringOrderRequest(JupiterRequest):
    order: Mint
    recurring_type: RecurringOrderType
    user: Mint

    @field_validator("recurring_type")
    @classmethod
    def _concrete_type(cls, value: RecurringOrderType) -> RecurringOrderType:
        if value is RecurringOrderType.ALL:
            raise ValueError("recurring_type 'all' can only be used to list orders")
        return value


class PriceDeposit(JupiterRequest):
    amount: PositiveU64
    order: Mint
    user: Mint


class PriceWithdraw(JupiterRequest):
    """Withdraw from a price-based order; without ``amount`` everything is withdrawn."""

    order: Mint
    user: Mint
    input_or_output: WithdrawSide
    amount: Optional[PositiveU64] = None

    def with_amount(self, amount: int) -> "PriceWithdraw":
        return self._with(amount=amount)


class RecurringResponse(JupiterModel):
    request_id: str
    transaction: str


class ExecuteRecurringRequest(JupiterRequest):
    request_id: Mint
    signed_transaction: Mint


class GetRecurringOrders(JupiterRequest):
    recurring_type: RecurringOrderType
    order_status: OrderStatus
    user: Mint
    page: int = Field(default=1, ge=1)
    mint: Optional[str] = None
    include_failed_tx: bool = False

    def with_page(self, page: int) -> "GetRecurringOrders":
        return self._with(page=page)

    def with_mint(self, mint: str) -> "GetRecurringOrders":
        return self._with(mint=mint)

    def with_include_failed_tx(self, value: bool = True) -> "GetRecurringOrders":
        return self._with(include_failed_tx=value)


class RecurringOrders(JupiterModel):
    order_status: OrderStatus
    page: int
    total_pages: int
    user: str
    time: Optional[List[Any]] = None
    price: Optional[List[Any]] = None
    all: Optional[List[Any]] = None


__all__ = [
    "CancelRecurringOrderRequest",
    "CreateRecurringOrderRequest",
    "ExecuteRecurringRequest",
    "GetRecurringOrders",
    "OrderParams",
    "PriceDeposit",
    "PriceOrderParams",
    "PriceParams",
    "PriceWithdraw",
    "RecurringOrderType",
    "RecurringOrders",
    "RecurringResponse",
    "TimeOrderParams",
    "TimeParams",
    "WithdrawSide",
]
