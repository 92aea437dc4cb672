from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import Field, RootModel

from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest, Mint, PositiveU64, str_tuple
from jupiter_sdk.schemas.swap import PlatformFee, RoutePlanStep, SwapMode


class SwapType(str, Enum):
    AGGREGATOR = "aggregator"
    RFQ = "rfq"
    HASHFLOW = "hashflow"


class UltraOrderRequest(JupiterRequest):
    """Query parameters for ``GET /ultra/v1/order``.

    Without a ``taker`` the server still answers, but the response carries no
    transaction.
    """

    input_mint: Mint
    output_mint: Mint
    amount: PositiveU64
    taker: Optional[str] = None
    referral_account: Optional[str] = None
    referral_fee: Optional[int] = Field(default=None, ge=50, le=255)
    exclude_routers: Optional[Tuple[str, ...]] = None
    exclude_dexes: Optional[Tuple[str, ...]] = None

    def with_taker(self, taker: str) -> "UltraOrderRequest":
        return self._with(taker=taker)

    def with_referral(self, referral_account: str, referral_fee: int) -> "UltraOrderRequest":
        return self._with(referral_account=referral_account, referral_fee=referral_fee)

    def with_exclude_routers(self, routers: Iterable[str]) -> "UltraOrderRequest":
        return self._with(exclude_routers=str_tuple(routers, "exclude_routers"))

    def with_exclude_dexes(self, dexes: Iterable[str]) -> "UltraOrderRequest":
        return self._with(exclude_dexes=str_tuple(dexes, "exclude_dexes"))


class UltraOrderResponse(JupiterModel):
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    price_impact_pct: str
    route_plan: List[RoutePlanStep]
    fee_mint: Optional[str] = None
    fee_bps: int
    prioritization_fee_lamports: int
    swap_type: SwapType
    transaction: Optional[str] = None
    gasless: bool
    request_id: str
    total_time: int
    taker: Optional[str] = None
    quote_id: Optional[str] = None
    maker: Optional[str] = None
    platform_fee: Optional[PlatformFee] = None
    expire_at: Optional[int] = None
    router: Optional[str] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None


class UltraExecuteOrderRequest(JupiterRequest):
    signed_transaction: Mint
    request_id: Mint


class SwapEvent(JupiterModel):
    input_mint: str
    input_amount: str
    output_mint: str
    output_amount: str


class UltraExecuteOrderResponse(JupiterModel):
    status: str
    signature: Optional[str] = None
    slot: Optional[int] = None
    error: Optional[str] = None
    code: int = 0
    total_input_amount: Optional[str] = None
    total_output_amount: Optional[str] = None
    input_amount_result: Optional[str] = None
    output_amount_result: Optional[str] = None
    swap_events: Optional[List[SwapEvent]] = None


class TokenBalance(JupiterModel):
    amount: str
    ui_amount: float
    slot: int
    is_frozen: bool


class TokenBalances(RootModel[Dict[str, TokenBalance]]):
    """Balances keyed by mint; native SOL is listed under ``"SOL"``."""

    def __getitem__(self, mint: str) -> TokenBalance:
        return self.root[mint]

    def __contains__(self, mint: object) -> bool:
        return mint in self.root

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, mint: str, default: Optional[TokenBalance] = None) -> Optional[TokenBalance]:
        return self.root.get(mint, default)


class ShieldWarning(JupiterModel):
    warning_type: str = Field(alias="type")
    message: str
    severity: str


class Shield(JupiterModel):
    warnings: Dict[str, List[ShieldWarning]] = Field(default_factory=dict)

    def for_mint(self, mint: str) -> List[ShieldWarning]:
        return self.warnings.get(mint, [])


class Router(JupiterModel):
    id: str
    name: str
    icon: Optional[str] = None


__all__ = [
    "Router",
    "Shield",
    "ShieldWarning",
    "SwapEvent",
    "SwapType",
    "TokenBalance",
    "TokenBalances",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "UltraOrderRequest",
    "UltraOrderResponse",
]
