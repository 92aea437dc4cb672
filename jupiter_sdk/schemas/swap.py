from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import Field, field_serializer, field_validator, model_validator

from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest, Mint, PositiveU64, U64, str_tuple


class SwapMode(str, Enum):
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class QuoteRequest(JupiterRequest):
    """Query parameters for ``GET /swap/v1/quote``.

    ``amount`` is the raw token amount (before decimals); it is interpreted as
    the input amount for ``ExactIn`` and the output amount for ``ExactOut``.
    """

    input_mint: Mint
    output_mint: Mint
    amount: PositiveU64
    slippage_bps: Optional[int] = Field(default=None, ge=0, le=10_000)
    swap_mode: Optional[SwapMode] = None
    dexes: Optional[Tuple[str, ...]] = None
    exclude_dexes: Optional[Tuple[str, ...]] = None
    restrict_intermediate_tokens: Optional[bool] = None
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    platform_fee_bps: Optional[U64] = None
    max_accounts: Optional[U64] = None
    dynamic_slippage: Optional[bool] = None

    def with_slippage_bps(self, slippage_bps: int) -> "QuoteRequest":
        return self._with(slippage_bps=slippage_bps)

    def with_swap_mode(self, swap_mode: SwapMode) -> "QuoteRequest":
        return self._with(swap_mode=swap_mode)

    def with_dexes(self, dexes: Iterable[str]) -> "QuoteRequest":
        return self._with(dexes=str_tuple(dexes, "dexes"))

    def with_exclude_dexes(self, exclude_dexes: Iterable[str]) -> "QuoteRequest":
        return self._with(exclude_dexes=str_tuple(exclude_dexes, "exclude_dexes"))

    def with_restrict_intermediate_tokens(self, restrict: bool = True) -> "QuoteRequest":
        return self._with(restrict_intermediate_tokens=restrict)

    def with_only_direct_routes(self, only_direct_routes: bool = True) -> "QuoteRequest":
        return self._with(only_direct_routes=only_direct_routes)

    def with_as_legacy_transaction(self, as_legacy_transaction: bool = True) -> "QuoteRequest":
        return self._with(as_legacy_transaction=as_legacy_transaction)

    def with_platform_fee_bps(self, platform_fee_bps: int) -> "QuoteRequest":
        return self._with(platform_fee_bps=platform_fee_bps)

    def with_max_accounts(self, max_accounts: int) -> "QuoteRequest":
        return self._with(max_accounts=max_accounts)

    def with_dynamic_slippage(self, dynamic_slippage: bool = True) -> "QuoteRequest":
        return self._with(dynamic_slippage=dynamic_slippage)


class PlatformFee(JupiterModel):
    amount: str
    fee_bps: int


class SwapInfo(JupiterModel):
    amm_key: str
    label: Optional[str] = None
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: Optional[str] = None
    fee_mint: Optional[str] = None


class RoutePlanStep(JupiterModel):
    swap_info: SwapInfo
    percent: int


class MostReliableAmmsQuoteReport(JupiterModel):
    info: Dict[str, str] = Field(default_factory=dict)


class QuoteResponse(JupiterModel):
    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: str
    route_plan: List[RoutePlanStep]
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None
    score_report: Optional[Any] = None
    swap_usd_value: Optional[str] = None
    simpler_route_used: Optional[bool] = None
    most_reliable_amms_quote_report: Optional[MostReliableAmmsQuoteReport] = None
    use_incurred_slippage_for_quoting: Optional[Any] = None


class PriorityLevelWithMaxLamports(JupiterRequest):
    max_lamports: U64
    priority_level: PriorityLevel


class PrioritizationFeeLamports(JupiterRequest):
    priority_level_with_max_lamports: Optional[PriorityLevelWithMaxLamports] = None
    jito_tip_lamports: Optional[U64] = None

    @model_validator(mode="after")
    def _require_strategy(self) -> "PrioritizationFeeLamports":
        if self.priority_level_with_max_lamports is None and self.jito_tip_lamports is None:
            raise ValueError("set priority_level_with_max_lamports or jito_tip_lamports")
        return self

    @classmethod
    def priority(cls, level: PriorityLevel, max_lamports: int) -> "PrioritizationFeeLamports":
        return cls(
            priority_level_with_max_lamports=PriorityLevelWithMaxLamports(
                priority_level=level, max_lamports=max_lamports
            )
        )

    @classmethod
    def jito_tip(cls, lamports: int) -> "PrioritizationFeeLamports":
        return cls(jito_tip_lamports=lamports)


class SwapRequest(JupiterRequest):
    """Body for ``POST /swap/v1/swap`` and ``/swap/v1/swap-instructions``.

    The quote is copied in when the request is built; refreshing a stale quote
    is up to the caller.
    """

    user_public_key: Mint
    quote_response: QuoteResponse
    wrap_and_unwrap_sol: Optional[bool] = None
    use_shared_accounts: Optional[bool] = None
    fee_account: Optional[str] = None
    tracking_account: Optional[str] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    as_legacy_transaction: Optional[bool] = None
    destination_token_account: Optional[str] = None
    dynamic_compute_unit_limit: Optional[bool] = None
    skip_user_accounts_rpc_calls: Optional[bool] = None
    dynamic_slippage: Optional[bool] = None
    compute_unit_price_micro_lamports: Optional[U64] = None
    blockhash_slots_to_expiry: Optional[U64] = None

    @field_validator("quote_response", mode="after")
    @classmethod
    def _copy_quote(cls, quote: QuoteResponse) -> QuoteResponse:
        return quote.model_copy(deep=True)

    @field_serializer("quote_response")
    def _dump_quote(self, quote: QuoteResponse) -> Dict[str, Any]:
        # Echoed back as received: explicit nulls and unknown keys stay.
        return quote.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def with_wrap_and_unwrap_sol(self, value: bool = True) -> "SwapRequest":
        return self._with(wrap_and_unwrap_sol=value)

    def with_use_shared_accounts(self, value: bool = True) -> "SwapRequest":
        return self._with(use_shared_accounts=value)

    def with_fee_account(self, fee_account: str) -> "SwapRequest":
        return self._with(fee_account=fee_account)

    def with_tracking_account(self, tracking_account: str) -> "SwapRequest":
        return self._with(tracking_account=tracking_account)

    def with_prioritization_fee_lamports(self, fee: PrioritizationFeeLamports) -> "SwapRequest":
        return self._with(prioritization_fee_lamports=fee)

    def with_as_legacy_transaction(self, value: bool = True) -> "SwapRequest":
        return self._with(as_legacy_transaction=value)

    def with_destination_token_account(self, account: str) -> "SwapRequest":
        return self._with(destination_token_account=account)

    def with_dynamic_compute_unit_limit(self, value: bool = True) -> "SwapRequest":
        return self._with(dynamic_compute_unit_limit=value)

    def with_skip_user_accounts_rpc_calls(self, value: bool = True) -> "SwapRequest":
        return self._with(skip_user_accounts_rpc_calls=value)

    def with_dynamic_slippage(self, value: bool = True) -> "SwapRequest":
        return self._with(dynamic_slippage=value)

    def with_compute_unit_price_micro_lamports(self, price: int) -> "SwapRequest":
        return self._with(compute_unit_price_micro_lamports=price)

    def with_blockhash_slots_to_expiry(self, slots: int) -> "SwapRequest":
        return self._with(blockhash_slots_to_expiry=slots)


class SwapResponse(JupiterModel):
    swap_transaction: str
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[Any] = None
    dynamic_slippage_report: Optional[Any] = None
    simulation_error: Optional[Any] = None


class AccountMeta(JupiterModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class Instruction(JupiterModel):
    program_id: str
    accounts: List[AccountMeta]
    data: str


class SwapInstructions(JupiterModel):
    compute_budget_instructions: List[Instruction] = Field(default_factory=list)
    setup_instructions: List[Instruction] = Field(default_factory=list)
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction] = None
    other_instructions: List[Instruction] = Field(default_factory=list)
    token_ledger_instruction: Optional[Instruction] = None
    address_lookup_table_addresses: List[str] = Field(default_factory=list)
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[Any] = None
    dynamic_slippage_report: Optional[Any] = None
    simulation_error: Optional[Any] = None


__all__ = [
    "AccountMeta",
    "Instruction",
    "MostReliableAmmsQuoteReport",
    "PlatformFee",
    "PrioritizationFeeLamports",
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "QuoteRequest",
    "QuoteResponse",
    "RoutePlanStep",
    "SwapInfo",
    "SwapInstructions",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
]
