from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest
from jupiter_sdk.schemas.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    GetRecurringOrders,
    OrderParams,
    PriceDeposit,
    PriceOrderParams,
    PriceParams,
    PriceWithdraw,
    RecurringOrderType,
    RecurringOrders,
    RecurringResponse,
    TimeOrderParams,
    TimeParams,
    WithdrawSide,
)
from jupiter_sdk.schemas.swap import (
    AccountMeta,
    Instruction,
    MostReliableAmmsQuoteReport,
    PlatformFee,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    QuoteRequest,
    QuoteResponse,
    RoutePlanStep,
    SwapInfo,
    SwapInstructions,
    SwapMode,
    SwapRequest,
    SwapResponse,
)
from jupiter_sdk.schemas.token import TokenPrice, TokenPriceRequest, TokenPriceResponse
from jupiter_sdk.schemas.trigger import (
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateTriggerOrder,
    ExecuteResponse,
    ExecuteTriggerOrder,
    GetTriggerOrders,
    OrderStatus,
    TriggerOrder,
    TriggerOrderParams,
    TriggerOrdersResponse,
    TriggerResponse,
)
from jupiter_sdk.schemas.ultra import (
    Router,
    Shield,
    ShieldWarning,
    SwapEvent,
    SwapType,
    TokenBalance,
    TokenBalances,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

__all__ = [
    "AccountMeta",
    "CancelRecurringOrderRequest",
    "CancelTriggerOrder",
    "CancelTriggerOrders",
    "CreateRecurringOrderRequest",
    "CreateTriggerOrder",
    "ExecuteRecurringRequest",
    "ExecuteResponse",
    "ExecuteTriggerOrder",
    "GetRecurringOrders",
    "GetTriggerOrders",
    "Instruction",
    "JupiterModel",
    "JupiterRequest",
    "MostReliableAmmsQuoteReport",
    "OrderParams",
    "OrderStatus",
    "PlatformFee",
    "PriceDeposit",
    "PriceOrderParams",
    "PriceParams",
    "PriceWithdraw",
    "PrioritizationFeeLamports",
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "QuoteRequest",
    "QuoteResponse",
    "RecurringOrderType",
    "RecurringOrders",
    "RecurringResponse",
    "RoutePlanStep",
    "Router",
    "Shield",
    "ShieldWarning",
    "SwapEvent",
    "SwapInfo",
    "SwapInstructions",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "SwapType",
    "TimeOrderParams",
    "TimeParams",
    "TokenBalance",
    "TokenBalances",
    "TokenPrice",
    "TokenPriceRequest",
    "TokenPriceResponse",
    "TriggerOrder",
    "TriggerOrderParams",
    "TriggerOrdersResponse",
    "TriggerResponse",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "UltraOrderRequest",
    "UltraOrderResponse",
    "WithdrawSide",
]
