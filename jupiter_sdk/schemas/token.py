from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import Field

from jupiter_sdk.schemas.base import JupiterModel, JupiterRequest, str_tuple


class TokenPriceRequest(JupiterRequest):
    """Query parameters for ``GET /price/v2``.

    Prices are quoted in USD unless ``vs_token`` names another mint;
    ``show_extra_info`` cannot be combined with ``vs_token``.
    """

    token_mints: Tuple[str, ...] = Field(alias="ids", min_length=1)
    vs_token: Optional[str] = None
    show_extra_info: Optional[bool] = None

    @classmethod
    def for_mints(cls, token_mints: Iterable[str]) -> "TokenPriceRequest":
        return cls(token_mints=str_tuple(token_mints, "token_mints"))

    def with_vs_token(self, vs_token: str) -> "TokenPriceRequest":
        return self._with(vs_token=vs_token)

    def with_show_extra_info(self, show_extra_info: bool = True) -> "TokenPriceRequest":
        return self._with(show_extra_info=show_extra_info)


class TokenPrice(JupiterModel):
    id: str
    data_type: str = Field(alias="type")
    price: str
    extra_info: Optional[Any] = None

    def as_float(self) -> float:
        return float(self.price)


class TokenPriceResponse(JupiterModel):
    data: Dict[str, Optional[TokenPrice]]
    time_taken: Optional[float] = None

    def price_of(self, mint: str) -> Optional[TokenPrice]:
        return self.data.get(mint)


__all__ = ["TokenPrice", "TokenPriceRequest", "TokenPriceResponse"]
