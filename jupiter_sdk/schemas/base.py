from __future__ import annotations

from typing import Annotated, Any, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jupiter_sdk.core.exceptions import ConfigurationError

U64_MAX = 2**64 - 1

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
PositiveU64 = Annotated[int, Field(gt=0, le=U64_MAX)]
Mint = Annotated[str, Field(min_length=1)]


def str_tuple(values: Iterable[str], name: str) -> Tuple[str, ...]:
    """Collect a list option; a bare string is refused rather than split into characters."""
    if isinstance(values, (str, bytes)):
        raise ConfigurationError(f"{name} expects a collection of strings, got {values!r}")
    return tuple(values)


class JupiterModel(BaseModel):
    """Response payload: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class JupiterRequest(BaseModel):
    """Immutable request value.

    Optional fields default to ``None`` and are left out of the wire form.
    List options are stored as tuples. ``with_*`` helpers return a validated
    copy with one field set.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def _with(self, **changes: Any):
        return type(self).model_validate({**dict(self), **changes})


__all__ = ["JupiterModel", "JupiterRequest", "Mint", "PositiveU64", "U64", "U64_MAX", "str_tuple"]
