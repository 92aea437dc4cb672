from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from jupiter_sdk.core.exceptions import DecodingError
from jupiter_sdk.core.request_spec import canonicalize_query

T = TypeVar("T")


def to_body(model: BaseModel) -> Dict[str, Any]:
    """Dump a request model as a JSON body, leaving out every unset optional."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_query(model: BaseModel) -> Dict[str, str]:
    """Dump a request model as query parameters.

    Lists collapse into one comma-joined value, booleans become ``true``/``false``
    and unset optionals are dropped.
    """
    return canonicalize_query(to_body(model))


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_response(payload: Union[str, bytes], target: Type[T]) -> T:
    try:
        return _adapter(target).validate_json(payload)
    except ValidationError as exc:
        text = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes) else payload
        raise DecodingError(f"Failed to parse JSON response: {exc}", body=text) from exc


__all__ = ["decode_response", "to_body", "to_query"]
