from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Type, TypeVar

from jupiter_sdk.core.codec import decode_response

T = TypeVar("T")


def fixture_path(base_dir: Path, name: str) -> Path:
    path = Path(base_dir) / name
    if not path.is_file():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


def load_fixture_text(base_dir: Path, name: str) -> str:
    return fixture_path(base_dir, name).read_text(encoding="utf-8")


def load_fixture(base_dir: Path, name: str) -> Any:
    return json.loads(load_fixture_text(base_dir, name))


def decode_fixture(base_dir: Path, name: str, target: Type[T]) -> T:
    """Decode a recorded response body exactly as the client would."""
    return decode_response(load_fixture_text(base_dir, name), target)


__all__ = ["decode_fixture", "fixture_path", "load_fixture", "load_fixture_text"]
