from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from jupiter_sdk.core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://lite-api.jup.ag"
DEFAULT_TIMEOUT = 10.0


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid Jupiter timeout: {value!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"Jupiter timeout must be positive, got {timeout}")
    return timeout


@dataclass(frozen=True)
class JupiterSettings:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "JupiterSettings":
        return cls(
            base_url=str(data.get("base_url") or DEFAULT_BASE_URL).strip().rstrip("/"),
            api_key=str(data.get("api_key") or "").strip(),
            timeout=_parse_timeout(data.get("timeout", DEFAULT_TIMEOUT)),
        )

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "JupiterSettings":
        return cls().with_env(env_file=env_file)

    def with_env(self, env_file: Optional[Path] = None) -> "JupiterSettings":
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)
        overrides: Dict[str, Any] = {}
        base_url = os.getenv("JUPITER_BASE_URL", "").strip()
        if base_url:
            overrides["base_url"] = base_url.rstrip("/")
        api_key = os.getenv("JUPITER_API_KEY", "").strip()
        if api_key:
            overrides["api_key"] = api_key
        timeout = os.getenv("JUPITER_TIMEOUT", "").strip()
        if timeout:
            overrides["timeout"] = _parse_timeout(timeout)
        return replace(self, **overrides)


def load_settings(path: str | Path | None = None, env_file: Optional[Path] = None) -> JupiterSettings:
    """Read the ``jupiter:`` section of a YAML file, then apply ``JUPITER_*`` env overrides."""
    if path is None:
        return JupiterSettings.from_env(env_file=env_file)

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    section = data.get("jupiter") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'jupiter' section in {config_path} must be a mapping")

    return JupiterSettings.from_mapping(section).with_env(env_file=env_file)


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "JupiterSettings", "load_settings"]
