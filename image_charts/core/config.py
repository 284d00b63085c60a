from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PROTOCOL = "https"
DEFAULT_HOST = "image-charts.com"
DEFAULT_PORT = 443
DEFAULT_TIMEOUT_MS = 5000


@dataclass
class Settings:
    secret: str | None
    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT_MS
    user_agent: str | None = None


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support IMAGE_CHARTS_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            env[k] = v
    except (OSError, UnicodeDecodeError):
        # An unreadable .env must not break library or CLI usage
        return {}
    return env


def _get_env(
    name: str,
    fallback_names: list[str] | None = None,
    env_file: dict[str, str] | None = None,
) -> str | None:
    # Priority: process env -> .env -> fallback names
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if fallback_names:
        for fb in fallback_names:
            v = os.getenv(fb)
            if v:
                return v
            if env_file and fb in env_file:
                return env_file[fb]
    return None


def _parse_number(name: str, raw: str | None, default: float, cast: type) -> float:
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _positive(name: str, value: float) -> float:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value!r}")
    return value


def get_settings() -> Settings:
    env_file = _read_env_file()
    secret = _get_env("IMAGE_CHARTS_SECRET", ["IC_SECRET"], env_file)
    protocol = _get_env("IMAGE_CHARTS_PROTOCOL", env_file=env_file)
    host = _get_env("IMAGE_CHARTS_HOST", env_file=env_file)
    port = _get_env("IMAGE_CHARTS_PORT", env_file=env_file)
    timeout = _get_env("IMAGE_CHARTS_TIMEOUT", env_file=env_file)
    user_agent = _get_env("IMAGE_CHARTS_USER_AGENT", env_file=env_file)
    return Settings(
        secret=secret,
        protocol=protocol or DEFAULT_PROTOCOL,
        host=host or DEFAULT_HOST,
        port=int(_parse_number("IMAGE_CHARTS_PORT", port, DEFAULT_PORT, int)),
        timeout=_positive(
            "IMAGE_CHARTS_TIMEOUT",
            _parse_number("IMAGE_CHARTS_TIMEOUT", timeout, DEFAULT_TIMEOUT_MS, float),
        ),
        user_agent=user_agent,
    )
