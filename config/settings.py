"""Configuration helpers for the AI Logo Studio project."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DEFAULT_MODEL = "gemini-2.5-flash-image-preview"


@dataclass(slots=True)
class AppConfig:
    """Centralized application configuration."""

    assets_dir: Path = Path("assets")
    output_dir: Path = Path("outputs")
    log_dir: Path = Path("logs")
    gemini_api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL
    variation_count: int = 3
    default_prompt: str = "a majestic lion head with a futuristic crown"
    default_company_name: str = "Synergize"
    default_style: str = "Modern"
    server_host: str = "127.0.0.1"
    server_port: int = 7860
    metadata: dict[str, Any] = field(default_factory=dict)


def _load_env_file(path: Path) -> None:
    """Populate environment variables from a simple KEY=VALUE .env file."""
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ[key.strip()] = value.strip().strip('"').strip("'")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Return an AppConfig instance with environment-aware settings."""
    env_path = Path(config_path) if config_path else Path(".env")
    _load_env_file(env_path)

    defaults = AppConfig()
    api_key = (
        os.getenv("GEMINI_API_KEY")
        or os.getenv("API_KEY")
        or os.getenv("GOOGLE_API_KEY")
    )

    variation_count = max(1, _int_env("LOGO_VARIATION_COUNT", defaults.variation_count))

    metadata: dict[str, Any] = {}
    if os.getenv("GEMINI_BASE_URL"):
        metadata["gemini_base_url"] = os.getenv("GEMINI_BASE_URL")

    return AppConfig(
        assets_dir=Path(os.getenv("LOGO_ASSETS_DIR", str(defaults.assets_dir))).expanduser(),
        output_dir=Path(os.getenv("LOGO_OUTPUT_DIR", str(defaults.output_dir))).expanduser(),
        log_dir=Path(os.getenv("LOG_DIR", str(defaults.log_dir))).expanduser(),
        gemini_api_key=api_key,
        model_name=os.getenv("LOGO_MODEL") or defaults.model_name,
        variation_count=variation_count,
        default_prompt=os.getenv("LOGO_DEFAULT_PROMPT") or defaults.default_prompt,
        default_company_name=os.getenv("LOGO_DEFAULT_COMPANY") or defaults.default_company_name,
        default_style=os.getenv("LOGO_DEFAULT_STYLE") or defaults.default_style,
        server_host=os.getenv("SERVER_HOST") or defaults.server_host,
        server_port=_int_env("SERVER_PORT", defaults.server_port),
        metadata=metadata,
    )
