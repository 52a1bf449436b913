from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict

import yaml
from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str

    default_currency: str
    net_worth_currency: str
    default_compounding_frequency: int


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Loads config.yaml + overrides from .env/environment variables.
    """
    load_dotenv()  # loads .env into env vars

    cfg: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    # Empty env vars count as "not set" so they never mask config.yaml.
    def _env_or_cfg(key: str, cfg_path: str, default):
        v = os.getenv(key)
        if v is None:
            return _deep_get(cfg, cfg_path, default)
        v = v.strip()
        return _deep_get(cfg, cfg_path, default) if v == "" else v

    env = _env_or_cfg("APP_ENV", "app.env", "dev")
    log_level = _env_or_cfg("LOG_LEVEL", "app.log_level", "INFO")

    default_currency = str(_env_or_cfg("DEFAULT_CURRENCY", "calculators.default_currency", "USD")).strip().upper()
    net_worth_currency = str(_env_or_cfg("NET_WORTH_CURRENCY", "calculators.net_worth_currency", "NGN")).strip().upper()

    try:
        default_compounding_frequency = int(
            _env_or_cfg("DEFAULT_COMPOUNDING", "calculators.default_compounding_frequency", 2)
        )
    except (TypeError, ValueError):
        default_compounding_frequency = 2
    if default_compounding_frequency < 1:
        default_compounding_frequency = 2

    return Settings(
        env=env,
        log_level=log_level,
        default_currency=default_currency,
        net_worth_currency=net_worth_currency,
        default_compounding_frequency=default_compounding_frequency,
    )


# Optional convenience singleton
SETTINGS = load_settings()
