"""TOML configuration loader with env overrides."""

import logging
import os
import tomllib
from pathlib import Path

from src.domain.ports.config import AppConfig, SigningConfig, WizardConfig

logger = logging.getLogger(__name__)


def _load_toml(path: Path) -> dict:
    """Load TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _split_fields(raw: str) -> list[str]:
    return [f.strip() for f in raw.split(",") if f.strip()]


def _apply_env_overrides(config: dict) -> dict:
    """Apply environment variable overrides."""
    if secret := os.getenv("JWIZARD_SECRET"):
        config.setdefault("signing", {})["secret"] = secret
    if algorithm := os.getenv("JWIZARD_ALGORITHM"):
        config.setdefault("signing", {})["algorithm"] = algorithm.strip().upper()
    if size := os.getenv("JWIZARD_SECRET_BYTES"):
        try:
            config.setdefault("signing", {})["secret_bytes"] = int(size)
        except ValueError:
            logger.warning("Invalid JWIZARD_SECRET_BYTES env value: %r, ignoring", size)
    fields = os.getenv("JWIZARD_REQUIRED_FIELDS")
    if fields is not None:
        # Set but empty = no required fields
        config.setdefault("wizard", {})["required_fields"] = _split_fields(fields)
    if level := os.getenv("LOG_LEVEL"):
        config.setdefault("logging", {})["level"] = level.upper()
    return config


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load configuration from TOML files with env overrides.

    Loads default.toml, then development.toml if exists.
    """
    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent.parent.parent / "config"

    config: dict = {}

    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = _load_toml(default_path)

    dev_path = config_dir / "development.toml"
    if dev_path.exists():
        dev_config = _load_toml(dev_path)
        for key, value in dev_config.items():
            if isinstance(value, dict) and key in config and isinstance(config[key], dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value

    config = _apply_env_overrides(config)

    wizard = WizardConfig(**(config.get("wizard") or {}))
    signing = SigningConfig(**(config.get("signing") or {}))
    logging_raw = config.get("logging") or {}
    log_level = logging_raw.get("level", "WARNING")

    return AppConfig(wizard=wizard, signing=signing, log_level=log_level)
