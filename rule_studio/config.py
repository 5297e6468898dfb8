"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``RULE_STUDIO_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance and resolve seed/output
paths through it — never raw dicts or env var lookups scattered through
the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class DataConfig(BaseModel):
    """Filesystem paths for seed data and report output."""

    model_config = ConfigDict(frozen=True)

    seed_dir: str = "config/seed"
    rules_file: str = "rules.json"
    products_file: str = "products.json"
    profile_file: str = "profile.json"
    events_file: str = "events.json"
    output_dir: str = "data/outputs"

    def seed_path(self, filename: str) -> Path:
        """Resolve a seed filename against ``seed_dir``."""
        return Path(self.seed_dir) / filename

    @property
    def rules_path(self) -> Path:
        return self.seed_path(self.rules_file)

    @property
    def products_path(self) -> Path:
        return self.seed_path(self.products_file)

    @property
    def profile_path(self) -> Path:
        return self.seed_path(self.profile_file)

    @property
    def events_path(self) -> Path:
        return self.seed_path(self.events_file)


class EngineConfig(BaseModel):
    """Rule evaluation and ranking settings."""

    model_config = ConfigDict(frozen=True)

    score_precision: int = 2

    @field_validator("score_precision")
    @classmethod
    def validate_precision(cls, v: int) -> int:
        if not 0 <= v <= 6:
            raise ValueError(f"score_precision must be in [0, 6], got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    data: DataConfig = DataConfig()
    engine: EngineConfig = EngineConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply RULE_STUDIO_* environment variable overrides
    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply RULE_STUDIO_* env vars to the raw config dict.

    Supported overrides:
      RULE_STUDIO_SEED_DIR    → raw["data"]["seed_dir"]
      RULE_STUDIO_OUTPUT_DIR  → raw["data"]["output_dir"]
      RULE_STUDIO_LOG_LEVEL   → raw["logging"]["level"]
      RULE_STUDIO_DEBUG       → raw["debug"]
    """
    if seed_dir := os.environ.get("RULE_STUDIO_SEED_DIR"):
        raw.setdefault("data", {})["seed_dir"] = seed_dir

    if output_dir := os.environ.get("RULE_STUDIO_OUTPUT_DIR"):
        raw.setdefault("data", {})["output_dir"] = output_dir

    if log_level := os.environ.get("RULE_STUDIO_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("RULE_STUDIO_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        data=DataConfig(**raw.get("data", {})),
        engine=EngineConfig(**raw.get("engine", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
