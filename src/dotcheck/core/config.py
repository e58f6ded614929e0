# src/dotcheck/core/config.py
"""
Configuration schema and loading for dotcheck runs.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from dotcheck.core.generators import INT_MAX, INT_MIN, MAX_CODE_POINT, MAX_STRING_LENGTH


class CheckSettings(BaseModel):
    """Top-level dotcheck configuration.

    Run-level fields (trials, verbose, seed) are read by the Runner.
    Generation bounds are applied when a registry is built with
    ``builtin_registry(settings)``.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    trials: int = Field(default=100, gt=0, description="Trials per property run")
    verbose: bool = Field(default=False, description="Print one line per trial")
    seed: int | None = Field(
        default=None,
        description="Seed for the runner's random source (None draws from OS entropy)",
    )

    max_string_length: int = Field(
        default=MAX_STRING_LENGTH,
        ge=0,
        description="Upper bound for generated string lengths",
    )
    int_min: int = Field(default=INT_MIN, description="Smallest generated integer")
    int_max: int = Field(default=INT_MAX, description="Largest generated integer")
    max_code_point: int = Field(
        default=MAX_CODE_POINT,
        ge=0,
        le=MAX_CODE_POINT,
        description="Largest generated character code point",
    )

    # Applied by Runner(settings=...) or configure_from_settings(); loading alone does not.
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum level of dotcheck log records written to stderr",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines instead of console output")

    @model_validator(mode="after")
    def validate_int_range(self) -> "CheckSettings":
        if self.int_min > self.int_max:
            raise ValueError(f"int_min ({self.int_min}) must not exceed int_max ({self.int_max})")
        return self


def load_settings(config_path: Path | None = None) -> CheckSettings:
    """Load settings from an optional YAML file with environment overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (DOTCHECK_*) - highest priority
    2. Config file (YAML)
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file, or None for
            environment and defaults only.

    Returns:
        Validated CheckSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="DOTCHECK",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config: dict[str, Any] = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return CheckSettings(**raw_config)
