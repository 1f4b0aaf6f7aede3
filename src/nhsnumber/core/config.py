"""Validator configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ValidatorSettings(BaseSettings):
    """Settings for the batch validator service and package logging."""

    model_config = {"env_prefix": "NHSNUMBER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    redact_numbers: bool = True  # keep patient identifiers out of log lines
    accept_formatted_input: bool = True  # strip "401 023 2137" before checking
