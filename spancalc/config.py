# Settings for the REPL, read from the environment (and a .env file) and
# overridden by command-line flags.

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SPANCALC_"
DEFAULT_HISTORY_FILE = "~/.spancalc_history"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CalculatorSettings(BaseModel):
    rpn: bool = Field(False, description="Print postfix (RPN) text instead of evaluating")
    prompt: str = "> "
    history_file: Optional[str] = Field(
        DEFAULT_HISTORY_FILE,
        validate_default=True,
        description="Interactive history file; empty disables history",
    )
    log_level: str = "WARNING"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_file(cls, v):
        if not v:
            return None
        return os.path.expanduser(v)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _from_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in CalculatorSettings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return values


def load_settings(**overrides: Any) -> CalculatorSettings:
    """Build settings from SPANCALC_* variables (a .env file found from the
    working directory fills unset ones), then `overrides`.

    Overrides that are None are ignored so unset CLI flags fall through.
    """
    load_dotenv(find_dotenv(usecwd=True))
    values = _from_env()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CalculatorSettings(**values)
