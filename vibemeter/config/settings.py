"""
User settings snapshot.

Values come from the environment (optionally a ``.env`` file) the same way
provider credentials do; persistence is handled elsewhere.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from vibemeter.config.currencies import BASE_CURRENCY

DEFAULT_UPPER_LIMIT_USD = 1000.0
DEFAULT_WARNING_LIMIT_USD = 200.0

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Spending limits and display preferences."""
    upper_limit_usd: float = DEFAULT_UPPER_LIMIT_USD
    warning_limit_usd: float = DEFAULT_WARNING_LIMIT_USD
    selected_currency_code: str = BASE_CURRENCY
    launch_at_login_enabled: bool = False  # passed through to the UI only
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from VIBEMETER_* environment variables."""
        load_dotenv(env_file)

        return cls(
            upper_limit_usd=_float_env("VIBEMETER_UPPER_LIMIT_USD", DEFAULT_UPPER_LIMIT_USD),
            warning_limit_usd=_float_env("VIBEMETER_WARNING_LIMIT_USD", DEFAULT_WARNING_LIMIT_USD),
            selected_currency_code=os.getenv("VIBEMETER_CURRENCY", BASE_CURRENCY).strip().upper(),
            launch_at_login_enabled=os.getenv("VIBEMETER_LAUNCH_AT_LOGIN", "").lower() in _TRUTHY,
            log_level=os.getenv("VIBEMETER_LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with the given non-None fields replaced."""
        values = {
            "upper_limit_usd": self.upper_limit_usd,
            "warning_limit_usd": self.warning_limit_usd,
            "selected_currency_code": self.selected_currency_code,
            "launch_at_login_enabled": self.launch_at_login_enabled,
            "log_level": self.log_level,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
