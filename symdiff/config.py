"""Configuration for the interactive differentiator."""

import os
from dataclasses import dataclass, field


def _env_float(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class Config:
    """Settings for one session (environment variables override defaults)."""

    # Value announced for x in stack code and used for --value.
    x: float = field(default_factory=lambda: _env_float("SYMDIFF_X", 0.0))

    show_value: bool = False
    show_original: bool = False

    prompt: str = "?  "
    banner: str = "Enter an expression, or press return to end."

    log_level: str = field(
        default_factory=lambda: os.getenv("SYMDIFF_LOG_LEVEL", "WARNING"))
