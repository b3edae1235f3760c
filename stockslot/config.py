"""
Configuration for the stockslot catalogs.

Defaults live on the dataclass; ``from_env`` overlays STOCKSLOT_* variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Items restocked less often than this many days go to sparse storage
RARE_RESTOCK_THRESHOLD_DAYS = 90

ENV_PREFIX = "STOCKSLOT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CatalogSettings:
    default_capacity: int = 10
    row_major: bool = True
    rare_restock_threshold: int = RARE_RESTOCK_THRESHOLD_DAYS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'CatalogSettings':
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, ``os.environ`` when omitted

        Raises:
            ValueError: If a variable is present but malformed
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        capacity = _read_int(env, "CAPACITY", defaults.default_capacity)
        if capacity <= 0:
            raise ValueError(
                f"{ENV_PREFIX}CAPACITY must be positive, got {capacity}")

        threshold = _read_int(env, "RARE_RESTOCK_DAYS",
                              defaults.rare_restock_threshold)
        if threshold < 0:
            raise ValueError(
                f"{ENV_PREFIX}RARE_RESTOCK_DAYS must be non-negative, got {threshold}")

        return cls(
            default_capacity=capacity,
            row_major=_read_bool(env, "ROW_MAJOR", defaults.row_major),
            rare_restock_threshold=threshold,
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL",
                              defaults.log_level).upper(),
        )


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
