"""Process settings read from KEYDIR_* environment variables."""

import os
from dataclasses import dataclass, fields, replace as _replace
from typing import Mapping, Optional

from .encoding import NETWORKS
from .keyspace import RESULTS_PER_PAGE

ENV_PREFIX = "KEYDIR_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup"""
    host: str = "0.0.0.0"
    port: int = 8085
    page_size: int = RESULTS_PER_PAGE
    network: str = "mainnet"
    explorer_url: str = "https://blockchain.info/address/"
    log_level: str = "INFO"

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"{ENV_PREFIX}PORT out of range: {self.port}")
        if self.page_size < 1:
            raise ValueError(f"{ENV_PREFIX}PAGE_SIZE must be positive: {self.page_size}")
        if self.network not in NETWORKS:
            raise ValueError(f"{ENV_PREFIX}NETWORK must be one of {sorted(NETWORKS)}: {self.network!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {LOG_LEVELS}: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for field in fields(cls):
            raw = environ.get(ENV_PREFIX + field.name.upper())
            if raw is None or raw.strip() == "":
                continue
            values[field.name] = _convert(field.name, field.type, raw.strip())
        return cls(**values)

    def replace(self, **overrides) -> "Settings":
        return _replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _convert(name: str, kind, raw: str):
    if kind in (int, "int"):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{name.upper()} must be an integer: {raw!r}") from None
    if name == "network":
        return raw.lower()
    if name == "log_level":
        return raw.upper()
    return raw
