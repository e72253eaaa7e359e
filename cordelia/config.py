"""
Configuration for the Cordelia host layers (CLI, batch, API).

The engine in cordelia/core is configuration-free; these settings only
affect how hosts log, read batch files, and how many keys they display.
Values come from the environment (a local ``.env`` is loaded by the CLI via
python-dotenv before ``CordeliaConfig.from_env()`` is called).
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

ENV_LOG_LEVEL = "CORDELIA_LOG_LEVEL"
ENV_MAX_KEYS = "CORDELIA_MAX_KEYS"
ENV_BATCH_ENCODING = "CORDELIA_BATCH_ENCODING"


@dataclass(frozen=True)
class CordeliaConfig:
    """
    Host-layer settings.

    Attributes:
        log_level: Root logging level name. Defaults to "WARNING" so normal
            runs print only results.
        max_keys: How many ranked keys to display. 0 shows the full ranking.
        batch_encoding: Text encoding used to read batch files.

    Example:
        >>> config = CordeliaConfig(max_keys=3)
        >>> config.max_keys
        3
    """

    log_level: str = "WARNING"
    max_keys: int = 0
    batch_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log_level {self.log_level!r}, valid options: {sorted(VALID_LOG_LEVELS)}"
            )
        if self.max_keys < 0:
            raise ValueError(f"max_keys must be non-negative, got {self.max_keys}")
        if not self.batch_encoding:
            raise ValueError("batch_encoding must not be empty")
        try:
            codecs.lookup(self.batch_encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown batch_encoding {self.batch_encoding!r}") from exc

    @classmethod
    def from_env(cls) -> CordeliaConfig:
        """Build a config from CORDELIA_* environment variables, falling back to defaults."""
        raw_max_keys = os.getenv(ENV_MAX_KEYS, "").strip()
        try:
            max_keys = int(raw_max_keys) if raw_max_keys else cls.max_keys
        except ValueError as exc:
            raise ValueError(f"{ENV_MAX_KEYS} must be an integer, got {raw_max_keys!r}") from exc
        return cls(
            log_level=os.getenv(ENV_LOG_LEVEL, cls.log_level).strip().upper(),
            max_keys=max_keys,
            batch_encoding=os.getenv(ENV_BATCH_ENCODING, cls.batch_encoding).strip(),
        )


DEFAULT_CONFIG = CordeliaConfig()
"""Default configuration: WARNING logs, full key ranking, UTF-8 batch files."""
