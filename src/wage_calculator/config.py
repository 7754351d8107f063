"""Configuration management for the wage calculator."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from wage_calculator.calculators.tables import DEFAULT_TABLES, WageTables
from wage_calculator.calculators.types import CalculationModel

VALID_TRANSPORTS = ("stdio", "http")


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    transport: str
    calculation_model: CalculationModel
    clamp_contribution_base: bool

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.transport not in VALID_TRANSPORTS:
            raise ValueError(f"transport must be one of {VALID_TRANSPORTS}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "0.1.0"),
            host=os.getenv("WAGE_CALC_HOST", "127.0.0.1"),
            port=int(os.getenv("WAGE_CALC_PORT", "8000")),
            debug=_env_bool("WAGE_CALC_DEBUG"),
            log_level=os.getenv("WAGE_CALC_LOG_LEVEL", "INFO").upper(),
            transport=os.getenv("WAGE_CALC_TRANSPORT", "stdio").lower(),
            calculation_model=CalculationModel(
                os.getenv("WAGE_CALC_MODEL", CalculationModel.ITEMIZED.value).lower()
            ),
            clamp_contribution_base=_env_bool("WAGE_CALC_CLAMP_CONTRIBUTION_BASE"),
        )

    def build_tables(self) -> WageTables:
        """Default tables with the configured contribution base policy."""
        if self.clamp_contribution_base == DEFAULT_TABLES.clamp_contribution_base:
            return DEFAULT_TABLES
        return DEFAULT_TABLES.with_overrides(clamp_contribution_base=self.clamp_contribution_base)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout carries the MCP stream."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
