"""
Configuration management for the adaptive item-administration engine.

This module centralizes all configuration settings following 12-factor app principles:
- Settings loaded from environment variables (optionally via a .env file)
- Sensible defaults for development
- Single source of truth for paths, engine and logging settings
- Explicit validation returning a list of errors
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


SUPPORTED_STRATEGIES = ("adaptive", "catalog")
SUPPORTED_LANGUAGES = ("en", "de")


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return int(value)


@dataclass
class EngineConfig:
    """Item-administration engine configuration."""

    # Which item administration strategy hosts get by default
    strategy: str = field(
        default_factory=lambda: os.getenv("ITEM_ADMINISTRATION_STRATEGY", "adaptive")
    )

    # Language used for stop-criterion messages
    language: str = field(default_factory=lambda: os.getenv("ENGINE_LANGUAGE", "en"))

    # Reproducibility
    deterministic: bool = field(
        default_factory=lambda: os.getenv("ENGINE_DETERMINISTIC", "false").lower() == "true"
    )
    random_seed: Optional[int] = field(default_factory=lambda: _env_int("ENGINE_RANDOM_SEED"))

    def __post_init__(self):
        """Deterministic mode pins the selector seed."""
        if self.deterministic and self.random_seed is None:
            self.random_seed = 42


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)
    data_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("ENGINE_DATA_DIR", str(Path(__file__).parent.parent / "data"))
        )
    )

    # Computed from the base paths
    attempts_dir: Path = field(init=False)
    schemas_dir: Path = field(init=False)
    quiz_configuration_schema: Path = field(init=False)
    question_catalog_schema: Path = field(init=False)
    attempt_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.data_dir = Path(self.data_dir).resolve()
        self.attempts_dir = self.data_dir / "attempts"
        self.schemas_dir = self.project_root / "schemas"
        self.quiz_configuration_schema = self.schemas_dir / "quiz_configuration.schema.json"
        self.question_catalog_schema = self.schemas_dir / "question_catalog.schema.json"
        self.attempt_schema = self.schemas_dir / "attempt.schema.json"

    def prepare_filesystem(self):
        """
        Create directories if they don't exist.

        Separated from __post_init__ to avoid side-effects on import.
        Call this explicitly from your app entrypoint.
        """
        for directory in [self.data_dir, self.attempts_dir]:
            directory.mkdir(parents=True, exist_ok=True)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from src.config import config

        strategy = config.engine.strategy
        schema = config.paths.quiz_configuration_schema

        # Prepare filesystem (call once at startup)
        config.prepare_fs()
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.engine = EngineConfig()
            cls._instance.logging = LoggingConfig()
        return cls._instance

    def prepare_fs(self):
        """Prepare filesystem (create directories). Call once at startup."""
        self.paths.prepare_filesystem()

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.engine.strategy not in SUPPORTED_STRATEGIES:
            errors.append(
                f"strategy must be one of {SUPPORTED_STRATEGIES}, got {self.engine.strategy!r}"
            )

        if self.engine.language not in SUPPORTED_LANGUAGES:
            errors.append(
                f"language must be one of {SUPPORTED_LANGUAGES}, got {self.engine.language!r}"
            )

        if self.engine.random_seed is not None and self.engine.random_seed < 0:
            errors.append(f"random_seed must be >= 0, got {self.engine.random_seed}")

        if logging.getLevelName(self.logging.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            errors.append(f"log_level is not a valid logging level: {self.logging.log_level!r}")

        for schema in (
            self.paths.quiz_configuration_schema,
            self.paths.question_catalog_schema,
            self.paths.attempt_schema,
        ):
            if not schema.exists():
                errors.append(f"Schema not found: {schema}")

        return errors


# Global config instance
config = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    logging.basicConfig(
        level=(level or config.logging.log_level).upper(),
        format=config.logging.log_format,
    )
