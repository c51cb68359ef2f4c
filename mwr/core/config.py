"""
Configuration loader for the MWR calculator.

Loads settings from config.yaml and provides access throughout the application.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)


@dataclass
class DataConfig:
    """Configuration for ledger input."""
    ledger_path: str = "data/transactions.csv"
    date_format: Optional[str] = None

    @property
    def ledger(self) -> Path:
        return Path(self.ledger_path)


@dataclass
class CalculatorConfig:
    """Numeric settings for the Newton-Raphson IRR solver."""
    initial_guess: float = 0.1
    tolerance: float = 0.00001
    max_iterations: int = 100
    min_rate: float = -0.99
    max_rate: float = 10.0
    days_per_year: float = 365.25

    def __post_init__(self):
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if self.min_rate <= -1:
            raise ValueError(f"min_rate must be greater than -1, got {self.min_rate}")
        if self.min_rate >= self.max_rate:
            raise ValueError(
                f"min_rate ({self.min_rate}) must be below max_rate ({self.max_rate})"
            )
        if self.days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {self.days_per_year}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%H:%M:%S"


@dataclass
class Config:
    """Main configuration container."""
    data: DataConfig = field(default_factory=DataConfig)
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file. Missing sections use defaults."""
        path = Path(path)
        logger.debug(f"Loading configuration from {path}")

        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}

        return cls(
            data=DataConfig(**(raw.get("data") or {})),
            calculator=CalculatorConfig(**(raw.get("calculator") or {})),
            logging=LoggingConfig(**(raw.get("logging") or {})),
        )


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging based on configuration."""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
        datefmt=config.date_format,
    )
    logger.info("Logging configured successfully")


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load configuration and set up logging.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Loaded Config object.
    """
    config = Config.from_yaml(path)
    setup_logging(config.logging)
    return config
