"""Configuration settings for hand evaluation and display."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class DisplayConfig:
    """Card rendering configuration."""

    mode: str = "ascii"  # ascii, unicode, colored-unicode, colored-emoji
    cards_per_row: int = 4


@dataclass
class EvaluatorConfig:
    """Hand evaluator configuration."""

    workers: int = 0  # 0 evaluates subsets sequentially


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: str | None = None


@dataclass
class Config:
    """Complete configuration."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "display" in data:
        config.display = DisplayConfig(**data["display"])
    if "evaluator" in data:
        config.evaluator = EvaluatorConfig(**data["evaluator"])
    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "display": {
            "mode": config.display.mode,
            "cards_per_row": config.display.cards_per_row,
        },
        "evaluator": {
            "workers": config.evaluator.workers,
        },
        "logging": {
            "level": config.logging.level,
            "log_file": config.logging.log_file,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
