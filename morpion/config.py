from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from morpion.core import BOARD_SIZE
from morpion.errors import ConfigError


@dataclass
class AppConfig:
    # Exhaustive minimax only finishes on the classic 3x3 board.
    board_size: int = BOARD_SIZE
    # Pause before an AI move, in seconds. Purely cosmetic.
    ai_think_delay: float = 0.8
    seed: Optional[int] = None
    use_colour: Optional[bool] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.board_size != BOARD_SIZE:
            raise ConfigError(f"board_size must be {BOARD_SIZE}, got {self.board_size}.")
        if self.ai_think_delay < 0:
            raise ConfigError("ai_think_delay must be non-negative.")
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        """Copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(values) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return replace(self, **values)


def config_from_dict(data: Dict[str, Any]) -> AppConfig:
    known = {f.name for f in fields(AppConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
    try:
        return AppConfig(**data)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Read an ``AppConfig`` from YAML; a missing path gives the defaults."""
    if path is None:
        return AppConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return AppConfig()
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping.")
    return config_from_dict(data)
