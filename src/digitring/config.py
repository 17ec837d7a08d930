"""Configuration loaded from a YAML file.

Example ``digitring.yaml``::

    base: 3
    scale_base: 8
    log_level: DEBUG
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from digitring.ring import DEFAULT_BASE, SCALE_BASE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingConfig:
    """Settings shared by the command-line tools.

    Attributes:
        base: Radix rings are stored in.
        scale_base: Radix used by `change_scale`.
        log_level: Name of the logging level for the console handler.
    """

    base: int = DEFAULT_BASE
    scale_base: int = SCALE_BASE
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("base", "scale_base"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                msg = f"{name} must be an integer >= 2, got {value!r}"
                raise ValueError(msg)
        if not isinstance(logging.getLevelName(self.log_level), int):
            msg = f"Unknown log level {self.log_level!r}"
            raise ValueError(msg)


DEFAULT_CONFIG = RingConfig()


def load_config(config_path: Path | str) -> RingConfig:
    """Load configuration from YAML.

    Missing keys fall back to their defaults; an empty file yields
    `DEFAULT_CONFIG`.

    Args:
        config_path: Path to the YAML file.

    Returns:
        RingConfig with the file's settings.

    Raises:
        ValueError: If the file is not valid YAML or holds invalid settings.
    """
    with Path(config_path).open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {config_path}: {e}"
            raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Expected a mapping in {config_path}, got {type(data).__name__}"
        raise ValueError(msg)

    config = RingConfig(
        base=data.get("base", DEFAULT_BASE),
        scale_base=data.get("scale_base", SCALE_BASE),
        log_level=str(data.get("log_level", "INFO")).upper(),
    )
    logger.debug("Loaded %s from %s", config, config_path)
    return config
