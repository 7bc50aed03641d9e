"""
SLA Configuration Providers
============================

Loads the tier table and working calendar from a YAML file.

The file is read once; the resulting tier table and calendar are
immutable for the lifetime of the process.
"""

import threading
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from sla_service.core import ConfigurationException
from sla_service.shared.infrastructure.logging import get_logger
from sla_service.sla.application.services import ISLAConfigProvider
from sla_service.sla.domain import SLAConfig, SLATierTable, WorkingCalendar

logger = get_logger(__name__)


class YAMLConfigProvider(ISLAConfigProvider):
    """
    SLA configuration provider that loads from YAML.

    A missing file falls back to the built-in defaults (tiers A/B/C,
    09:00-18:00 with a 12:00-13:00 break). An unreadable or invalid file
    raises ConfigurationException.
    """

    def __init__(self, config_path: Union[str, Path]):
        self._path = Path(config_path)
        self._config: Optional[SLAConfig] = None
        self._tier_table: Optional[SLATierTable] = None
        self._calendar: Optional[WorkingCalendar] = None
        self._lock = threading.Lock()

    def load(self) -> SLAConfig:
        """Load the configuration (only the first call reads the file)."""
        with self._lock:
            if self._config is None:
                config = self._load_from_file(self._path)
                self._tier_table = config.to_tier_table()
                self._calendar = config.to_calendar()
                self._config = config
            return self._config

    def _load_from_file(self, path: Path) -> SLAConfig:
        """Load and parse YAML config file."""
        if not path.exists():
            logger.warning(f"SLA config file not found: {path}, using defaults")
            return SLAConfig()

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationException(
                f"Failed to read SLA config: {e}", path=str(path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationException(
                "SLA config must be a mapping", path=str(path)
            )

        try:
            config = SLAConfig(**data)
        except ValidationError as e:
            raise ConfigurationException(
                "Invalid SLA config",
                path=str(path),
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e

        logger.info(
            "SLA configuration loaded",
            extra={"path": str(path), "tiers": sorted(config.sla_tiers)}
        )
        return config

    def get_tier_table(self) -> SLATierTable:
        self.load()
        return self._tier_table

    def get_calendar(self) -> WorkingCalendar:
        self.load()
        return self._calendar
