"""Config settings – Settings base class and FeatureFlagSettings."""
from __future__ import annotations

import dataclasses
import logging
import re

from mp_featuring.config.validation import InvalidSettingValueError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FeatureFlagSettings(Settings):
    """Settings for persisting feature flags, read from ``FEATURE_FLAGS_*``."""

    _prefix: dataclasses.ClassVar[str] = "FEATURE_FLAGS"

    database_url: str | None = None
    table_name: str = "feature_flags"
    id_attribute: str = "id"
    echo_sql: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not _IDENTIFIER.match(self.table_name):
            raise InvalidSettingValueError("table_name", self.table_name, "must be a SQL identifier")
        if not self.id_attribute.isidentifier():
            raise InvalidSettingValueError("id_attribute", self.id_attribute, "must be a Python identifier")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["FeatureFlagSettings", "Settings"]
