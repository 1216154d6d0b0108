import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quota_admin.constants.labels import (
    UNKNOWN_LABEL,
    USER_PREFIX,
    USER_SUFFIX,
    VERSION_PREFIX,
)
from quota_admin.services.formatted_date import MalformedTimestamp, format_date, normalize_timestamp


class ConfigVersionRecord(BaseModel):
    """One version of the quota service configuration, as listed by the admin API."""

    version: Optional[int] = Field(default=None, ge=0)
    user: Optional[str] = None
    date: Optional[int] = None  # epoch seconds
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("date", mode="before")
    @classmethod
    def malformed_date_is_absent(cls, value: Any) -> Optional[int]:
        try:
            return normalize_timestamp(value)
        except MalformedTimestamp as e:
            logging.warning(f"Treating config date {value!r} as absent: {str(e)}")
            return None

    @property
    def key(self) -> int:
        """Uniqueness key for lists and selection, a missing version counts as 0"""
        return self.version if self.version is not None else 0


class ConfigRecordLabels(BaseModel):
    """Display strings of a config row, with fallbacks already applied."""

    version: str
    user: str
    date: str
    model_config = ConfigDict(frozen=True)


def resolve_labels(record: ConfigVersionRecord) -> ConfigRecordLabels:
    version = record.version if record.version is not None else 0

    user = record.user
    if user is None or user == '':
        user = UNKNOWN_LABEL

    date = format_date(record.date)
    if date == '':
        date = UNKNOWN_LABEL

    return ConfigRecordLabels(
        version=f"{VERSION_PREFIX}{version}",
        user=f"{USER_PREFIX}{user}{USER_SUFFIX}",
        date=date,
    )
