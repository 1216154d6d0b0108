import json
import logging
from functools import partial
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from fastapi import Request
from pydantic import ValidationError

from quota_admin.components.config_record import ConfigRecordView
from quota_admin.schemas.config_version import ConfigVersionRecord


class ConfigHistory:
    """
    Owns the list of config versions shown in the panel and the selected one.

    Records are keyed by version and kept newest first. Rows are built fresh
    on every call to views(), so nothing rendered outlives the list it came from.
    """

    def __init__(self, records: Iterable[ConfigVersionRecord] = (), limit: Optional[int] = None):
        if limit is not None and limit < 0:
            raise ValueError(f"History limit must not be negative, got {limit}")
        self.limit = limit
        self._records: Tuple[ConfigVersionRecord, ...] = ()
        self._selected_version: Optional[int] = None
        self.replace(records)

    @classmethod
    def from_payload(cls, payload: Union[dict, list], limit: Optional[int] = None) -> "ConfigHistory":
        """Build a history from the admin API payload, `{"configs": [...]}` or a bare list"""
        if isinstance(payload, dict):
            entries = payload.get("configs") or []
        else:
            entries = payload
        if not isinstance(entries, list):
            raise ValueError(f"Expected a list of configs, got {type(entries).__name__}")

        records = []
        for index, entry in enumerate(entries):
            try:
                records.append(ConfigVersionRecord.model_validate(entry))
            except ValidationError as e:
                # One bad row from the backend must not hide the others
                logging.warning(f"Skipping invalid config at index {index}: {str(e)}")
        return cls(records, limit=limit)

    @property
    def records(self) -> Tuple[ConfigVersionRecord, ...]:
        return self._records

    @property
    def selected_version(self) -> Optional[int]:
        return self._selected_version

    @property
    def selected(self) -> Optional[ConfigVersionRecord]:
        if self._selected_version is None:
            return None
        return self.get(self._selected_version)

    def replace(self, records: Iterable[ConfigVersionRecord]) -> None:
        """Swap in a new list of records, e.g. after a refresh"""
        by_version = {}
        for record in records:
            # A later record with the same version wins
            by_version[record.key] = record

        ordered = sorted(by_version.values(), key=lambda r: r.key, reverse=True)
        if self.limit is not None:
            ordered = ordered[:self.limit]
        self._records = tuple(ordered)

        if self._selected_version is not None and self._selected_version not in self._versions():
            logging.info(f"Selected config version {self._selected_version} is gone, clearing selection")
            self._selected_version = None

    def get(self, version: int) -> ConfigVersionRecord:
        for record in self._records:
            if record.key == version:
                return record
        raise KeyError(version)

    def select(self, version: int) -> ConfigVersionRecord:
        record = self.get(version)
        self._selected_version = version
        logging.info(f"Selected config version {version}")
        return record

    def views(self) -> List[ConfigRecordView]:
        return [
            ConfigRecordView(
                record,
                partial(self.select, record.key),
                selected=record.key == self._selected_version,
            )
            for record in self._records
        ]

    def view(self, version: int) -> ConfigRecordView:
        for row in self.views():
            if row.key == version:
                return row
        raise KeyError(version)

    def click(self, version: int) -> None:
        """Dispatch a click on the row of the given version"""
        self.view(version).click()

    def _versions(self) -> set:
        return {record.key for record in self._records}

    def __len__(self) -> int:
        return len(self._records)


def load_history_from_file(path: Union[str, Path], limit: Optional[int] = None) -> ConfigHistory:
    """Load a JSON snapshot of the admin API `/api/configs` response."""
    with open(path, 'r', encoding='utf-8') as f:
        payload: Any = json.load(f)

    history = ConfigHistory.from_payload(payload, limit=limit)
    logging.info(f"Loaded {len(history)} config versions from {path}")
    return history


def get_history(request: Request) -> ConfigHistory:
    """Dependency returning the history owned by the running app"""
    return request.app.state.config_history
