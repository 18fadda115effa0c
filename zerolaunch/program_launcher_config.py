"""Stored launch statistics: per-day counts, totals and the last update date."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any


def current_date() -> str:
    """Return today's date as ``YYYY-MM-DD``."""
    return date.today().isoformat()


def is_date_current(date_text: str) -> bool:
    """Return True if ``date_text`` is today's date."""
    return date_text == current_date()


def _counts(data: Mapping[str, Any]) -> dict[str, int]:
    if not isinstance(data, Mapping):
        raise TypeError(f"launch counts must be a mapping, not {type(data).__name__}")
    result = {}
    for key, value in data.items():
        count = int(value)
        if count < 0:
            raise ValueError(f"launch count for {key!r} is negative")
        result[str(key)] = count
    return result


def _days(data: Iterable[Mapping[str, Any]]) -> list[dict[str, int]]:
    if isinstance(data, (str, bytes, Mapping)):
        raise TypeError("launch info must be a sequence of mappings")
    return [_counts(day) for day in data]


@dataclass
class ProgramLauncherConfig:
    """Launch counts per day (most recent first), all-time counts and the date."""

    launch_info: list[dict[str, int]] = field(default_factory=lambda: [{}])
    history_launch_time: dict[str, int] = field(default_factory=dict)
    last_update_data: str = field(default_factory=current_date)
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: Mapping[str, Any]) -> None:
        """Apply every value present and not None in ``partial``."""
        with self._lock:
            launch_info = partial.get("launch_info")
            if launch_info is not None:
                self.launch_info = _days(launch_info)
            history = partial.get("history_launch_time")
            if history is not None:
                self.history_launch_time = _counts(history)
            last = partial.get("last_update_data")
            if last is not None:
                self.last_update_data = str(last)

    def to_partial(self) -> dict[str, Any]:
        """Return copies of all values as a partial dictionary."""
        with self._lock:
            return {
                "launch_info": [dict(day) for day in self.launch_info],
                "history_launch_time": dict(self.history_launch_time),
                "last_update_data": self.last_update_data,
            }