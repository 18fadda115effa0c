"""General application settings such as auto start and result count."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

APP_VERSION = "0.1.0"
DEFAULT_SEARCH_BAR_PLACEHOLDER = "Hello, ZeroLaunch!"


def _default_tips() -> str:
    return f"ZeroLaunch-rs v{APP_VERSION}"


@dataclass
class AppConfig:
    """Application settings, updated from partial dictionaries."""

    search_bar_placeholder: str = DEFAULT_SEARCH_BAR_PLACEHOLDER
    tips: str = field(default_factory=_default_tips)
    is_auto_start: bool = False
    is_silent_start: bool = False
    search_result_count: int = 4
    auto_refresh_time: int = 30
    launch_new_on_failure: bool = True
    is_debug_mode: bool = False
    is_esc_hide_window_priority: bool = False
    is_enable_drag_window: bool = False
    window_position: tuple[int, int] = (0, 0)
    is_wake_on_fullscreen: bool = False
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @classmethod
    def _setting_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.init]

    def update(self, partial: Mapping[str, Any]) -> None:
        """Apply every setting present and not None in ``partial``."""
        with self._lock:
            for name in self._setting_names():
                value = partial.get(name)
                if value is None:
                    continue
                if name == "window_position":
                    x, y = value
                    value = (int(x), int(y))
                setattr(self, name, value)

    def to_partial(self) -> dict[str, Any]:
        """Return all settings as a partial dictionary."""
        with self._lock:
            return {name: getattr(self, name) for name in self._setting_names()}