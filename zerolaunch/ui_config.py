"""Appearance settings of the search window: colours, fonts and sizes."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

_FLOAT_FIELDS = frozenset(
    {
        "item_font_size",
        "search_bar_font_size",
        "vertical_position_ratio",
        "background_opacity",
        "footer_font_size",
    }
)
_INT_FIELDS = frozenset(
    {
        "search_bar_height",
        "result_item_height",
        "footer_height",
        "window_width",
        "window_corner_radius",
    }
)


@dataclass
class UiConfig:
    """Look of the launcher window, updated from partial dictionaries."""

    selected_item_color: str = "#e3e3e3cc"
    item_font_color: str = "#000000"
    search_bar_font_color: str = "#333333"
    search_bar_background_color: str = "#FFFFFF00"
    item_font_size: float = 33.0
    search_bar_font_size: float = 50.0
    vertical_position_ratio: float = 0.4
    search_bar_height: int = 65
    result_item_height: int = 62
    footer_height: int = 42
    window_width: int = 1000
    background_size: str = "cover"
    background_position: str = "center"
    background_repeat: str = "no-repeat"
    background_opacity: float = 1.0
    blur_style: str = "None"
    search_bar_placeholder_font_color: str = "#757575"
    window_corner_radius: int = 16
    use_windows_sys_control_radius: bool = False
    footer_font_size: float = 33.0
    footer_font_color: str = "#666666"
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
                if name in _FLOAT_FIELDS:
                    value = float(value)
                elif name in _INT_FIELDS:
                    value = int(value)
                setattr(self, name, value)

    def to_partial(self) -> dict[str, Any]:
        """Return all settings as a partial dictionary."""
        with self._lock:
            return {name: getattr(self, name) for name in self._setting_names()}