"""Runtime facts about the screen the launcher window is shown on."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class WindowState:
    """Screen scale factor and size, updated from partial dictionaries."""

    sys_window_scale_factor: float = 1.0
    sys_window_width: int = 0
    sys_window_height: int = 0
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: Mapping[str, Any]) -> None:
        """Apply every value present and not None in ``partial``."""
        with self._lock:
            scale = partial.get("sys_window_scale_factor")
            if scale is not None:
                self.sys_window_scale_factor = float(scale)
            height = partial.get("sys_window_height")
            if height is not None:
                self.sys_window_height = int(height)
            width = partial.get("sys_window_width")
            if width is not None:
                self.sys_window_width = int(width)