"""Settings of the icon loader: local caching and online lookups."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ImageLoaderConfig:
    """Whether icons are cached on disk and whether the network may be used."""

    enable_icon_cache: bool = True
    enable_online: bool = True
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: Mapping[str, Any]) -> None:
        """Apply every setting present and not None in ``partial``."""
        with self._lock:
            cache = partial.get("enable_icon_cache")
            if cache is not None:
                self.enable_icon_cache = bool(cache)
            online = partial.get("enable_online")
            if online is not None:
                self.enable_online = bool(online)

    def to_partial(self) -> dict[str, bool]:
        """Return all settings as a partial dictionary."""
        with self._lock:
            return {
                "enable_icon_cache": self.enable_icon_cache,
                "enable_online": self.enable_online,
            }