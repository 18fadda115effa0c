"""Combined settings of the program launcher, loader and icon loader."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .image_loader_config import ImageLoaderConfig
from .program_launcher_config import ProgramLauncherConfig
from .program_loader_config import ProgramLoaderConfig


@dataclass
class ProgramManagerConfig:
    """Holds the sub-configurations used by the program manager."""

    launcher_config: ProgramLauncherConfig = field(default_factory=ProgramLauncherConfig)
    loader_config: ProgramLoaderConfig = field(default_factory=ProgramLoaderConfig)
    image_loader: ImageLoaderConfig = field(default_factory=ImageLoaderConfig)
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: Mapping[str, Any]) -> None:
        """Forward each sub-partial present and not None to its configuration."""
        with self._lock:
            launcher = partial.get("launcher")
            if launcher is not None:
                self.launcher_config.update(launcher)
            loader = partial.get("loader")
            if loader is not None:
                self.loader_config.update(loader)
            image_loader = partial.get("image_loader")
            if image_loader is not None:
                self.image_loader.update(image_loader)

    def to_partial(self) -> dict[str, dict[str, Any]]:
        """Return all sub-configurations as a nested partial dictionary."""
        with self._lock:
            return {
                "launcher": self.launcher_config.to_partial(),
                "loader": self.loader_config.to_partial(),
                "image_loader": self.image_loader.to_partial(),
            }