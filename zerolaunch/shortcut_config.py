"""Keyboard shortcut settings: the hotkey that opens the search bar and navigation keys."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any

_BOOL_KEYS = ("ctrl", "alt", "shift", "meta")


@dataclass
class Shortcut:
    """A key together with the modifier keys that must be held with it."""

    key: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    meta: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the shortcut as a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Shortcut:
        """Build a shortcut from a dictionary holding every field."""
        if not isinstance(data, Mapping):
            raise TypeError(f"shortcut must be a mapping, not {type(data).__name__}")
        missing = [name for name in ("key", *_BOOL_KEYS) if name not in data]
        if missing:
            raise ValueError(f"shortcut is missing fields: {', '.join(missing)}")
        key = data["key"]
        if not isinstance(key, str):
            raise ValueError(f"shortcut key must be a string, not {key!r}")
        flags = {}
        for name in _BOOL_KEYS:
            value = data[name]
            if not isinstance(value, bool):
                raise ValueError(f"shortcut field {name} must be a boolean, not {value!r}")
            flags[name] = value
        return cls(key=key, **flags)


def _as_shortcut(value: Shortcut | Mapping[str, Any]) -> Shortcut:
    if isinstance(value, Shortcut):
        return replace(value)
    return Shortcut.from_dict(value)


@dataclass
class ShortcutConfig:
    """The configured shortcuts, updated from partial dictionaries."""

    open_search_bar: Shortcut = field(
        default_factory=lambda: Shortcut(key="Space", alt=True)
    )
    arrow_up: Shortcut = field(default_factory=lambda: Shortcut(key="k", ctrl=True))
    arrow_down: Shortcut = field(default_factory=lambda: Shortcut(key="j", ctrl=True))
    arrow_left: Shortcut = field(default_factory=lambda: Shortcut(key="h", ctrl=True))
    arrow_right: Shortcut = field(default_factory=lambda: Shortcut(key="l", ctrl=True))
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @classmethod
    def _setting_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.init]

    def update(self, partial: Mapping[str, Any]) -> None:
        """Replace every shortcut present and not None in ``partial``."""
        with self._lock:
            for name in self._setting_names():
                value = partial.get(name)
                if value is not None:
                    setattr(self, name, _as_shortcut(value))

    def to_partial(self) -> dict[str, dict[str, Any]]:
        """Return all shortcuts as a partial dictionary of plain dictionaries."""
        with self._lock:
            return {name: getattr(self, name).to_dict() for name in self._setting_names()}