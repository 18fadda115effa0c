"""Settings that decide which programs, web pages and commands are indexed."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

_START_MENU_SUFFIX = os.path.join("Microsoft", "Windows", "Start Menu", "Programs")
_DIRECTORY_FIELDS = ("root_path", "max_depth", "pattern", "pattern_type", "excluded_keywords")


def _string_list(value: Any, name: str) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError(f"{name} must be a list of strings")
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise ValueError(f"{name} must be a list of strings")
    return items


@dataclass
class DirectoryConfig:
    """A directory to scan, how deep, and which files in it count as programs.

    ``pattern_type`` is ``"Wildcard"`` or ``"Regex"``.
    """

    root_path: str
    max_depth: int
    pattern: list[str] = field(default_factory=list)
    pattern_type: str = "Wildcard"
    excluded_keywords: list[str] = field(default_factory=list)

    @classmethod
    def with_defaults(cls, root_path: str, max_depth: int) -> DirectoryConfig:
        """Scan for shortcuts and executables, skipping help and uninstallers."""
        return cls(
            root_path=root_path,
            max_depth=max_depth,
            pattern=["*.url", "*.exe", "*.lnk"],
            pattern_type="Wildcard",
            excluded_keywords=["帮助", "help", "uninstall", "卸载", "zerolaunch-rs"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the directory settings as a plain dictionary."""
        return {
            "root_path": self.root_path,
            "max_depth": self.max_depth,
            "pattern": list(self.pattern),
            "pattern_type": self.pattern_type,
            "excluded_keywords": list(self.excluded_keywords),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DirectoryConfig:
        """Build directory settings from a dictionary holding every field."""
        if not isinstance(data, Mapping):
            raise TypeError(f"directory config must be a mapping, not {type(data).__name__}")
        missing = [name for name in _DIRECTORY_FIELDS if name not in data]
        if missing:
            raise ValueError(f"directory config is missing fields: {', '.join(missing)}")
        root_path, pattern_type = data["root_path"], data["pattern_type"]
        if not isinstance(root_path, str) or not isinstance(pattern_type, str):
            raise ValueError("root_path and pattern_type must be strings")
        max_depth = data["max_depth"]
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, not {max_depth!r}")
        return cls(
            root_path=root_path,
            max_depth=max_depth,
            pattern=_string_list(data["pattern"], "pattern"),
            pattern_type=pattern_type,
            excluded_keywords=_string_list(data["excluded_keywords"], "excluded_keywords"),
        )


def _start_menu_dir(env_name: str) -> str:
    base = os.environ.get(env_name)
    return os.path.join(base, _START_MENU_SUFFIX) if base else ""


def _default_target_paths() -> list[DirectoryConfig]:
    return [
        DirectoryConfig.with_defaults(_start_menu_dir("ProgramData"), 5),
        DirectoryConfig.with_defaults(_start_menu_dir("APPDATA"), 5),
    ]


def _as_directory(value: DirectoryConfig | Mapping[str, Any]) -> DirectoryConfig:
    if isinstance(value, DirectoryConfig):
        return DirectoryConfig.from_dict(value.to_dict())
    return DirectoryConfig.from_dict(value)


def _pairs(value: Iterable[Any], name: str) -> list[tuple[str, str]]:
    result = []
    for item in value:
        first, second = item
        if not isinstance(first, str) or not isinstance(second, str):
            raise ValueError(f"{name} entries must be pairs of strings")
        result.append((first, second))
    return result


def _bias_table(value: Mapping[str, Any]) -> dict[str, tuple[float, str]]:
    if not isinstance(value, Mapping):
        raise TypeError("program_bias must be a mapping")
    result = {}
    for key, entry in value.items():
        bias, note = entry
        result[str(key)] = (float(bias), str(note))
    return result


@dataclass
class ProgramLoaderConfig:
    """What the program loader scans and indexes."""

    target_paths: list[DirectoryConfig] = field(default_factory=_default_target_paths)
    program_bias: dict[str, tuple[float, str]] = field(default_factory=dict)
    is_scan_uwp_programs: bool = True
    index_web_pages: list[tuple[str, str]] = field(default_factory=list)
    custom_command: list[tuple[str, str]] = field(default_factory=list)
    forbidden_paths: list[str] = field(default_factory=list)
    _lock: Any = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: Mapping[str, Any]) -> None:
        """Apply every value present and not None in ``partial``."""
        with self._lock:
            target_paths = partial.get("target_paths")
            if target_paths is not None:
                self.target_paths = [_as_directory(item) for item in target_paths]
            bias = partial.get("program_bias")
            if bias is not None:
                self.program_bias = _bias_table(bias)
            scan_uwp = partial.get("is_scan_uwp_programs")
            if scan_uwp is not None:
                self.is_scan_uwp_programs = bool(scan_uwp)
            web_pages = partial.get("index_web_pages")
            if web_pages is not None:
                self.index_web_pages = _pairs(web_pages, "index_web_pages")
            commands = partial.get("custom_command")
            if commands is not None:
                self.custom_command = _pairs(commands, "custom_command")
            forbidden = partial.get("forbidden_paths")
            if forbidden is not None:
                self.forbidden_paths = _string_list(forbidden, "forbidden_paths")

    def to_partial(self) -> dict[str, Any]:
        """Return copies of all values as a partial dictionary."""
        with self._lock:
            return {
                "target_paths": [d.to_dict() for d in self.target_paths],
                "program_bias": dict(self.program_bias),
                "is_scan_uwp_programs": self.is_scan_uwp_programs,
                "index_web_pages": list(self.index_web_pages),
                "custom_command": list(self.custom_command),
                "forbidden_paths": list(self.forbidden_paths),
            }