"""Computation of the launcher window's size and on-screen position."""

from __future__ import annotations

import math

from .app_config import AppConfig
from .ui_config import UiConfig
from .window_state import WindowState


def _to_size(value: float) -> int:
    """Truncate a float to a non-negative integer, as a saturating cast does."""
    if math.isnan(value) or value <= 0:
        return 0
    return math.trunc(value)


def window_size(
    app_config: AppConfig, ui_config: UiConfig, window_state: WindowState
) -> tuple[int, int]:
    """Return the window's (width, height) in physical pixels."""
    scale = window_state.sys_window_scale_factor
    rows = ui_config.result_item_height * app_config.search_result_count
    logical_height = rows + ui_config.search_bar_height + ui_config.footer_height
    width = ui_config.window_width * scale
    height = logical_height * scale
    return _to_size(width), _to_size(height)


def window_render_origin(
    app_config: AppConfig,
    ui_config: UiConfig,
    window_state: WindowState,
    vertical_position_ratio: float,
) -> tuple[int, int]:
    """Return the top-left corner placing the window centred horizontally.

    Vertically the free space above the window is ``vertical_position_ratio``
    of all free space. Raises ValueError if the window is larger than the
    screen.
    """
    width, height = window_size(app_config, ui_config, window_state)
    free_width = window_state.sys_window_width - width
    free_height = window_state.sys_window_height - height
    if free_width < 0 or free_height < 0:
        raise ValueError(
            f"window of {width}x{height} does not fit a screen of "
            f"{window_state.sys_window_width}x{window_state.sys_window_height}"
        )
    return free_width // 2, _to_size(free_height * vertical_position_ratio)