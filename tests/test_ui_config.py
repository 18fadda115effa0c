import pytest

from zerolaunch.ui_config import UiConfig


def test_defaults_match_source():
    config = UiConfig()
    assert config.selected_item_color == "#e3e3e3cc"
    assert config.search_bar_background_color == "#FFFFFF00"
    assert config.window_width == 1000
    assert config.vertical_position_ratio == pytest.approx(0.4)
    assert config.blur_style == "None"
    assert config.use_windows_sys_control_radius is False


def test_update_applies_present_values():
    config = UiConfig()
    config.update({"item_font_color": "#123456", "footer_height": 0})
    assert config.item_font_color == "#123456"
    assert config.footer_height == 0
    assert config.search_bar_font_color == "#333333"


def test_update_ignores_none_and_unknown_keys():
    config = UiConfig()
    config.update({"window_width": None, "no_such_setting": "x"})
    assert config.window_width == 1000
    assert not hasattr(config, "no_such_setting")


def test_update_coerces_numeric_fields():
    config = UiConfig()
    config.update({"item_font_size": 20, "window_width": 800.0})
    assert isinstance(config.item_font_size, float)
    assert config.item_font_size == 20.0
    assert isinstance(config.window_width, int)
    assert config.window_width == 800


def test_to_partial_has_every_setting():
    partial = UiConfig().to_partial()
    assert "use_windows_sys_control_radius" in partial
    assert "_lock" not in partial
    assert partial["footer_font_color"] == "#666666"
    assert len(partial) == 21


def test_round_trip_through_partial():
    source = UiConfig()
    source.update({"blur_style": "Acrylic", "background_opacity": 0.5})
    copy = UiConfig()
    copy.update(source.to_partial())
    assert copy == source
    assert copy.to_partial() == source.to_partial()