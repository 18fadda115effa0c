import json

import pytest

from zerolaunch.shortcut_config import Shortcut, ShortcutConfig


def test_default_open_search_bar_is_alt_space():
    config = ShortcutConfig()
    assert config.open_search_bar == Shortcut(key="Space", alt=True)


@pytest.mark.parametrize(
    "name, key",
    [("arrow_up", "k"), ("arrow_down", "j"), ("arrow_left", "h"), ("arrow_right", "l")],
)
def test_default_arrows_use_ctrl(name, key):
    shortcut = getattr(ShortcutConfig(), name)
    assert shortcut.key == key
    assert shortcut.ctrl is True
    assert (shortcut.alt, shortcut.shift, shortcut.meta) == (False, False, False)


def test_shortcut_dict_round_trip():
    shortcut = Shortcut(key="Tab", ctrl=True, shift=True)
    assert Shortcut.from_dict(shortcut.to_dict()) == shortcut


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        Shortcut.from_dict({"key": "a", "ctrl": True})


def test_from_dict_rejects_non_bool_modifier():
    with pytest.raises(ValueError):
        Shortcut.from_dict({"key": "a", "ctrl": 1, "alt": False, "shift": False, "meta": False})


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        Shortcut.from_dict(["a"])


def test_update_only_given_fields():
    config = ShortcutConfig()
    config.update({"arrow_up": {"key": "w", "ctrl": False, "alt": True, "shift": False, "meta": False},
                   "arrow_down": None})
    assert config.arrow_up == Shortcut(key="w", alt=True)
    assert config.arrow_down == ShortcutConfig().arrow_down


def test_update_with_shortcut_object_is_copied():
    config = ShortcutConfig()
    shortcut = Shortcut(key="q", meta=True)
    config.update({"open_search_bar": shortcut})
    shortcut.key = "z"
    assert config.open_search_bar.key == "q"


def test_partial_json_round_trip():
    config = ShortcutConfig()
    config.update({"arrow_left": Shortcut(key="CapsLock", shift=True)})
    restored = ShortcutConfig()
    restored.update(json.loads(json.dumps(config.to_partial())))
    assert restored == config


def test_to_partial_holds_every_shortcut():
    partial = ShortcutConfig().to_partial()
    assert set(partial) == {"open_search_bar", "arrow_up", "arrow_down", "arrow_left", "arrow_right"}
    assert partial["open_search_bar"]["key"] == "Space"