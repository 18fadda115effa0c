from zerolaunch.image_loader_config import ImageLoaderConfig


def test_defaults_enable_everything():
    assert ImageLoaderConfig().to_partial() == {"enable_icon_cache": True, "enable_online": True}


def test_update_single_field():
    config = ImageLoaderConfig()
    config.update({"enable_online": False})
    assert config.enable_online is False
    assert config.enable_icon_cache is True


def test_update_ignores_none():
    config = ImageLoaderConfig()
    config.update({"enable_icon_cache": None, "enable_online": None})
    assert config == ImageLoaderConfig()


def test_partial_round_trip():
    config = ImageLoaderConfig(enable_icon_cache=False, enable_online=False)
    restored = ImageLoaderConfig()
    restored.update(config.to_partial())
    assert restored == config