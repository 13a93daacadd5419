import pytest

from xplr.keys import KeyBinding, KeyConfig, default_key_map, key_config_from_toml, new_key_map


def test_default_bindings_match_their_keys():
    keys = default_key_map()
    assert keys.down.matches("j")
    assert keys.down.matches("down")
    assert keys.up.matches("k")
    assert keys.collapse.matches("enter")
    assert keys.quit.matches("esc")
    assert not keys.up.matches("j")


def test_default_help_text():
    keys = default_key_map()
    assert keys.collapse.help_key == "tab/enter"
    assert keys.collapse.help_desc == "collapse/expand"
    assert keys.quit.help_desc == "return"


def test_disabled_binding_does_not_match():
    binding = KeyBinding(("x",), enabled=False)
    assert binding.matches("x") is False


def test_empty_config_keeps_defaults():
    assert new_key_map(KeyConfig()) == default_key_map()


def test_config_overrides_keys():
    keys = new_key_map(KeyConfig(quit_keys=["x"], help_keys=["h"]))
    assert keys.quit.keys == ("x",)
    assert keys.help.keys == ("h",)
    assert keys.quit.help_desc == default_key_map().quit.help_desc


def test_up_keys_override_down_binding():
    keys = new_key_map(KeyConfig(up_keys=["w"]))
    assert keys.down.keys == ("w",)
    assert keys.up == default_key_map().up


def test_key_config_from_toml():
    config = key_config_from_toml(b'DownKeys = ["s"]\nQuitKeys = ["x", "ctrl+c"]\nOther = 3')
    assert config.down_keys == ["s"]
    assert config.quit_keys == ["x", "ctrl+c"]
    assert config.top_keys == []


def test_key_config_from_toml_rejects_wrong_type():
    with pytest.raises(ValueError):
        key_config_from_toml('TopKeys = "g"')


def test_key_config_from_toml_rejects_invalid():
    with pytest.raises(ValueError):
        key_config_from_toml("TopKeys = [")