import pytest
import yaml

from config.constants import IDENTICON_BACKGROUND, IDENTICON_SQUARE_SIZE
from config.settings import Settings, settings
from modules.identicon.identicon_errors import ConfigurationError
from modules.identicon.identicon_service import generate_identicon
from utils.dict_utils import merge_with_overrides


def test_settings_is_singleton() -> None:
    assert Settings() is settings


def test_defaults_without_settings_file() -> None:
    assert settings.square_size == IDENTICON_SQUARE_SIZE
    assert settings.background == IDENTICON_BACKGROUND
    assert settings.image_format == "png"


def test_env_values(monkeypatch) -> None:
    monkeypatch.setenv("APP_PORT", "9000")
    monkeypatch.setenv("APP_WORKERS", "not-a-number")
    monkeypatch.setenv("APP_RELOAD", "yes")
    monkeypatch.setenv("OUTPUT_DIR", "/tmp/identicons")
    settings.reload()
    assert settings.app_port == 9000
    assert settings.app_workers == int(Settings.DEFAULT_SETTINGS["app_workers"])
    assert settings.app_reload is True
    assert settings.output_dir == "/tmp/identicons"


def test_rendering_options_from_file(write_settings_file) -> None:
    write_settings_file("rendering_options:\n  square_size: 10\n  image_format: JPEG\n")
    assert settings.square_size == 10
    assert settings.image_format == "jpeg"
    # Незаданные ключи берутся из значений по умолчанию
    assert settings.background == IDENTICON_BACKGROUND
    assert generate_identicon("asdf").size == (50, 50)


def test_background_from_file(write_settings_file) -> None:
    write_settings_file("rendering_options:\n  background: [0, 0, 0]\n")
    assert generate_identicon("asdf").getpixel((0, 0)) == (0, 0, 0)


@pytest.mark.parametrize("square_size", ["0", "-1", "big"])
def test_invalid_square_size_in_file(write_settings_file, square_size) -> None:
    write_settings_file(f"rendering_options:\n  square_size: {square_size}\n")
    with pytest.raises(ConfigurationError):
        generate_identicon("asdf")


def test_broken_yaml_falls_back_to_defaults(write_settings_file) -> None:
    write_settings_file("rendering_options: [unclosed\n")
    assert settings.square_size == IDENTICON_SQUARE_SIZE


@pytest.mark.parametrize("text", ["- 1\n- 2\n", "just a string\n", "5\n"])
def test_non_mapping_yaml_falls_back_to_defaults(write_settings_file, text) -> None:
    write_settings_file(text)
    assert settings.square_size == IDENTICON_SQUARE_SIZE
    assert settings.image_format == "png"
    assert generate_identicon("asdf").size == (250, 250)


def test_descriptor_write_creates_file(isolated_settings) -> None:
    settings.rendering_options = {"square_size": 8}
    path = isolated_settings / "settings.yml"
    assert path.is_file()
    with open(path, encoding="utf-8") as f:
        assert yaml.safe_load(f) == {"rendering_options": {"square_size": 8}}
    assert settings.square_size == 8
    assert settings.image_format == "png"


def test_descriptor_write_replaces_non_mapping_file(write_settings_file) -> None:
    write_settings_file("just a string\n")
    settings.rendering_options = {"square_size": 12}
    assert settings.square_size == 12


def test_merge_with_overrides_keeps_inputs_intact() -> None:
    defaults = {"a": 1, "nested": {"b": 2, "c": 3}}
    overrides = {"nested": {"c": 30}, "d": 4}
    merged = merge_with_overrides(defaults, overrides)
    assert merged == {"a": 1, "nested": {"b": 2, "c": 30}, "d": 4}
    assert defaults == {"a": 1, "nested": {"b": 2, "c": 3}}
    assert overrides == {"nested": {"c": 30}, "d": 4}
