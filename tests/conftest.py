import pytest

from config.settings import settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Каждый тест получает свой каталог internal_data_path без settings.yml."""
    data_path = tmp_path / "data"
    monkeypatch.setenv("INTERNAL_DATA_PATH", str(data_path))
    monkeypatch.delenv("OUTPUT_DIR", raising=False)
    settings.reload()
    yield data_path
    settings.reload()


@pytest.fixture
def write_settings_file(isolated_settings):
    """Записывает settings.yml с заданным содержимым."""

    def _write(text: str):
        isolated_settings.mkdir(parents=True, exist_ok=True)
        path = isolated_settings / "settings.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
