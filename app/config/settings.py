import logging
import os
from typing import Any, Dict, Optional, Tuple

from dotenv import dotenv_values

from config.constants import (
    IDENTICON_BACKGROUND,
    IDENTICON_DEFAULT_FORMAT,
    IDENTICON_SQUARE_SIZE,
    LOG_CONFIG,
)
from config.settings_descriptors import YamlSettingsDescriptor

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


class Settings:
    """
    Глобальные настройки приложения

    Параметры запуска берутся из переменных окружения (с запасными значениями
    из /defaults.env), параметры рендеринга - из settings.yml в internal_data_path.

    :param -
    :return: None (Singleton)
    """

    _instance: Optional["Settings"] = None
    _initialized: bool = False
    _loaded_defaults = dotenv_values("/defaults.env") or {}

    DEFAULT_SETTINGS = {
        "app_host": "0.0.0.0",
        "app_port": "8080",
        "app_workers": "1",
        "app_reload": "false",
        "internal_data_path": "./data",
        "output_dir": ".",
        **{k.lower(): v for k, v in _loaded_defaults.items()},
        "rendering_options": {
            "square_size": IDENTICON_SQUARE_SIZE,
            "background": list(IDENTICON_BACKGROUND),
            "image_format": IDENTICON_DEFAULT_FORMAT,
        },
    }

    def __new__(cls) -> "Settings":
        """
        Создает или возвращает существующий экземпляр класса (Singleton).
        """
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
        return cls._instance

    rendering_options = YamlSettingsDescriptor(
        "rendering_options", DEFAULT_SETTINGS["rendering_options"]
    )

    def __init__(self) -> None:
        """
        Инициализирует настройки приложения, загружая их из переменных окружения.
        """
        if Settings._initialized:
            return

        Settings._initialized = True
        self.reload()

    def reload(self) -> None:
        """
        Перечитывает переменные окружения и сбрасывает кеш settings.yml.
        """
        self.yaml_cache: Tuple[Optional[float], Optional[Dict[str, Any]]] = (None, None)
        self._app_host: str = os.getenv("APP_HOST", self.DEFAULT_SETTINGS["app_host"])
        self._app_port: str = os.getenv("APP_PORT", self.DEFAULT_SETTINGS["app_port"])
        self._app_workers: str = os.getenv(
            "APP_WORKERS", self.DEFAULT_SETTINGS["app_workers"]
        )
        self._app_reload: str = os.getenv(
            "APP_RELOAD", self.DEFAULT_SETTINGS["app_reload"]
        )
        self._internal_data_path: str = os.getenv(
            "INTERNAL_DATA_PATH", self.DEFAULT_SETTINGS["internal_data_path"]
        )
        self._output_dir: str = os.getenv(
            "OUTPUT_DIR", self.DEFAULT_SETTINGS["output_dir"]
        )

    @property
    def app_host(self) -> str:
        """
        Хост для запуска приложения

        :return: Строка с хостом
        """
        return self._app_host

    @property
    def app_port(self) -> int:
        """
        Порт для запуска приложения

        :return: Целое число - порт
        """
        try:
            return int(self._app_port)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid APP_PORT value: '{self._app_port}'. Using default: {self.DEFAULT_SETTINGS['app_port']}"
            )
            return int(self.DEFAULT_SETTINGS["app_port"])

    @property
    def app_workers(self) -> int:
        """
        Количество воркеров для запуска приложения

        :return: Целое число - количество воркеров
        """
        try:
            return int(self._app_workers)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid APP_WORKERS value: '{self._app_workers}'. Using default: {self.DEFAULT_SETTINGS['app_workers']}"
            )
            return int(self.DEFAULT_SETTINGS["app_workers"])

    @property
    def app_reload(self) -> bool:
        """
        Флаг перезагрузки приложения при изменении кода

        :return: Булево значение
        """
        if isinstance(self._app_reload, bool):
            return self._app_reload

        return str(self._app_reload).lower() in ("true", "t", "yes", "y", "1")

    @property
    def internal_data_path(self) -> str:
        """
        Путь к внутренним данным приложения (там лежит settings.yml)

        :return: Строка с путем
        """
        return self._internal_data_path

    @property
    def output_dir(self) -> str:
        """
        Каталог, в который CLI сохраняет изображения по умолчанию

        :return: Строка с путем
        """
        return self._output_dir

    @property
    def square_size(self) -> Any:
        """
        Сторона клетки identicon в пикселях. Проверка значения выполняется
        при генерации, здесь возвращается значение как есть.

        :return: Значение из settings.yml или значение по умолчанию
        """
        return self.rendering_options.get("square_size", IDENTICON_SQUARE_SIZE)

    @property
    def background(self) -> Any:
        """
        Цвет фона холста. Как и square_size, проверяется при отрисовке.

        :return: Кортеж (R, G, B) или значение из settings.yml как есть
        """
        value = self.rendering_options.get("background", IDENTICON_BACKGROUND)
        return tuple(value) if isinstance(value, (list, tuple)) else value

    @property
    def image_format(self) -> str:
        """
        Формат сохраняемых изображений ('png' или 'jpeg')

        :return: Строка с форматом
        """
        return str(
            self.rendering_options.get("image_format", IDENTICON_DEFAULT_FORMAT)
        ).lower()


settings = Settings()
