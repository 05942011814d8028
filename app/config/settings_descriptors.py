import logging
import os
from copy import deepcopy
from typing import Any, Dict

import yaml
from filelock import FileLock

from config.constants import CONFIG_FILE, LOG_CONFIG
from utils.dict_utils import merge_with_overrides

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


class YamlSettingsDescriptor:
    """
    Дескриптор для чтения и записи настроек из settings.yml.
    Прочитанный файл кешируется в экземпляре Settings до изменения его mtime.

    :param setting_key: путь до ключа (через точку)
    :param default_value: значение по умолчанию
    """

    def __init__(self, setting_key: str, default_value: Any):
        self._key = setting_key
        self._default = default_value

    @staticmethod
    def _merge_with_defaults(
            instance: Any, file_data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Сливает данные из файла с дефолтными настройками.

        :param instance: Экземпляр класса Settings для доступа к DEFAULT_SETTINGS.
        :param file_data: Данные, прочитанные из settings.yml.
        :return: Полный словарь настроек со всеми значениями.
        """
        all_settings_with_defaults = {}
        for key, default in instance.DEFAULT_SETTINGS.items():
            if isinstance(default, dict):
                overrides = file_data.get(key)
                all_settings_with_defaults[key] = merge_with_overrides(
                    default, overrides if isinstance(overrides, dict) else {}
                )
            else:
                all_settings_with_defaults[key] = file_data.get(key, default)
        return all_settings_with_defaults

    def _lookup(self, data: Dict[str, Any]) -> Any:
        current = data
        for k in self._key.split("."):
            if not isinstance(current, dict) or k not in current:
                return deepcopy(self._default)
            current = current[k]
        return current

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        path = os.path.join(instance.internal_data_path, CONFIG_FILE)
        try:
            file_mtime = os.path.getmtime(path)
        except FileNotFoundError:
            logger.debug(f"Settings file not found at {path}, using defaults.")
            return self._lookup(self._merge_with_defaults(instance, {}))
        except OSError as e:
            logger.warning(
                f"Cannot access settings file at {path}: {type(e).__name__}: {str(e)}"
            )
            return deepcopy(self._default)

        cached_mtime, cached_data = instance.yaml_cache
        if cached_mtime != file_mtime or cached_data is None:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    file_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.error(
                    f"Failed to parse {CONFIG_FILE}: {type(e).__name__}: {str(e)}"
                )
                return deepcopy(self._default)

            if not isinstance(file_data, dict):
                logger.error(
                    f"{CONFIG_FILE} must contain a mapping, got {type(file_data).__name__}; using defaults."
                )
                file_data = {}

            cached_data = self._merge_with_defaults(instance, file_data)
            instance.yaml_cache = (file_mtime, cached_data)

        return self._lookup(cached_data)

    def __set__(self, instance, value: Any) -> None:
        """
        Устанавливает значение в YAML файл и сбрасывает кеш.

        :param instance: экземпляр класса Settings
        :param value: новое значение для установки
        :return: None
        """
        if instance is None:
            return

        path = os.path.join(instance.internal_data_path, CONFIG_FILE)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        file_lock = FileLock(f"{path}.lock", timeout=2)

        try:
            with file_lock:
                try:
                    with open(path, "r", encoding="utf-8") as f:
                        data = yaml.safe_load(f) or {}
                except FileNotFoundError:
                    logger.info(f"Creating new settings file at {path}")
                    data = {}
                if not isinstance(data, dict):
                    logger.warning(f"Replacing non-mapping content of {CONFIG_FILE}")
                    data = {}

                current = data
                keys = self._key.split(".")
                for k in keys[:-1]:
                    current = current.setdefault(k, {})
                current[keys[-1]] = value

                with open(path, "w", encoding="utf-8") as f:
                    yaml.dump(
                        data,
                        f,
                        default_flow_style=False,
                        allow_unicode=True,
                        sort_keys=False,
                    )
                instance.yaml_cache = (None, None)

        except Exception as e:
            logger.error(
                f"Failed to write {CONFIG_FILE}: {type(e).__name__}: {str(e)}"
            )
            raise
