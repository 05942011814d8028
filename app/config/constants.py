# Имя сервиса
SERVICE_NAME = "identicon"

# Настройки логирования
LOG_CONFIG = {
    "level": "DEBUG",
    "main_logger_name": "identicon",
    "in_console_enabled": True,
    "in_console_format": "[ %(asctime)s.%(msecs)03d %(module)-20s - %(funcName)25s() ][%(process)2d][%(session_id)4s][%(levelname)s] %(message)s",
    "in_console_format_datetime": "%d.%m.%Y %H:%M:%S",
    "in_file_enabled": False,
    "in_file_format": "[%(asctime)s.%(msecs)03d %(module)-20s - %(funcName)25s() ][%(session_id)4s][%(levelname)s] %(message)s",
    "in_file_format_datetime": "%d.%m.%Y %H:%M:%S",
    "max_size_file_bytes": 1 * 1024 * 1024,
    "backup_file_count": 1,
}

# Уровни логирования с сокращениями
LEVEL_TO_SHORT = {
    10: "DBG",  # logging.DEBUG
    20: "INF",  # logging.INFO
    30: "WRN",  # logging.WARNING
    40: "ERR",  # logging.ERROR
    50: "FTL",  # logging.FATAL
}

# Путь к файлу конфигурации (относительно internal_data_path)
CONFIG_FILE = "settings.yml"

# Геометрия identicon
IDENTICON_GRID_WIDTH = 5  # Количество клеток в строке и столбце
IDENTICON_ROW_CHUNK = 3  # Количество байт хеша на одну строку (до отражения)
IDENTICON_SQUARE_SIZE = 50  # Сторона клетки в пикселях

# Цвета и форматы
IDENTICON_BACKGROUND = (255, 255, 255)
IDENTICON_IMAGE_MODE = "RGB"
IDENTICON_DEFAULT_FORMAT = "png"
IDENTICON_FORMATS = {
    "png": {"pil_format": "PNG", "media_type": "image/png", "extension": "png"},
    "jpeg": {"pil_format": "JPEG", "media_type": "image/jpeg", "extension": "jpg"},
}
IDENTICON_MAX_SIZE = 800  # Максимальный размер при масштабировании через API
